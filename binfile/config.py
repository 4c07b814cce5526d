"""
    Configuration file

    This file is part of Binfile.

    Binfile is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    Binfile is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with Binfile.  If not, see <https://www.gnu.org/licenses/>.
"""

"""
    Byte order of the header fields (numpy notation, big-endian).
"""
BYTE_ORDER = '>'

"""
    Number of bytes in which to store the magic number.
"""
NUM_BYTES_MAGIC = 8
"""
    Number of bytes in which to store the version number.
"""
NUM_BYTES_VERSION = 2
"""
    Total size of the header, the payload starts right after it.
"""
NUM_BYTES_HEADER = NUM_BYTES_MAGIC + NUM_BYTES_VERSION

"""
    Largest magic number fitting in the header.
"""
MAX_MAGIC = 2 ** (8 * NUM_BYTES_MAGIC) - 1
"""
    Largest version number fitting in the header.
"""
MAX_VERSION = 2 ** (8 * NUM_BYTES_VERSION) - 1

"""
    Version used when a file kind does not specify one. Numbering starts at 1, 0 is left unused.
"""
DEFAULT_VERSION = 1
