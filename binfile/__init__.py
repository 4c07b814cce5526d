"""
    Python implementation of binary files with magic numbers and versioning.

    A file kind is bound to a 64-bit magic number and a 16-bit version. Every file of that kind starts
    with both, serialized in big endian order, and the header is checked each time the file is opened
    so that a file of another format or revision is rejected before any payload byte is read.

    The data is stored in a binary file as follows:
    <MAGIC NUMBER (8 bytes)><VERSION (2 bytes)><PAYLOAD>
"""
from ._hl.files import BinFile, binfile_type
from ._hl.header import magic_from_bytes
from ._hl.errors import BinFileError, InvalidMagic, InvalidVersion
from .version import version as __version__
