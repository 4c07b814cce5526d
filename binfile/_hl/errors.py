"""
    Implements the errors raised when a file header does not match its kind.

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


class BinFileError(IOError):
    """
        Base class for header errors.
        Derives from IOError so that code only handling I/O failures still catches it.
    """
    message_template = ''

    def __init__(self, filename: str, expected: int, actual: int):
        """
        Create a new header error.
        :param filename: path of the offending file
        :param expected: value configured for the file kind
        :param actual: value found in the file
        """
        # a single argument keeps errno and strerror unset
        super().__init__(self.message_template.format(filename=filename, expected=expected, actual=actual))
        self.filename = filename
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return self.args[0]

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.filename, self.expected, self.actual) == (other.filename, other.expected, other.actual)

    def __hash__(self) -> int:
        return hash((type(self), self.filename, self.expected, self.actual))

    def __reduce__(self):
        return type(self), (self.filename, self.expected, self.actual)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(filename={self.filename!r}, expected={self.expected!r}, actual={self.actual!r})'


class InvalidMagic(BinFileError):
    """
        The first 8 bytes of the file are not the expected magic number.
    """
    message_template = "invalid magic number {actual:#10x} instead of {expected:#10x} in file '{filename}'."


class InvalidVersion(BinFileError):
    """
        The 2 bytes following the magic number are not the expected version.
    """
    message_template = "invalid version {actual} instead of {expected} in file '{filename}'."
