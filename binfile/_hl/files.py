"""
    Implements high-level support for file objects.

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
from typing import Union, Optional, Type, BinaryIO, Any
from types import TracebackType

import logging
import os

from .errors import InvalidMagic, InvalidVersion
from .header import (magic_from_bytes, validate_magic, validate_version, serialize_header, serialize_magic,
                     serialize_version, deserialize_magic, deserialize_version)
from .. import config

logger = logging.getLogger(__name__)

PathType = Union[str, bytes, os.PathLike]


class BinFile:
    """
        Binary file which always starts with a given magic number and version.

        A file kind is a subclass setting the MAGIC and VERSION class attributes:

            class MyFile(BinFile):
                MAGIC = magic_from_bytes(b'MYMAGIC!')
                VERSION = 1

        Both are written in big endian order as the first 10 bytes of the file and checked every time the
        file is opened. Everything after the header is left to the caller: reads and writes go straight
        to the underlying file object.
    """
    MAGIC: Optional[int] = None
    VERSION: int = config.DEFAULT_VERSION

    def __init_subclass__(cls, **kwargs):
        """
        Validate the kind configuration when the subclass is defined.
        """
        super().__init_subclass__(**kwargs)

        if isinstance(cls.MAGIC, (bytes, bytearray, memoryview)):
            cls.MAGIC = magic_from_bytes(cls.MAGIC)
        if cls.MAGIC is not None:
            cls.MAGIC = validate_magic(cls.MAGIC)
        cls.VERSION = validate_version(cls.VERSION)

    def __init__(self, fp: BinaryIO, file_path: PathType):
        """
        Wrap an already opened file object.
        Use one of create, create_new, open or open_rw instead: they take care of the header.
        :param fp: file object, positioned right after the header
        :param file_path: path to the file on disk
        """
        self._fp = fp
        self._file_path = file_path

    @classmethod
    def header(cls) -> bytes:
        """
        Get the header starting every file of this kind.
        :return: magic number followed by version number, 10 bytes in total
        """
        cls._validate_kind()
        return serialize_header(cls.MAGIC, cls.VERSION)

    @classmethod
    def create(cls, file_path: PathType) -> 'BinFile':
        """
        Open the file in read-write mode, creating it if it does not exist and truncating it if it does.
        The header is written at the start of the file and the returned stream starts at byte offset 10.
        :param file_path: path to the file on disk
        :return: file object
        """
        return cls._create(file_path, 'w+b')

    @classmethod
    def create_new(cls, file_path: PathType) -> 'BinFile':
        """
        Create a new file in read-write mode, raises FileExistsError if the file already exists.
        The header is written at the start of the file and the returned stream starts at byte offset 10.
        :param file_path: path to the file on disk
        :return: file object
        """
        return cls._create(file_path, 'x+b')

    @classmethod
    def open(cls, file_path: PathType) -> 'BinFile':
        """
        Open an existing file in read-only mode and check its header.
        The returned stream starts at byte offset 10.
        :param file_path: path to the file on disk
        :return: file object
        """
        return cls._open(file_path, 'rb')

    @classmethod
    def open_rw(cls, file_path: PathType) -> 'BinFile':
        """
        Open an existing file in read-write mode and check its header.
        The returned stream starts at byte offset 10.
        :param file_path: path to the file on disk
        :return: file object
        """
        return cls._open(file_path, 'r+b')

    @classmethod
    def _validate_kind(cls):
        if cls.MAGIC is None:
            raise TypeError(f'{cls.__name__} has no MAGIC configured, subclass it or use binfile_type().')

    @classmethod
    def _create(cls, file_path: PathType, mode: str) -> 'BinFile':
        header = cls.header()
        fp = open(file_path, mode)

        try:
            fp.write(header)
            fp.flush()
        except BaseException:
            fp.close()
            raise

        logger.debug('Wrote header (magic %#x, version %d) to "%s".', cls.MAGIC, cls.VERSION,
                     os.fsdecode(file_path))

        return cls(fp, file_path)

    @classmethod
    def _open(cls, file_path: PathType, mode: str) -> 'BinFile':
        cls._validate_kind()
        fp = open(file_path, mode)
        bin_file = cls(fp, file_path)

        try:
            bin_file._read_header()
        except BaseException:
            fp.close()
            raise

        logger.debug('Checked header (magic %#x, version %d) of "%s".', cls.MAGIC, cls.VERSION,
                     os.fsdecode(file_path))

        return bin_file

    def _read_header(self):
        """
        Read the header from file and compare it with the kind configuration.
        :return:
        """
        header_magic = self._read_exact(config.NUM_BYTES_MAGIC)

        if header_magic != serialize_magic(self.MAGIC):
            error = InvalidMagic(self.path, self.MAGIC, deserialize_magic(header_magic))
            logger.warning('%s', error)
            raise error

        header_version = self._read_exact(config.NUM_BYTES_VERSION)

        if header_version != serialize_version(self.VERSION):
            error = InvalidVersion(self.path, self.VERSION, deserialize_version(header_version))
            logger.warning('%s', error)
            raise error

    def _read_exact(self, size: int) -> bytes:
        data = self._fp.read(size)

        if len(data) != size:
            logger.warning('Truncated header in "%s".', self.path)
            raise IOError(f'Unexpected end of file "{self.path}": expected {size} bytes, got {len(data)}.')

        return data

    @property
    def path(self) -> str:
        """
        Path to the file on disk.
        """
        return os.fsdecode(self._file_path)

    def read(self, size: int = -1) -> bytes:
        return self._fp.read(size)

    def readinto(self, buffer) -> int:
        return self._fp.readinto(buffer)

    def write(self, data) -> int:
        return self._fp.write(data)

    def flush(self):
        self._fp.flush()

    def close(self):
        """
        Close file object.
        Needs to be called explicitly or use a "with" statement.
        :return:
        """
        self._fp.close()

    def __getattr__(self, name: str) -> Any:
        """
        Forward any other attribute (seek, tell, fileno, closed, ...) to the underlying file object.
        :param name: name of the attribute
        :return: attribute of the underlying file object
        """
        if name == '_fp':
            raise AttributeError(name)
        return getattr(self._fp, name)

    def __enter__(self):
        """
        Return BinFile object when using a "with" statement.
        :return: BinFile object
        """
        return self

    def __exit__(self, exception_type: Optional[Type[BaseException]], exception_value: Optional[BaseException],
                 traceback: Optional[TracebackType]):
        """
        Explicitly close the BinFile when exiting a "with" context.
        :param exception_type: type of exception
        :param exception_value: value of exception
        :param traceback: traceback
        :return:
        """
        self.close()

    def __repr__(self) -> str:
        magic = 'None' if self.MAGIC is None else f'{self.MAGIC:#x}'
        return f'<{type(self).__name__} magic={magic} version={self.VERSION} path="{self.path}">'


def binfile_type(magic: Union[int, bytes], version: int = config.DEFAULT_VERSION,
                 name: Optional[str] = None) -> Type[BinFile]:
    """
    Create a file kind at run time.
    :param magic: magic number, or its 8-byte identifier (e.g. b"MYMAGIC!")
    :param version: version number
    :param name: name of the created class
    :return: BinFile subclass
    """
    if isinstance(magic, (bytes, bytearray, memoryview)):
        magic = magic_from_bytes(magic)

    magic = validate_magic(magic)
    version = validate_version(version)

    name = name or f'BinFile_{magic:016x}_v{version}'

    return type(name, (BinFile,), {'MAGIC': magic, 'VERSION': version, '__module__': __name__})
