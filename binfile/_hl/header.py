"""
    Implements high-level support for header serialization.

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
from typing import Union

import numpy as np

from .. import config

"""
Header field types (unsigned big-endian integers)
"""
magic_dtype = np.dtype(f'{config.BYTE_ORDER}u{config.NUM_BYTES_MAGIC}')
version_dtype = np.dtype(f'{config.BYTE_ORDER}u{config.NUM_BYTES_VERSION}')


def _validate_integer(value: int, name: str, max_value: int) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise TypeError(f'Expected {name} type to be int, got {type(value)}.')

    value = int(value)

    if not 0 <= value <= max_value:
        raise ValueError(f'Expected {name} to be in range [0, {max_value:#x}], got {value:#x}.')

    return value


def validate_magic(magic: int) -> int:
    """
    Check that the magic number fits in the header.
    :param magic: magic number
    :return: magic number as a python int
    """
    return _validate_integer(magic, 'magic', config.MAX_MAGIC)


def validate_version(version: int) -> int:
    """
    Check that the version number fits in the header.
    :param version: version number
    :return: version number as a python int
    """
    return _validate_integer(version, 'version', config.MAX_VERSION)


def magic_from_bytes(magic_bytes: Union[bytes, bytearray, memoryview]) -> int:
    """
    Convert an identifier such as b"MYMAGIC!" into a magic number.
    :param magic_bytes: 8-byte identifier, in the order it appears on disk
    :return: magic number
    """
    magic_bytes = bytes(magic_bytes)

    if len(magic_bytes) != config.NUM_BYTES_MAGIC:
        raise ValueError(f'Expected magic to be {config.NUM_BYTES_MAGIC} bytes long, got {len(magic_bytes)}.')

    return deserialize_magic(magic_bytes)


def serialize_magic(magic: int) -> bytes:
    """
    Serialize the magic number to big endian encoded bytes.
    :param magic: magic number
    :return: 8-byte array representation of the magic number
    """
    return np.array([validate_magic(magic)], dtype=magic_dtype).tobytes()


def deserialize_magic(magic_bytes: bytes) -> int:
    """
    Deserialize the magic number from big endian encoded bytes.
    :param magic_bytes: 8-byte array representation of the magic number
    :return: magic number
    """
    if len(magic_bytes) != config.NUM_BYTES_MAGIC:
        raise ValueError(f'Expected {config.NUM_BYTES_MAGIC} magic bytes, got {len(magic_bytes)}.')

    return int(np.frombuffer(magic_bytes, dtype=magic_dtype)[0])


def serialize_version(version: int) -> bytes:
    """
    Serialize the version number to big endian encoded bytes.
    :param version: version number
    :return: 2-byte array representation of the version number
    """
    return np.array([validate_version(version)], dtype=version_dtype).tobytes()


def deserialize_version(version_bytes: bytes) -> int:
    """
    Deserialize the version number from big endian encoded bytes.
    :param version_bytes: 2-byte array representation of the version number
    :return: version number
    """
    if len(version_bytes) != config.NUM_BYTES_VERSION:
        raise ValueError(f'Expected {config.NUM_BYTES_VERSION} version bytes, got {len(version_bytes)}.')

    return int(np.frombuffer(version_bytes, dtype=version_dtype)[0])


def serialize_header(magic: int, version: int) -> bytes:
    """
    Serialize the full header: magic number followed by version number.
    :param magic: magic number
    :param version: version number
    :return: 10-byte header
    """
    return serialize_magic(magic) + serialize_version(version)
