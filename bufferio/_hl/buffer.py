"""
    Implements high-level support for buffer objects.

    This file is part of BufferIO.

    BufferIO is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    BufferIO is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with BufferIO.  If not, see <https://www.gnu.org/licenses/>.
"""
import logging
import operator
from typing import Any, Union
from numpy import ndarray

import numpy as np

from .errors import OverrunError, EndOfDataError, InvalidArgumentError, EncodingError
from .serialization import serialize_value, deserialize_array, as_dtype
from .. import config

logger = logging.getLogger(__name__)


def _byte_view(obj: Any, name: str) -> memoryview:
    try:
        view = memoryview(obj)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f'Expected {name} to be a contiguous bytes-like object, '
                                   f'got {type(obj).__name__}.') from e

    # Object arrays hold references, not bytes
    has_objects = obj.dtype.hasobject if isinstance(obj, ndarray) else 'O' in view.format
    if has_objects:
        raise InvalidArgumentError(f'Expected {name} to hold raw bytes, got an array of Python objects.')

    try:
        return view.cast('B')
    except TypeError as e:
        raise InvalidArgumentError(f'Expected {name} to be a contiguous bytes-like object, '
                                   f'got {type(obj).__name__}.') from e


def _as_index(value: Any, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError as e:
        raise InvalidArgumentError(f'Expected {name} to be an integer, got {type(value).__name__}.') from e


class Buffer:
    """
    Represents a fixed-length byte region with a cursor.

    The region never grows: writes past its end are truncated and reads past its end return
    fewer bytes. A transfer starting at or after the end raises an exception.

    A buffer holds no lock and is not safe for concurrent use: callers sharing one between
    threads must serialize the accesses themselves.
    """
    def __init__(self, region: Any):
        """
        Create a new buffer wrapping an existing byte region.
        The region is not copied: the caller must not modify it independently while the buffer is in use.
        :param region: object exposing a contiguous buffer (bytearray, memoryview, numpy array, bytes)
        """
        self._buf: ndarray = np.asarray(_byte_view(region, 'region'))
        self._off: int = 0

        logger.debug(f'Created buffer of {len(self._buf)} bytes (writeable={self._buf.flags.writeable})')

    @classmethod
    def from_bytes(cls, region: Any) -> 'Buffer':
        """
        Create a new buffer wrapping an existing byte region, without copying it.
        A read-only region (e.g. bytes) can only be read from.
        :param region: object exposing a contiguous buffer
        :return: Buffer object
        """
        return cls(region)

    @classmethod
    def with_capacity(cls, num_bytes: int) -> 'Buffer':
        """
        Create a new buffer over a zero-filled region.
        :param num_bytes: size of the region
        :return: Buffer object
        """
        num_bytes = _as_index(num_bytes, 'capacity')
        if num_bytes < 0:
            raise InvalidArgumentError(f'Expected a non-negative capacity, got {num_bytes}.')

        return cls(np.zeros(num_bytes, dtype=np.uint8))

    def __len__(self) -> int:
        return len(self._buf)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(size={len(self._buf)}, offset={self._off})'

    @property
    def data(self) -> ndarray:
        """
        Backing region, shared with the buffer.
        :return: one-dimensional uint8 array
        """
        return self._buf

    @property
    def remaining(self) -> int:
        """
        Number of bytes between the cursor and the end of the buffer.
        """
        return len(self._buf) - self._off

    def size(self) -> int:
        return len(self._buf)

    def tell(self) -> int:
        return self._off

    def reset(self):
        """
        Move the cursor back to the start of the buffer.
        :return:
        """
        self._off = 0

    def tobytes(self) -> bytes:
        """
        Copy the whole region.
        :return: content of the buffer
        """
        return self._buf.tobytes()

    def _validate_offset(self, offset: int) -> int:
        offset = _as_index(offset, 'offset')
        if offset < 0:
            raise InvalidArgumentError(f'Expected a non-negative offset, got {offset}.', offset, len(self._buf))

        return offset

    def write_at(self, data: Any, offset: int) -> int:
        """
        Copy bytes into the buffer at the given position, without moving the cursor.
        Bytes that do not fit before the end of the buffer are dropped.
        :param data: bytes-like object to copy
        :param offset: position of the first byte to write
        :return: number of bytes copied
        """
        offset = self._validate_offset(offset)

        if offset >= len(self._buf):
            raise OverrunError('Buffer overrun.', offset, len(self._buf))

        if not self._buf.flags.writeable:
            raise InvalidArgumentError('Trying to write to a read-only buffer.', offset, len(self._buf))

        source = _byte_view(data, 'data')
        num_bytes = min(len(source), len(self._buf) - offset)
        self._buf[offset:offset + num_bytes] = source[:num_bytes]

        return num_bytes

    def read_at(self, dst: Any, offset: int) -> int:
        """
        Copy bytes from the buffer at the given position, without moving the cursor.
        :param dst: writeable bytes-like object to fill
        :param offset: position of the first byte to read
        :return: number of bytes copied, less than len(dst) when the end of the buffer is reached
        """
        offset = self._validate_offset(offset)

        if offset >= len(self._buf):
            raise EndOfDataError('End of data.', offset, len(self._buf))

        target = _byte_view(dst, 'dst')
        if target.readonly:
            raise InvalidArgumentError(f'Expected dst to be writeable, got read-only {type(dst).__name__}.')

        num_bytes = min(len(target), len(self._buf) - offset)
        target[:num_bytes] = self._buf[offset:offset + num_bytes].tobytes()

        return num_bytes

    def write(self, data: Any) -> int:
        """
        Copy bytes into the buffer at the cursor and advance the cursor past them.
        :param data: bytes-like object to copy
        :return: number of bytes copied
        """
        num_bytes = self.write_at(data, self._off)
        self._off += num_bytes

        return num_bytes

    def read(self, dst: Any) -> int:
        """
        Copy bytes from the buffer at the cursor and advance the cursor past them.
        :param dst: writeable bytes-like object to fill
        :return: number of bytes copied
        """
        num_bytes = self.read_at(dst, self._off)
        self._off += num_bytes

        return num_bytes

    def seek(self, offset: int, whence: int = config.SEEK_SET) -> int:
        """
        Move the cursor.
        Seeking relative to the end of the buffer is not supported and always raises OverrunError.
        :param offset: new position (SEEK_SET) or displacement from the cursor (SEEK_CUR)
        :param whence: one of SEEK_SET, SEEK_CUR, SEEK_END
        :return: new position of the cursor
        """
        if whence == config.SEEK_SET:
            position = _as_index(offset, 'offset')
        elif whence == config.SEEK_CUR:
            position = self._off + _as_index(offset, 'offset')
        elif whence == config.SEEK_END:
            raise OverrunError('Seeking relative to the end of the buffer is not supported.')
        else:
            raise InvalidArgumentError(f'Invalid whence {whence}.')

        if position >= len(self._buf):
            raise OverrunError('Buffer overrun.', position, len(self._buf))
        if position < 0:
            raise InvalidArgumentError('Negative position.', position, len(self._buf))

        self._off = position

        return position

    def write_data(self, order: str, value: Any) -> int:
        """
        Serialize a fixed-layout value and write it at the cursor, advancing the cursor.
        As with write, bytes that do not fit before the end of the buffer are dropped.
        :param order: byte order name ("<", "little", ">", "big")
        :param value: numpy scalar, array, structured record or homogeneous sequence of numpy values
        :return: number of bytes written
        """
        value_serialized = serialize_value(value, order)
        logger.debug(f'Writing {len(value_serialized)} encoded bytes at offset {self._off}')

        return self.write(value_serialized)

    def write_data_le(self, value: Any) -> int:
        return self.write_data(config.LITTLE_ENDIAN, value)

    def write_data_be(self, value: Any) -> int:
        return self.write_data(config.BIG_ENDIAN, value)

    def read_data(self, order: str, target: Any) -> Union[ndarray, np.generic]:
        """
        Decode a fixed-layout value from the bytes at the cursor.
        Unlike write_data, the cursor is NOT advanced: call seek to move past the decoded bytes.
        :param order: byte order name ("<", "little", ">", "big")
        :param target: writeable numpy array, filled in place, or numpy type of a single value to decode
        :return: the filled array, or the decoded scalar/record when a type was given
        """
        if isinstance(target, ndarray):
            if not target.flags.writeable:
                raise EncodingError('Trying to decode into a read-only array.')

            target[...] = deserialize_array(self._buf[self._off:], target.dtype, target.shape, order)
            logger.debug(f'Decoded {target.size} value(s) of type {target.dtype} at offset {self._off}')
            return target

        data_type = as_dtype(target)
        if data_type.subdtype is not None:
            # Fixed-size array type: decode its elements into an array of its shape
            base_type, shape = data_type.subdtype
            value = deserialize_array(self._buf[self._off:], base_type, shape, order)
            logger.debug(f'Decoded an array of type {data_type} at offset {self._off}')
            return value

        value = deserialize_array(self._buf[self._off:], data_type, (), order)[()]
        logger.debug(f'Decoded a value of type {data_type} at offset {self._off}')

        return value

    def read_data_le(self, target: Any) -> Union[ndarray, np.generic]:
        return self.read_data(config.LITTLE_ENDIAN, target)

    def read_data_be(self, target: Any) -> Union[ndarray, np.generic]:
        return self.read_data(config.BIG_ENDIAN, target)
