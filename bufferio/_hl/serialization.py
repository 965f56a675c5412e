"""
    Implements fixed-layout binary serialization.

    A fixed-layout value is a numpy scalar, a numpy array or a structured numpy record
    whose every field has a fixed width. It is encoded packed, without alignment padding,
    with each multi-byte scalar in the requested byte order.

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
from typing import Any, Tuple, Union
from numpy import ndarray
from numpy import dtype

import numpy as np

from .errors import EncodingError, InvalidArgumentError
from .. import config


def format_byte_order(order: str) -> str:
    """
    Converts a byte order name into a numpy byte order code,
     raises an exception if it is not possible.
    :param order: byte order name (e.g. "<", "little", ">", "big")
    :return: byte order code
    """
    if order not in config.BYTE_ORDERS:
        raise InvalidArgumentError(f'Byte order {order!r} is not supported. '
                                   f'Supported byte orders are: {", ".join(config.BYTE_ORDERS.keys())}')

    return config.BYTE_ORDERS[order]


def wire_dtype(data_type: dtype, order: str, decoding: bool = False) -> dtype:
    """
    Build the packed type used to encode values of the given type in the given byte order,
     raises an exception if the type has no fixed-width binary representation.
    :param data_type: numpy type, possibly structured
    :param order: byte order code
    :param decoding: read bools as raw bytes, so that any non-zero byte decodes to True
    :return: packed numpy type in the requested byte order
    """
    if data_type.names is not None:
        return np.dtype([(name, wire_dtype(data_type.fields[name][0], order, decoding)) for name in data_type.names])

    if data_type.subdtype is not None:
        base_type, shape = data_type.subdtype
        return np.dtype((wire_dtype(base_type, order, decoding), shape))

    if data_type.itemsize not in config.FIXED_WIDTH_TYPES.get(data_type.kind, ()):
        raise EncodingError(f'Type {data_type} has no fixed-width binary representation.')

    if decoding and data_type.kind == 'b':
        return np.dtype(np.uint8)

    return data_type.newbyteorder(order)


def as_fixed_layout(value: Any) -> ndarray:
    """
    Convert a value to a numpy array, without copying it when possible.
    :param value: numpy scalar, numpy array, or list/tuple of numpy values sharing one type
    :return: array view of the value
    """
    if isinstance(value, (ndarray, np.generic)):
        return np.asarray(value)

    if isinstance(value, (list, tuple)):
        if len(value) == 0:
            return np.empty(0, dtype=np.uint8)

        if not all(isinstance(element, (ndarray, np.generic)) for element in value):
            raise EncodingError('Expected sequence elements to be numpy values, got '
                                f'{", ".join(sorted({type(element).__name__ for element in value}))}.')

        element_types = {element.dtype for element in value}
        if len(element_types) != 1:
            raise EncodingError(f'Expected a homogeneous sequence, got types: '
                                f'{", ".join(str(element_type) for element_type in element_types)}.')

        try:
            return np.array(value, dtype=element_types.pop())
        except ValueError as e:
            raise EncodingError(f'Sequence elements do not share a fixed shape: {e}') from e

    raise EncodingError(f'Type {type(value).__name__} has no fixed-width binary representation.')


def as_dtype(data_type: Any) -> dtype:
    """
    Convert a numpy type specification to a numpy type.
    :param data_type: anything accepted by numpy.dtype
    :return: numpy type
    """
    try:
        return np.dtype(data_type)
    except (TypeError, ValueError) as e:
        raise EncodingError(f'{data_type!r} is not a numpy type.') from e


def encoded_size(value: Any, order: str = config.NATIVE_ENDIAN) -> int:
    """
    Compute the number of bytes a value occupies once serialized.
    :param value: fixed-layout value, or a numpy type for the size of a single instance
    :param order: byte order name
    :return: size in bytes
    """
    order = format_byte_order(order)

    if isinstance(value, (ndarray, np.generic, list, tuple)):
        array = as_fixed_layout(value)
        return wire_dtype(array.dtype, order).itemsize * array.size

    return wire_dtype(as_dtype(value), order).itemsize


def serialize_value(value: Any, order: str) -> bytes:
    """
    Serialize a fixed-layout value to byte string.
    :param value: numpy scalar, array, structured record or homogeneous sequence
    :param order: byte order name
    :return: serialized value
    """
    order = format_byte_order(order)
    array = as_fixed_layout(value)

    return array.astype(wire_dtype(array.dtype, order)).tobytes()


def deserialize_array(array_serialized: Union[bytes, ndarray], data_type: dtype, shape: Tuple[int, ...],
                      order: str) -> ndarray:
    """
    Deserialize an array of the given type and shape from the first bytes of a byte string.
    :param array_serialized: serialized array, possibly followed by other bytes
    :param data_type: type of the resulting array
    :param shape: shape of the resulting array
    :param order: byte order name
    :return: numpy array of the specified type and shape, in native byte order
    """
    order = format_byte_order(order)
    encoded_type = wire_dtype(data_type, order, decoding=True)
    count = int(np.prod(shape, dtype=np.int64))
    num_bytes = encoded_type.itemsize * count

    if len(array_serialized) < num_bytes:
        raise EncodingError(f'Expected at least {num_bytes} bytes to decode {count} value(s) of type {data_type}, '
                            f'got {len(array_serialized)}.')

    if count == 0:
        return np.empty(shape, dtype=data_type)

    array = np.frombuffer(array_serialized, dtype=encoded_type, count=count)

    return array.astype(data_type).reshape(shape)
