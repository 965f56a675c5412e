"""
    Implements the exceptions raised by buffer objects.

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
from typing import Optional


class BufferIOError(Exception):
    """
    Base class of all the exceptions raised by a buffer.

    Attributes:
        message -- explanation of the error
        offset -- position in the buffer at which the error occurred, if any
        size -- size of the buffer, if relevant
    """
    def __init__(self, message: str, offset: Optional[int] = None, size: Optional[int] = None):
        self.message = message
        self.offset = offset
        self.size = size
        super().__init__(self.message)

    def __str__(self):
        if self.offset is not None and self.size is not None:
            return f"{self.message} (offset={self.offset}, size={self.size})"
        return self.message


class OverrunError(BufferIOError, BufferError):
    """
    Raised when a write or a seek targets a position at or past the end of the buffer.
    """


class EndOfDataError(BufferIOError, EOFError):
    """
    Raised when a read starts at or past the end of the buffer.
    """


class InvalidArgumentError(BufferIOError, ValueError):
    """
    Raised on an unknown seek mode or byte order, a negative position, or an unusable byte region.
    """


class EncodingError(BufferIOError, ValueError):
    """
    Raised when a value has no fixed-width binary representation,
    or when too few bytes remain to decode it.
    """
