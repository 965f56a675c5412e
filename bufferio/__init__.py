"""
    Python implementation of a fixed-capacity seekable byte buffer.

    A buffer wraps a byte region whose length never changes and keeps a cursor into it.
    It supports positional reads and writes, sequential reads and writes that advance the cursor,
    seeking, and the encoding/decoding of fixed-layout numpy values in a chosen byte order.
"""
from ._hl.buffer import Buffer
from ._hl.errors import BufferIOError, OverrunError, EndOfDataError, InvalidArgumentError, EncodingError
from ._hl.serialization import encoded_size
from .config import LITTLE_ENDIAN, BIG_ENDIAN, NATIVE_ENDIAN, SEEK_SET, SEEK_CUR, SEEK_END
from .version import version as __version__
