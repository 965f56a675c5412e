"""
    Configuration file

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
import os
import sys

"""
    Byte order codes, as understood by numpy.
"""
LITTLE_ENDIAN = '<'
BIG_ENDIAN = '>'
NATIVE_ENDIAN = LITTLE_ENDIAN if sys.byteorder == 'little' else BIG_ENDIAN

"""
    Accepted byte order names and the code they resolve to.
"""
BYTE_ORDERS = {
    '<': LITTLE_ENDIAN,
    'little': LITTLE_ENDIAN,
    '>': BIG_ENDIAN,
    'big': BIG_ENDIAN,
    '=': NATIVE_ENDIAN,
    'native': NATIVE_ENDIAN
}

"""
    Seek modes: absolute, relative to the cursor, relative to the end.
"""
SEEK_SET = os.SEEK_SET
SEEK_CUR = os.SEEK_CUR
SEEK_END = os.SEEK_END

"""
    Fixed-width types by numpy kind code, with their allowed sizes in bytes:
        - 'b' bool
        - 'i' signed integers
        - 'u' unsigned integers
        - 'f' IEEE floats
        - 'c' complex numbers made of two IEEE floats
"""
FIXED_WIDTH_TYPES = {
    'b': (1,),
    'i': (1, 2, 4, 8),
    'u': (1, 2, 4, 8),
    'f': (4, 8),
    'c': (8, 16)
}
