import cython

from twkb.lib.byte_reader import ByteReader
from twkb.lib.exceptions_context import raise_for
from twkb.limits import VARINT_MAX_BYTES


def unzigzag(value: int) -> int:
    """
    Map a zigzag-encoded unsigned integer back to a signed integer.

    >>> [unzigzag(v) for v in (0, 1, 2, 3, 4)]
    [0, -1, 1, -2, 2]
    """
    v: cython.ulonglong = value
    if v & 1:
        return -cython.cast(cython.longlong, v >> 1) - 1
    return cython.cast(cython.longlong, v >> 1)


def read_uvarint(
    reader: ByteReader,
    *,
    VARINT_MAX_BYTES: cython.int = VARINT_MAX_BYTES,
) -> int:
    """
    Read an unsigned little-endian base-128 varint.

    Raises a malformed varint error when the value does not fit in 64 bits.
    """
    result: cython.ulonglong = 0
    shift: cython.int = 0
    i: cython.int
    b: cython.int

    for i in range(VARINT_MAX_BYTES):
        b = reader.read_byte()

        # the 10th byte may only contribute the top bit of a 64-bit value
        if shift == 63 and b > 1:
            raise_for.varint_too_long(reader.position)

        result |= cython.cast(cython.ulonglong, b & 0x7F) << shift
        if not b & 0x80:
            return result

        shift += 7

    raise_for.varint_too_long(reader.position)


def read_svarint(reader: ByteReader) -> int:
    """Read a zigzag-encoded signed varint."""
    return unzigzag(read_uvarint(reader))


def read_svarints(reader: ByteReader, count: int) -> list[int]:
    """Read a run of signed varints, e.g. an id list or a coordinate delta block."""
    return [unzigzag(read_uvarint(reader)) for _ in range(count)]
