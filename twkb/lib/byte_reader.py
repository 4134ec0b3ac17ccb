from typing import BinaryIO, Protocol

from twkb.lib.exceptions_context import raise_for

Buffer = bytes | bytearray | memoryview


class ByteReader(Protocol):
    @property
    def position(self) -> int: ...

    def read_byte(self) -> int: ...

    def remaining(self) -> int | None: ...


class BufferReader:
    """Read bytes from an in-memory buffer."""

    __slots__ = ('_data', '_position')

    def __init__(self, data: Buffer, position: int = 0) -> None:
        self._data = memoryview(data).cast('B')
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    def read_byte(self) -> int:
        position = self._position
        if position >= len(self._data):
            raise_for.unexpected_eof(position)
        self._position = position + 1
        return self._data[position]

    def remaining(self) -> int:
        return len(self._data) - self._position


class StreamReader:
    """
    Read bytes one at a time from a binary stream.

    Only the bytes belonging to the decoded value are consumed.
    """

    __slots__ = ('_position', '_stream')

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def read_byte(self) -> int:
        position = self._position
        try:
            b = self._stream.read(1)
        except OSError as e:
            raise_for.stream_read_failed(position, e)
        if not b:
            raise_for.unexpected_eof(position)
        self._position = position + 1
        return b[0]

    def remaining(self) -> None:
        return None


def make_reader(data: Buffer | BinaryIO) -> ByteReader:
    if isinstance(data, bytes | bytearray | memoryview):
        return BufferReader(data)
    return StreamReader(data)
