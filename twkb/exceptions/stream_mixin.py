from typing import NoReturn

from twkb.exceptions.decode_error import (
    MalformedVarintError,
    StreamReadError,
    UnexpectedEOFError,
)


class StreamExceptionsMixin:
    def unexpected_eof(self, position: int) -> NoReturn:
        raise UnexpectedEOFError(f'Unexpected end of data at byte {position}', position)

    def stream_read_failed(self, position: int, error: OSError) -> NoReturn:
        raise StreamReadError(f'Failed to read byte {position}: {error}', position) from error

    def varint_too_long(self, position: int) -> NoReturn:
        raise MalformedVarintError(f'Varint ending at byte {position} exceeds 64 bits')
