from typing import NoReturn, override

import pytest

from twkb.exceptions import Exceptions
from twkb.exceptions.decode_error import TWKBDecodeError, UnknownGeometryError
from twkb.lib.exceptions_context import exceptions_context
from twkb.lib.twkb_decoder import decode_hex, iter_decode
from twkb.models.geometry_type import GeometryType


class _LookupExceptions(Exceptions):
    @override
    def unknown_geometry_type(self, code: int) -> NoReturn:
        raise LookupError(f'no geometry {code}')


def test_default_exceptions():
    with pytest.raises(UnknownGeometryError, match='Unknown geometry type 9'):
        decode_hex('0900')


def test_exceptions_context_override():
    with exceptions_context(_LookupExceptions()), pytest.raises(LookupError, match='no geometry 9'):
        decode_hex('0900')

    # restored after leaving the context
    with pytest.raises(UnknownGeometryError):
        decode_hex('0900')


def test_errors_are_decode_errors():
    with pytest.raises(TWKBDecodeError):
        decode_hex('0100')
    with pytest.raises(ValueError):
        decode_hex('0000')


class _EOFExceptions(Exceptions):
    @override
    def unexpected_eof(self, position: int) -> NoReturn:
        raise EOFError(position)


def test_iter_decode_buffer_with_eof_override():
    data = bytes.fromhex('01000204' + '02000202020808')
    with exceptions_context(_EOFExceptions()):
        geoms = list(iter_decode(data))
    assert [g.type for g in geoms] == [GeometryType.POINT, GeometryType.LINESTRING]

    # a truncated value still fails
    with exceptions_context(_EOFExceptions()), pytest.raises(EOFError):
        list(iter_decode(data[:-1]))
