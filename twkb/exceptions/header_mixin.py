from typing import NoReturn

from twkb.exceptions.decode_error import (
    NestingTooDeepError,
    SizeMismatchError,
    UnknownGeometryError,
)


class HeaderExceptionsMixin:
    def unknown_geometry_type(self, code: int) -> NoReturn:
        raise UnknownGeometryError(code)

    def size_mismatch(self, declared: int, actual: int) -> NoReturn:
        raise SizeMismatchError(declared, actual)

    def collection_too_deep(self, depth: int) -> NoReturn:
        raise NestingTooDeepError(f'Geometry collection nesting exceeds {depth} levels')
