from typing import NoReturn

from twkb.exceptions.decode_error import ShapelyConversionError
from twkb.models.geometry_type import GeometryType


class ConvertExceptionsMixin:
    def shapely_conversion_failed(self, geometry_type: GeometryType, error: Exception) -> NoReturn:
        raise ShapelyConversionError(f'Cannot convert {geometry_type.name} to shapely: {error}') from error
