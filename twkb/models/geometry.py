from typing import ClassVar

import msgspec

from twkb.models.geometry_type import Dimension, GeometryType

type Coordinate = tuple[float, ...]
type LinearRing = tuple[Coordinate, ...]

# [minx, miny, (minz|minm), (minm), maxx, maxy, (maxz|maxm), (maxm)]
type BBox = tuple[float, ...]


class Point(msgspec.Struct, frozen=True, kw_only=True):
    """
    A single position.

    coord holds dim.ndims values, except for an empty point (the TWKB empty
    flag), whose coord is the empty tuple.
    """

    type: ClassVar[GeometryType] = GeometryType.POINT
    dim: Dimension
    coord: Coordinate
    bbox: BBox | None = None

    @property
    def is_empty(self) -> bool:
        return not self.coord


class LineString(msgspec.Struct, frozen=True, kw_only=True):
    type: ClassVar[GeometryType] = GeometryType.LINESTRING
    dim: Dimension
    coords: tuple[Coordinate, ...]
    bbox: BBox | None = None

    @property
    def is_empty(self) -> bool:
        return not self.coords


class Polygon(msgspec.Struct, frozen=True, kw_only=True):
    type: ClassVar[GeometryType] = GeometryType.POLYGON
    dim: Dimension
    rings: tuple[LinearRing, ...]  # exterior first
    bbox: BBox | None = None

    @property
    def is_empty(self) -> bool:
        return not self.rings


class MultiPoint(msgspec.Struct, frozen=True, kw_only=True):
    type: ClassVar[GeometryType] = GeometryType.MULTIPOINT
    dim: Dimension
    points: tuple[Point, ...]
    ids: tuple[int, ...] = ()
    bbox: BBox | None = None

    @property
    def is_empty(self) -> bool:
        return not self.points


class MultiLineString(msgspec.Struct, frozen=True, kw_only=True):
    type: ClassVar[GeometryType] = GeometryType.MULTILINESTRING
    dim: Dimension
    linestrings: tuple[LineString, ...]
    ids: tuple[int, ...] = ()
    bbox: BBox | None = None

    @property
    def is_empty(self) -> bool:
        return not self.linestrings


class MultiPolygon(msgspec.Struct, frozen=True, kw_only=True):
    type: ClassVar[GeometryType] = GeometryType.MULTIPOLYGON
    dim: Dimension
    polygons: tuple[Polygon, ...]
    ids: tuple[int, ...] = ()
    bbox: BBox | None = None

    @property
    def is_empty(self) -> bool:
        return not self.polygons


class GeometryCollection(msgspec.Struct, frozen=True, kw_only=True):
    type: ClassVar[GeometryType] = GeometryType.GEOMETRYCOLLECTION
    dim: Dimension
    geometries: tuple['Geometry', ...]  # members are self-describing
    ids: tuple[int, ...] = ()
    bbox: BBox | None = None

    @property
    def is_empty(self) -> bool:
        return not self.geometries


type Geometry = (
    Point
    | LineString
    | Polygon
    | MultiPoint
    | MultiLineString
    | MultiPolygon
    | GeometryCollection
)
