import shapely
from shapely.errors import GEOSException
from shapely.geometry.base import BaseGeometry

from twkb.lib.exceptions_context import raise_for
from twkb.models.geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from twkb.models.geometry_type import Dimension


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """
    Convert a decoded geometry into its shapely counterpart.

    Shapely constructors hold at most three ordinates, so the M value is dropped.
    Geometries shapely rejects, such as a single-point linestring or a ring
    shorter than four coordinates, raise ShapelyConversionError.

    >>> to_shapely(Point(dim=Dimension.XY, coord=(1.0, 2.0))).wkt
    'POINT (1 2)'
    """
    try:
        return _convert(geometry)
    except (GEOSException, ValueError) as e:
        raise_for.shapely_conversion_failed(geometry.type, e)


def _convert(geometry: Geometry) -> BaseGeometry:
    if isinstance(geometry, Point):
        return _point(geometry)
    elif isinstance(geometry, LineString):
        return _linestring(geometry)
    elif isinstance(geometry, Polygon):
        return _polygon(geometry)
    elif isinstance(geometry, MultiPoint):
        return shapely.MultiPoint([_point(p) for p in geometry.points if not p.is_empty])
    elif isinstance(geometry, MultiLineString):
        return shapely.MultiLineString([_linestring(line) for line in geometry.linestrings])
    elif isinstance(geometry, MultiPolygon):
        return shapely.MultiPolygon([_polygon(poly) for poly in geometry.polygons])
    elif isinstance(geometry, GeometryCollection):
        return shapely.GeometryCollection([_convert(g) for g in geometry.geometries])
    else:
        raise NotImplementedError(f'Unsupported geometry type {type(geometry).__name__}')


def _coords(coords: tuple[Coordinate, ...], dim: Dimension) -> list[Coordinate]:
    if dim == Dimension.XYM:
        return [c[:2] for c in coords]
    elif dim == Dimension.XYZM:
        return [c[:3] for c in coords]
    return list(coords)


def _point(point: Point) -> shapely.Point:
    if point.is_empty:
        return shapely.Point()
    return shapely.Point(_coords((point.coord,), point.dim)[0])


def _linestring(line: LineString) -> shapely.LineString:
    return shapely.LineString(_coords(line.coords, line.dim))


def _polygon(poly: Polygon) -> shapely.Polygon:
    if poly.is_empty:
        return shapely.Polygon()
    shell, *holes = (_coords(ring, poly.dim) for ring in poly.rings)
    return shapely.Polygon(shell, holes)
