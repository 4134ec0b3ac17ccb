import logging
from collections.abc import Callable, Iterator
from typing import BinaryIO

import cython
import msgspec
from sizestr import sizestr

from twkb.config import VERIFY_SIZE
from twkb.exceptions.decode_error import UnexpectedEOFError
from twkb.lib.byte_reader import Buffer, BufferReader, ByteReader, make_reader
from twkb.lib.coordinate_reader import CoordinateReader
from twkb.lib.exceptions_context import raise_for
from twkb.lib.twkb_header import read_header
from twkb.lib.varint import read_svarints, read_uvarint
from twkb.limits import COLLECTION_MAX_DEPTH
from twkb.models.geometry import (
    BBox,
    Coordinate,
    Geometry,
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from twkb.models.geometry_type import GeometryType
from twkb.models.twkb_header import TWKBHeader

logger = logging.getLogger(__name__)


class _DecodeContext(msgspec.Struct, frozen=True):
    reader: ByteReader
    header: TWKBHeader
    coords: CoordinateReader
    depth: int
    verify_size: bool

    @property
    def bbox(self) -> BBox | None:
        header_bbox = self.header.bbox
        return header_bbox if header_bbox is not None else self.coords.bbox


def decode(data: Buffer | BinaryIO, /, *, verify_size: bool = VERIFY_SIZE) -> Geometry:
    """
    Decode a single TWKB value from a buffer or a binary stream.

    Bytes following the value are left untouched.

    >>> decode(bytes.fromhex('01000204')).coord
    (1.0, 2.0)
    """
    if isinstance(data, bytes | bytearray | memoryview):
        logger.debug('Decoding %s TWKB buffer', sizestr(len(data)))
    return _decode_value(make_reader(data), 0, verify_size)


def decode_hex(s: str, /, *, verify_size: bool = VERIFY_SIZE) -> Geometry:
    """Decode a single TWKB value from a hex string."""
    return decode(bytes.fromhex(s), verify_size=verify_size)


def decode_partial(
    data: Buffer, /, offset: int = 0, *, verify_size: bool = VERIFY_SIZE
) -> tuple[Geometry, int]:
    """
    Decode a single TWKB value starting at offset.

    Returns a tuple of (geometry, end offset), the end offset pointing
    at the first byte after the value.
    """
    reader = BufferReader(data, offset)
    geometry = _decode_value(reader, 0, verify_size)
    return geometry, reader.position


def iter_decode(
    data: Buffer | BinaryIO, /, *, verify_size: bool = VERIFY_SIZE
) -> Iterator[Geometry]:
    """
    Decode consecutive TWKB values until the data is exhausted.

    Running out of data in the middle of a value is an error. Buffers stop
    once every byte is consumed. Streams cannot report what is left, so they
    stop when the end-of-data error is raised at the first byte of a value.
    """
    reader = make_reader(data)

    while True:
        if reader.remaining() == 0:
            return
        start = reader.position
        try:
            geometry = _decode_value(reader, 0, verify_size)
        except UnexpectedEOFError as e:
            if e.position == start:
                return
            raise
        yield geometry


def _decode_value(reader: ByteReader, depth: int, verify_size: bool) -> Geometry:
    header = read_header(reader, verify_size=verify_size)

    if header.is_empty:
        geometry = _empty_geometry(header)
    else:
        ctx = _DecodeContext(
            reader=reader,
            header=header,
            coords=CoordinateReader(reader, header),
            depth=depth,
            verify_size=verify_size,
        )
        geometry = _DECODERS[header.type](ctx)

    if verify_size and header.size is not None and header.payload_start is not None:
        actual = reader.position - header.payload_start
        if actual != header.size:
            raise_for.size_mismatch(header.size, actual)

    return geometry


def _empty_geometry(header: TWKBHeader) -> Geometry:
    dim = header.dim
    bbox = header.bbox
    gtype = header.type

    if gtype == GeometryType.POINT:
        return Point(dim=dim, coord=(), bbox=bbox)
    elif gtype == GeometryType.LINESTRING:
        return LineString(dim=dim, coords=(), bbox=bbox)
    elif gtype == GeometryType.POLYGON:
        return Polygon(dim=dim, rings=(), bbox=bbox)
    elif gtype == GeometryType.MULTIPOINT:
        return MultiPoint(dim=dim, points=(), bbox=bbox)
    elif gtype == GeometryType.MULTILINESTRING:
        return MultiLineString(dim=dim, linestrings=(), bbox=bbox)
    elif gtype == GeometryType.MULTIPOLYGON:
        return MultiPolygon(dim=dim, polygons=(), bbox=bbox)
    else:
        return GeometryCollection(dim=dim, geometries=(), bbox=bbox)


def _read_line(ctx: _DecodeContext) -> tuple[Coordinate, ...]:
    return ctx.coords.read(read_uvarint(ctx.reader))


def _read_rings(ctx: _DecodeContext) -> tuple[LinearRing, ...]:
    num_rings = read_uvarint(ctx.reader)
    return tuple(_read_line(ctx) for _ in range(num_rings))


def _read_multi_header(ctx: _DecodeContext) -> tuple[int, tuple[int, ...]]:
    """Read the member count and, if flagged, the id list."""
    num_geoms = read_uvarint(ctx.reader)
    ids = tuple(read_svarints(ctx.reader, num_geoms)) if ctx.header.has_idlist else ()
    return num_geoms, ids


def _decode_point(ctx: _DecodeContext) -> Point:
    coord = ctx.coords.read(1)[0]
    return Point(dim=ctx.header.dim, coord=coord, bbox=ctx.bbox)


def _decode_linestring(ctx: _DecodeContext) -> LineString:
    coords = _read_line(ctx)
    return LineString(dim=ctx.header.dim, coords=coords, bbox=ctx.bbox)


def _decode_polygon(ctx: _DecodeContext) -> Polygon:
    rings = _read_rings(ctx)
    return Polygon(dim=ctx.header.dim, rings=rings, bbox=ctx.bbox)


def _decode_multipoint(ctx: _DecodeContext) -> MultiPoint:
    num_geoms, ids = _read_multi_header(ctx)
    dim = ctx.header.dim
    points = tuple(Point(dim=dim, coord=coord) for coord in ctx.coords.read(num_geoms))
    return MultiPoint(dim=dim, points=points, ids=ids, bbox=ctx.bbox)


def _decode_multilinestring(ctx: _DecodeContext) -> MultiLineString:
    num_geoms, ids = _read_multi_header(ctx)
    dim = ctx.header.dim
    linestrings = tuple(LineString(dim=dim, coords=_read_line(ctx)) for _ in range(num_geoms))
    return MultiLineString(dim=dim, linestrings=linestrings, ids=ids, bbox=ctx.bbox)


def _decode_multipolygon(ctx: _DecodeContext) -> MultiPolygon:
    num_geoms, ids = _read_multi_header(ctx)
    dim = ctx.header.dim
    polygons = tuple(Polygon(dim=dim, rings=_read_rings(ctx)) for _ in range(num_geoms))
    return MultiPolygon(dim=dim, polygons=polygons, ids=ids, bbox=ctx.bbox)


def _decode_collection(
    ctx: _DecodeContext,
    *,
    COLLECTION_MAX_DEPTH: cython.int = COLLECTION_MAX_DEPTH,
) -> GeometryCollection:
    depth: cython.int = ctx.depth + 1
    if depth > COLLECTION_MAX_DEPTH:
        raise_for.collection_too_deep(COLLECTION_MAX_DEPTH)

    num_geoms, ids = _read_multi_header(ctx)
    logger.debug('Decoding geometry collection of %d members at depth %d', num_geoms, depth)

    # members are complete TWKB values with their own decoding state
    reader = ctx.reader
    verify_size = ctx.verify_size
    geometries = tuple(_decode_value(reader, depth, verify_size) for _ in range(num_geoms))
    return GeometryCollection(
        dim=ctx.header.dim,
        geometries=geometries,
        ids=ids,
        bbox=ctx.header.bbox,
    )


_DECODERS: dict[GeometryType, Callable[[_DecodeContext], Geometry]] = {
    GeometryType.POINT: _decode_point,
    GeometryType.LINESTRING: _decode_linestring,
    GeometryType.POLYGON: _decode_polygon,
    GeometryType.MULTIPOINT: _decode_multipoint,
    GeometryType.MULTILINESTRING: _decode_multilinestring,
    GeometryType.MULTIPOLYGON: _decode_multipolygon,
    GeometryType.GEOMETRYCOLLECTION: _decode_collection,
}
