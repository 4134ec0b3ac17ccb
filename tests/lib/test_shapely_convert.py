import pytest
import shapely

from twkb.exceptions.decode_error import ShapelyConversionError
from twkb.lib.shapely_convert import to_shapely
from twkb.lib.twkb_decoder import decode, decode_hex
from twkb.models.geometry import LineString, Point, Polygon
from twkb.models.geometry_type import Dimension


@pytest.mark.parametrize(
    ('hex', 'expected'),
    [
        ('01000204', shapely.Point(1, 2)),
        ('02000202020808', shapely.LineString([(1, 1), (5, 5)])),
        ('04070b0004020402000200020404', shapely.MultiPoint([(0, 1), (2, 3)])),
        (
            '03031b000400040205000004000004030000030500000002020000010100',
            shapely.Polygon(
                [(0, 0), (2, 0), (2, 2), (0, 2), (0, 0)],
                [[(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)]],
            ),
        ),
    ],
)
def test_to_shapely(hex, expected):
    assert to_shapely(decode_hex(hex)).equals_exact(expected, tolerance=1e-9)


def test_to_shapely_collection():
    geom = to_shapely(decode_hex('070402000201000002020002080a0404'))
    assert isinstance(geom, shapely.GeometryCollection)
    assert [g.geom_type for g in geom.geoms] == ['Point', 'LineString']


def test_to_shapely_xyz():
    geom = to_shapely(LineString(dim=Dimension.XYZ, coords=((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))))
    assert geom.has_z
    assert list(geom.coords) == [(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)]


def test_to_shapely_drops_m():
    geom = to_shapely(Point(dim=Dimension.XYM, coord=(1.0, 2.0, 9.0)))
    assert not geom.has_z
    assert (geom.x, geom.y) == (1.0, 2.0)

    geom = to_shapely(Point(dim=Dimension.XYZM, coord=(1.0, 2.0, 3.0, 9.0)))
    assert geom.has_z
    assert geom.z == 3.0


@pytest.mark.parametrize('hex', ['0110', '0210', '0310', '0410', '0510', '0610', '0710'])
def test_to_shapely_empty(hex):
    assert to_shapely(decode_hex(hex)).is_empty


def test_to_shapely_polygon_without_holes():
    geom = to_shapely(Polygon(dim=Dimension.XY, rings=(((0, 0), (1, 0), (1, 1), (0, 0)),)))
    assert isinstance(geom, shapely.Polygon)
    assert len(geom.interiors) == 0
    assert geom.area == 0.5


@pytest.mark.parametrize(
    'geometry',
    [
        decode(b'\x02\x00\x01\x02\x02'),
        Polygon(dim=Dimension.XY, rings=(((0.0, 0.0), (1.0, 1.0), (0.0, 0.0)),)),
    ],
)
def test_to_shapely_invalid_geometry(geometry):
    with pytest.raises(ShapelyConversionError, match=geometry.type.name):
        to_shapely(geometry)


def test_to_shapely_invalid_collection_member():
    # collection with a single-point linestring member
    with pytest.raises(ShapelyConversionError, match='GEOMETRYCOLLECTION'):
        to_shapely(decode(b'\x07\x00\x01\x02\x00\x01\x02\x02'))
