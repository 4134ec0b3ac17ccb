import math

from tests.utils.twkb_encode import deltas
from twkb.lib.byte_reader import BufferReader
from twkb.lib.coordinate_reader import CoordinateReader
from twkb.models.geometry_type import Dimension, GeometryType, MetadataFlags
from twkb.models.twkb_header import TWKBHeader


def _header(
    precisions: tuple[int, ...],
    dim: Dimension = Dimension.XY,
    flags: MetadataFlags = MetadataFlags(0),
) -> TWKBHeader:
    return TWKBHeader(
        type=GeometryType.LINESTRING,
        dim=dim,
        flags=flags,
        precisions=precisions,
    )


def _assert_coords(actual, expected):
    assert len(actual) == len(expected)
    for a, b in zip(actual, expected, strict=True):
        assert len(a) == len(b)
        for x, y in zip(a, b, strict=True):
            assert math.isclose(x, y, abs_tol=1e-9)


def test_read_absolute_values():
    data = deltas([(100, 200), (50, 225)], [0, 0])
    coords = CoordinateReader(BufferReader(data), _header((2, 2))).read(2)
    _assert_coords(coords, [(1.0, 2.0), (0.5, 2.25)])


def test_read_consecutive_deltas():
    # each coordinate differs from the previous one by the raw delta over the scale
    data = deltas([(0, 0), (3, -4), (3, 10), (-100, 10)], [0, 0])
    coords = CoordinateReader(BufferReader(data), _header((1, 1))).read(4)
    _assert_coords(coords, [(0, 0), (0.3, -0.4), (0.3, 1.0), (-10.0, 1.0)])


def test_read_negative_precision():
    data = deltas([(3, -4)], [0, 0])
    coords = CoordinateReader(BufferReader(data), _header((-1, -1))).read(1)
    assert coords == ((30.0, -40.0),)


def test_read_refpoint_carries_over():
    refpoint = [0, 0]
    data = deltas([(10, 10)], refpoint) + deltas([(12, 8), (20, 20)], refpoint)
    reader = CoordinateReader(BufferReader(data), _header((0, 0)))
    assert reader.read(1) == ((10.0, 10.0),)
    assert reader.read(2) == ((12.0, 8.0), (20.0, 20.0))
    assert reader.bbox == (10.0, 8.0, 20.0, 20.0)


def test_read_xyzm_scales():
    data = deltas([(15, 25, 1234, 7)], [0, 0, 0, 0])
    header = _header((1, 1, 3, 0), Dimension.XYZM)
    coords = CoordinateReader(BufferReader(data), header).read(1)
    _assert_coords(coords, [(1.5, 2.5, 1.234, 7.0)])


def test_read_zero():
    reader = CoordinateReader(BufferReader(b''), _header((0, 0)))
    assert reader.read(0) == ()
    assert reader.bbox is None


def test_bbox_skipped_when_header_has_bbox():
    data = deltas([(1, 2)], [0, 0])
    reader = CoordinateReader(BufferReader(data), _header((0, 0), flags=MetadataFlags.BBOX))
    assert reader.read(1) == ((1.0, 2.0),)
    assert reader.bbox is None
