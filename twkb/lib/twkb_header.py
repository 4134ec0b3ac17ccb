import cython

from twkb.config import VERIFY_SIZE
from twkb.lib.byte_reader import ByteReader
from twkb.lib.exceptions_context import raise_for
from twkb.lib.varint import read_svarint, read_uvarint, unzigzag
from twkb.models.geometry import BBox
from twkb.models.geometry_type import Dimension, GeometryType, MetadataFlags
from twkb.models.twkb_header import TWKBHeader


def read_header(reader: ByteReader, *, verify_size: bool = VERIFY_SIZE) -> TWKBHeader:
    """
    Read the header of a TWKB value: type and precision, metadata flags,
    extended dimensions, declared size and bounding box.
    """
    b: cython.int = reader.read_byte()

    code: cython.int = b & 0x0F
    if code < GeometryType.POINT or code > GeometryType.GEOMETRYCOLLECTION:
        raise_for.unknown_geometry_type(code)

    # high nibble is a zigzag-encoded signed exponent
    xy_precision: cython.int = unzigzag(b >> 4)
    precisions: tuple[int, ...] = (xy_precision, xy_precision)

    flags = MetadataFlags(reader.read_byte())
    dim = Dimension.XY

    if MetadataFlags.EXTENDED_DIMS in flags:
        extended: cython.int = reader.read_byte()
        z_precision: cython.int = (extended & 0x1C) >> 2
        m_precision: cython.int = (extended & 0xE0) >> 5

        if extended & Dimension.XYZM == Dimension.XYZM:
            dim = Dimension.XYZM
            precisions = (xy_precision, xy_precision, z_precision, m_precision)
        elif extended & Dimension.XYZ:
            dim = Dimension.XYZ
            precisions = (xy_precision, xy_precision, z_precision)
        elif extended & Dimension.XYM:
            dim = Dimension.XYM
            precisions = (xy_precision, xy_precision, m_precision)

    size: int | None = None
    payload_start: int | None = None

    if MetadataFlags.SIZE in flags:
        size = read_uvarint(reader)
        payload_start = reader.position

        if verify_size:
            remaining = reader.remaining()
            if remaining is not None and remaining < size:
                raise_for.size_mismatch(size, remaining)

    bbox: BBox | None = None

    if MetadataFlags.BBOX in flags:
        ndims: cython.Py_ssize_t = len(precisions)
        bbox_list: list[float] = [0.0] * (ndims * 2)
        i: cython.Py_ssize_t

        for i in range(ndims):
            low = read_svarint(reader)
            delta = read_svarint(reader)
            bbox_list[i] = float(low)
            bbox_list[i + ndims] = float(low + delta)

        bbox = tuple(bbox_list)

    return TWKBHeader(
        type=GeometryType(code),
        dim=dim,
        flags=flags,
        precisions=precisions,
        size=size,
        payload_start=payload_start,
        bbox=bbox,
    )
