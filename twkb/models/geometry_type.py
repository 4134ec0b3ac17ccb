from enum import IntEnum, IntFlag


class GeometryType(IntEnum):
    POINT = 1
    LINESTRING = 2
    POLYGON = 3
    MULTIPOINT = 4
    MULTILINESTRING = 5
    MULTIPOLYGON = 6
    GEOMETRYCOLLECTION = 7


class Dimension(IntEnum):
    XY = 0
    XYZ = 1
    XYM = 2
    XYZM = 3

    @property
    def ndims(self) -> int:
        """
        Number of ordinates in each coordinate.

        >>> Dimension.XYM.ndims
        3
        """
        return 2 + (self & 1) + ((self >> 1) & 1)

    @property
    def has_z(self) -> bool:
        return bool(self & 1)

    @property
    def has_m(self) -> bool:
        return bool(self & 2)


class MetadataFlags(IntFlag):
    BBOX = 0x01
    SIZE = 0x02
    IDLIST = 0x04
    EXTENDED_DIMS = 0x08
    EMPTY = 0x10
