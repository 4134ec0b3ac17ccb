import numpy as np
from numpy.typing import NDArray

from twkb.lib.byte_reader import ByteReader
from twkb.lib.varint import read_svarints
from twkb.models.geometry import BBox, Coordinate
from twkb.models.twkb_header import TWKBHeader


class CoordinateReader:
    """
    Delta-decoding state for the coordinates of a single TWKB value.

    The reference point carries over between calls, so every member of a
    multi-geometry continues from the previous member's last coordinate.
    """

    __slots__ = (
        '_bbox_max',
        '_bbox_min',
        '_divisors',
        '_multipliers',
        '_ndims',
        '_reader',
        '_refpoint',
    )

    def __init__(self, reader: ByteReader, header: TWKBHeader) -> None:
        precisions = np.array(header.precisions, dtype=np.int64)
        ndims = len(precisions)

        self._reader = reader
        self._ndims = ndims

        # negative exponents scale up, positive scale down
        self._multipliers: NDArray[np.float64] = 10.0 ** np.maximum(-precisions, 0)
        self._divisors: NDArray[np.float64] = 10.0 ** np.maximum(precisions, 0)

        self._refpoint: NDArray[np.int64] = np.zeros(ndims, dtype=np.int64)

        # a bbox from the header takes precedence over the computed one
        self._bbox_min: NDArray[np.float64] | None
        self._bbox_max: NDArray[np.float64] | None
        if header.has_bbox:
            self._bbox_min = self._bbox_max = None
        else:
            self._bbox_min = np.full(ndims, np.inf)
            self._bbox_max = np.full(ndims, -np.inf)

    def read(self, count: int) -> tuple[Coordinate, ...]:
        """Read count delta-coded coordinates and return their absolute values."""
        if not count:
            return ()

        ndims = self._ndims
        deltas = np.array(read_svarints(self._reader, count * ndims), dtype=np.int64)
        absolute = np.cumsum(deltas.reshape(count, ndims), axis=0, dtype=np.int64)
        absolute += self._refpoint
        self._refpoint = absolute[-1].copy()

        coords = absolute * self._multipliers / self._divisors

        bbox_min = self._bbox_min
        bbox_max = self._bbox_max
        if bbox_min is not None and bbox_max is not None:
            np.minimum(bbox_min, coords.min(axis=0), out=bbox_min)
            np.maximum(bbox_max, coords.max(axis=0), out=bbox_max)

        return tuple(map(tuple, coords.tolist()))

    @property
    def bbox(self) -> BBox | None:
        """Bounding box of all coordinates read so far, or None if nothing was read."""
        bbox_min = self._bbox_min
        bbox_max = self._bbox_max
        if bbox_min is None or bbox_max is None or not (bbox_min <= bbox_max).all():
            return None
        return (*bbox_min.tolist(), *bbox_max.tolist())
