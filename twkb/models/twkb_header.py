import msgspec

from twkb.models.geometry import BBox
from twkb.models.geometry_type import Dimension, GeometryType, MetadataFlags


class TWKBHeader(msgspec.Struct, frozen=True, kw_only=True):
    type: GeometryType
    dim: Dimension
    flags: MetadataFlags

    # precision exponents per ordinate, in coordinate order
    precisions: tuple[int, ...]

    size: int | None = None  # declared byte length of the remaining payload
    payload_start: int | None = None  # reader position the declared size counts from
    bbox: BBox | None = None

    @property
    def has_bbox(self) -> bool:
        return MetadataFlags.BBOX in self.flags

    @property
    def has_idlist(self) -> bool:
        return MetadataFlags.IDLIST in self.flags

    @property
    def is_empty(self) -> bool:
        return MetadataFlags.EMPTY in self.flags
