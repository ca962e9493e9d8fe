from __future__ import annotations

from dataclasses import dataclass

from ..tokenizer import PeekableTokens
from .base import Dimension, Geometry
from .linestring import LineString


@dataclass(frozen=True)
class Polygon(Geometry):
    """Exterior ring followed by any interior rings.

    Rings are kept exactly as written; closure is not checked.
    """

    keyword = "POLYGON"
    geo_type = "Polygon"

    rings: tuple[LineString, ...]

    @property
    def exterior(self) -> LineString:
        return self.rings[0]

    @property
    def interiors(self) -> tuple[LineString, ...]:
        return self.rings[1:]

    @property
    def dimension(self) -> Dimension:
        return self.exterior.dimension

    @property
    def coordinates(self) -> tuple:
        return tuple(ring.coordinates for ring in self.rings)

    @classmethod
    def from_tokens(cls, tokens: PeekableTokens, dim: Dimension = Dimension.XY) -> "Polygon":
        return cls(cls.comma_many(LineString.from_tokens_with_parens, tokens, dim))
