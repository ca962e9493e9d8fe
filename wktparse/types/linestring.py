from __future__ import annotations

from dataclasses import dataclass

from ..tokenizer import PeekableTokens
from .base import Dimension, Geometry
from .coord import Coord


@dataclass(frozen=True)
class LineString(Geometry):
    """An ordered, non-empty run of bare coordinates: ``(10 -20, -0 -0.5)``."""

    keyword = "LINESTRING"
    geo_type = "LineString"

    coords: tuple[Coord, ...]

    @property
    def dimension(self) -> Dimension:
        return self.coords[0].dimension

    @property
    def coordinates(self) -> tuple[tuple[float, ...], ...]:
        return tuple(coord.as_tuple() for coord in self.coords)

    @classmethod
    def from_tokens(cls, tokens: PeekableTokens, dim: Dimension = Dimension.XY) -> "LineString":
        return cls(cls.comma_many(Coord.from_tokens, tokens, dim))
