from __future__ import annotations

from dataclasses import dataclass

from ..tokenizer import PeekableTokens
from .base import Dimension, Geometry
from .coord import Coord


@dataclass(frozen=True)
class Point(Geometry):
    keyword = "POINT"
    geo_type = "Point"

    coord: Coord

    @property
    def dimension(self) -> Dimension:
        return self.coord.dimension

    @property
    def coordinates(self) -> tuple[float, ...]:
        return self.coord.as_tuple()

    @classmethod
    def from_tokens(cls, tokens: PeekableTokens, dim: Dimension = Dimension.XY) -> "Point":
        return cls(Coord.from_tokens(tokens, dim))
