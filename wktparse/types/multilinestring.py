from __future__ import annotations

from dataclasses import dataclass

from ..tokenizer import PeekableTokens
from .base import Dimension, Geometry
from .linestring import LineString


@dataclass(frozen=True)
class MultiLineString(Geometry):
    keyword = "MULTILINESTRING"
    geo_type = "MultiLineString"

    lines: tuple[LineString, ...]

    @property
    def dimension(self) -> Dimension:
        return self.lines[0].dimension

    @property
    def coordinates(self) -> tuple:
        return tuple(line.coordinates for line in self.lines)

    @classmethod
    def from_tokens(cls, tokens: PeekableTokens, dim: Dimension = Dimension.XY) -> "MultiLineString":
        return cls(cls.comma_many(LineString.from_tokens_with_parens, tokens, dim))
