from __future__ import annotations

from dataclasses import dataclass

from ..tokenizer import PeekableTokens
from .base import Dimension, Geometry
from .polygon import Polygon


@dataclass(frozen=True)
class MultiPolygon(Geometry):
    keyword = "MULTIPOLYGON"
    geo_type = "MultiPolygon"

    polygons: tuple[Polygon, ...]

    @property
    def dimension(self) -> Dimension:
        return self.polygons[0].dimension

    @property
    def coordinates(self) -> tuple:
        return tuple(polygon.coordinates for polygon in self.polygons)

    @classmethod
    def from_tokens(cls, tokens: PeekableTokens, dim: Dimension = Dimension.XY) -> "MultiPolygon":
        return cls(cls.comma_many(Polygon.from_tokens_with_parens, tokens, dim))
