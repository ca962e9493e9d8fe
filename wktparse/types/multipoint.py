from __future__ import annotations

from dataclasses import dataclass

from ..tokenizer import PeekableTokens, TokenKind
from .base import Dimension, Geometry
from .point import Point


def _point(tokens: PeekableTokens, dim: Dimension) -> Point:
    # Both ``MULTIPOINT ((1 2), (3 4))`` and ``MULTIPOINT (1 2, 3 4)`` are in use.
    if tokens.peek_kind() is TokenKind.PAREN_OPEN:
        return Point.from_tokens_with_parens(tokens, dim)
    return Point.from_tokens(tokens, dim)


@dataclass(frozen=True)
class MultiPoint(Geometry):
    keyword = "MULTIPOINT"
    geo_type = "MultiPoint"

    points: tuple[Point, ...]

    @property
    def dimension(self) -> Dimension:
        return self.points[0].dimension

    @property
    def coordinates(self) -> tuple[tuple[float, ...], ...]:
        return tuple(point.coordinates for point in self.points)

    @classmethod
    def from_tokens(cls, tokens: PeekableTokens, dim: Dimension = Dimension.XY) -> "MultiPoint":
        return cls(cls.comma_many(_point, tokens, dim))
