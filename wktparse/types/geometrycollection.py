from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import MalformedStructureError
from ..tokenizer import PeekableTokens
from .base import Dimension, Geometry, read_geometry

MAX_NESTING_DEPTH = 64


def _member(tokens: PeekableTokens, dim: Dimension) -> Geometry:
    # Members without their own tag inherit the collection's dimension.
    return read_geometry(tokens.next_token(), tokens, dim)


@dataclass(frozen=True)
class GeometryCollection(Geometry):
    """A heterogeneous list of tagged geometries, possibly nested."""

    keyword = "GEOMETRYCOLLECTION"
    geo_type = "GeometryCollection"

    geometries: tuple[Geometry, ...]

    @property
    def dimension(self) -> Dimension:
        return self.geometries[0].dimension

    @property
    def coordinates(self) -> tuple:
        return tuple(geometry.coordinates for geometry in self.geometries)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {
            "type": self.geo_type,
            "geometries": [geometry.__geo_interface__ for geometry in self.geometries],
        }

    @classmethod
    def from_tokens(cls, tokens: PeekableTokens, dim: Dimension = Dimension.XY) -> "GeometryCollection":
        if tokens.depth >= MAX_NESTING_DEPTH:
            raise MalformedStructureError(
                f"geometry collections nested deeper than {MAX_NESTING_DEPTH} levels",
                tokens.peek(),
            )

        tokens.depth += 1
        try:
            geometries = cls.comma_many(_member, tokens, dim)
        finally:
            tokens.depth -= 1
        return cls(geometries)
