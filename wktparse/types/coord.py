from __future__ import annotations

from dataclasses import dataclass

from ..errors import MalformedStructureError
from ..tokenizer import PeekableTokens, TokenKind
from .base import Dimension, FromTokens, describe


@dataclass(frozen=True)
class Coord(FromTokens):
    """A position. ``x`` and ``y`` are always set; ``z`` and ``m`` are optional."""

    x: float
    y: float
    z: float | None = None
    m: float | None = None

    @property
    def dimension(self) -> Dimension:
        return Dimension.from_flags(self.z is not None, self.m is not None)

    def as_tuple(self) -> tuple[float, ...]:
        """Position as used by GeoJSON: ``(x, y)`` or ``(x, y, z)``."""

        if self.z is None:
            return (self.x, self.y)
        return (self.x, self.y, self.z)

    @classmethod
    def from_tokens(cls, tokens: PeekableTokens, dim: Dimension = Dimension.XY) -> "Coord":
        expected = dim.component_count
        values: list[float] = []

        while len(values) < expected:
            token = tokens.next_token()
            if token is None or token.kind is not TokenKind.NUMBER:
                if values:
                    raise MalformedStructureError(
                        f"wrong number of coordinate components: expected {expected}, found {len(values)}",
                        token,
                    )
                raise MalformedStructureError(f"expected number, found {describe(token)}", token)
            values.append(float(token.value))  # type: ignore[arg-type]

        extra = tokens.peek()
        if extra is not None and extra.kind is TokenKind.NUMBER:
            raise MalformedStructureError(
                f"wrong number of coordinate components: expected {expected}, found more",
                extra,
            )

        x, y, *rest = values
        z = rest.pop(0) if dim.has_z else None
        m = rest.pop(0) if dim.has_m else None
        return cls(x, y, z, m)
