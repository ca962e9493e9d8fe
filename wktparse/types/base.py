"""The ``FromTokens`` parsing capability shared by every geometry type."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, ClassVar, TypeVar

from ..errors import MalformedStructureError, NonAsciiKeywordError, UnknownTypeError
from ..tokenizer import PeekableTokens, Token, TokenKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Maps upper-case keywords (``POINT``, ``LINESTRING``...) to geometry classes.
GEOMETRY_TYPES: dict[str, type["Geometry"]] = {}


class Dimension(Enum):
    """Coordinate layout of a geometry, selected by the tag after its keyword."""

    XY = ""
    XYZ = "Z"
    XYM = "M"
    XYZM = "ZM"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def has_z(self) -> bool:
        return "Z" in self.value

    @property
    def has_m(self) -> bool:
        return "M" in self.value

    @property
    def component_count(self) -> int:
        return 2 + self.has_z + self.has_m

    @classmethod
    def from_flags(cls, has_z: bool, has_m: bool) -> "Dimension":
        return cls(("Z" if has_z else "") + ("M" if has_m else ""))

    @classmethod
    def from_tag(cls, tag: str) -> "Dimension | None":
        try:
            dim = cls(tag.upper())
        except ValueError:
            return None
        return dim if dim is not cls.XY else None


def describe(token: Token | None) -> str:
    return "end of input" if token is None else token.describe()


def expect(tokens: PeekableTokens, kind: TokenKind) -> Token:
    """Consume the next token, failing unless it is of ``kind``."""

    token = tokens.next_token()
    if token is None or token.kind is not kind:
        raise MalformedStructureError(f"expected '{kind.value}', found {describe(token)}", token)
    return token


class FromTokens(ABC):
    """Something that can be read from a :class:`PeekableTokens` cursor."""

    @classmethod
    @abstractmethod
    def from_tokens(cls: type[T], tokens: PeekableTokens, dim: Dimension = Dimension.XY) -> T:
        """Parse the body, without the enclosing parentheses."""

    @classmethod
    def from_tokens_with_parens(cls: type[T], tokens: PeekableTokens, dim: Dimension = Dimension.XY) -> T:
        expect(tokens, TokenKind.PAREN_OPEN)
        result = cls.from_tokens(tokens, dim)
        expect(tokens, TokenKind.PAREN_CLOSE)
        return result

    @staticmethod
    def comma_many(
        parse_one: Callable[[PeekableTokens, Dimension], T],
        tokens: PeekableTokens,
        dim: Dimension = Dimension.XY,
    ) -> tuple[T, ...]:
        """Parse one or more ``parse_one`` elements separated by commas."""

        items = [parse_one(tokens, dim)]
        while tokens.peek_kind() is TokenKind.COMMA:
            tokens.next_token()
            items.append(parse_one(tokens, dim))
        return tuple(items)


class Geometry(FromTokens):
    """Base of every geometry variant.

    Subclasses declaring a ``keyword`` are registered in :data:`GEOMETRY_TYPES`
    so the dispatcher and geometry collections can find them.
    """

    keyword: ClassVar[str] = ""
    geo_type: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("keyword"):
            GEOMETRY_TYPES[cls.keyword] = cls

    @property
    @abstractmethod
    def dimension(self) -> Dimension:
        ...

    @property
    @abstractmethod
    def coordinates(self) -> Any:
        """GeoJSON-style nested coordinate tuples."""

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {"type": self.geo_type, "coordinates": self.coordinates}


def read_dimension(tokens: PeekableTokens, inherited: Dimension = Dimension.XY) -> Dimension:
    """Consume an optional ``Z``/``M``/``ZM`` tag following a keyword.

    Without a tag the ``inherited`` dimension applies. Inside a tagged
    collection a member's own tag must agree with the collection's.
    """

    token = tokens.peek()
    if token is None or token.kind is not TokenKind.WORD:
        return inherited

    tokens.next_token()
    dim = Dimension.from_tag(str(token.value))
    if dim is None:
        raise MalformedStructureError(f"expected dimension tag or '(', found {describe(token)}", token)
    if inherited is not Dimension.XY and dim is not inherited:
        raise MalformedStructureError(
            f"dimension tag {dim.tag!r} conflicts with enclosing {inherited.tag!r}", token
        )
    return dim


def read_geometry(
    token: Token | None, tokens: PeekableTokens, inherited: Dimension = Dimension.XY
) -> Geometry:
    """Parse a tagged geometry whose keyword ``token`` was already consumed."""

    if token is None or token.kind is not TokenKind.WORD:
        raise UnknownTypeError(f"expected geometry keyword, found {describe(token)}", token)

    word = str(token.value)
    if not word.isascii():
        raise NonAsciiKeywordError(f"non-ASCII geometry keyword {word!r}", token)

    geometry_cls = GEOMETRY_TYPES.get(word.upper())
    if geometry_cls is None:
        raise UnknownTypeError(f"unknown geometry type {word!r}", token)

    dim = read_dimension(tokens, inherited)
    logger.debug("Parsing %s %s", geometry_cls.keyword, dim.name)
    return geometry_cls.from_tokens_with_parens(tokens, dim)
