"""Top-level entry point: from WKT text to a :class:`Wkt` document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from .config import ParserOptions
from .errors import MalformedStructureError
from .tokenizer import PeekableTokens, Tokens
from .types import Geometry, read_geometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Wkt:
    """Parsed document: the geometries read from one WKT string.

    Only one leading geometry is read today; ``items`` is a sequence so that
    documents holding several geometries fit the same shape.
    """

    items: tuple[Geometry, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.items)

    @classmethod
    def from_str(cls, text: str, options: ParserOptions | None = None) -> "Wkt":
        options = options or ParserOptions()
        tokens = Tokens(text, strict_numbers=options.strict_numbers)
        return cls.from_tokens(tokens, options)

    @classmethod
    def from_tokens(cls, tokens: Tokens, options: ParserOptions | None = None) -> "Wkt":
        options = options or ParserOptions()
        cursor = PeekableTokens(tokens)

        first = cursor.next_token()
        if first is None:
            return cls()

        geometry = read_geometry(first, cursor)

        trailing = cursor.peek()
        if trailing is not None:
            if options.reject_trailing:
                raise MalformedStructureError(
                    f"unexpected {trailing.describe()} after geometry", trailing
                )
            logger.debug("Ignoring input after geometry, starting with %s", trailing.describe())

        return cls((geometry,))


def loads(text: str, *, strict_numbers: bool = False, reject_trailing: bool = False) -> Wkt:
    """Parse ``text`` and return the resulting :class:`Wkt` document."""

    options = ParserOptions(strict_numbers=strict_numbers, reject_trailing=reject_trailing)
    return Wkt.from_str(text, options)


__all__ = ["Wkt", "loads"]
