"""Lexical analysis of WKT text.

:class:`Tokens` turns a string into a lazy stream of :class:`Token` values,
one token per ``next()`` call. :class:`PeekableTokens` adds the single token
of lookahead the geometry parsers rely on.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from .errors import MalformedNumberError

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n\r")
NUMBERLIKE = frozenset("0123456789.-+")

_WHITESPACE_RE = re.compile(r"[ \t\n\r]*")
# Everything up to whitespace, a structural marker, NUL or end of input.
_RUN_RE = re.compile(r"[^ \t\n\r(),\x00]*")
_NUMBER_RE = re.compile(
    r"-?(?:\d+\.?\d*(?:[eE][-+]?\d+)?|\.\d+(?:[eE][-+]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class TokenKind(Enum):
    COMMA = ","
    PAREN_OPEN = "("
    PAREN_CLOSE = ")"
    NUMBER = "number"
    WORD = "word"


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical unit. ``value`` is only set for numbers and words."""

    kind: TokenKind
    value: float | str | None = None
    position: int = field(default=-1, compare=False)

    @classmethod
    def comma(cls, position: int = -1) -> "Token":
        return cls(TokenKind.COMMA, position=position)

    @classmethod
    def paren_open(cls, position: int = -1) -> "Token":
        return cls(TokenKind.PAREN_OPEN, position=position)

    @classmethod
    def paren_close(cls, position: int = -1) -> "Token":
        return cls(TokenKind.PAREN_CLOSE, position=position)

    @classmethod
    def number(cls, value: float, position: int = -1) -> "Token":
        return cls(TokenKind.NUMBER, float(value), position=position)

    @classmethod
    def word(cls, text: str, position: int = -1) -> "Token":
        return cls(TokenKind.WORD, text, position=position)

    def describe(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"number {self.value!r}"
        if self.kind is TokenKind.WORD:
            return f"word {self.value!r}"
        return f"'{self.kind.value}'"


_STRUCTURAL = {
    "(": TokenKind.PAREN_OPEN,
    ")": TokenKind.PAREN_CLOSE,
    ",": TokenKind.COMMA,
}


def parse_number(text: str) -> float | None:
    """Return ``text`` as a float, or ``None`` when it is not a WKT number.

    A single leading ``+`` is accepted. Digits are not required on both sides
    of the decimal point (``".4"``, ``"4."`` and ``"-0"`` are all valid).
    """

    if text.startswith("+"):
        text = text[1:]
    if _NUMBER_RE.fullmatch(text) is None:
        return None
    return float(text)


class Tokens:
    """Forward-only iterator of tokens over ``text``.

    A malformed numeric run such as ``4.2p`` produces no token and ends the
    stream, so the parser fails at its next expectation. Pass
    ``strict_numbers=True`` to raise :class:`MalformedNumberError` instead.
    """

    def __init__(self, text: str, *, strict_numbers: bool = False):
        self._text = text
        self._pos = 0
        self.strict_numbers = strict_numbers

    @classmethod
    def from_str(cls, text: str, *, strict_numbers: bool = False) -> "Tokens":
        return cls(text, strict_numbers=strict_numbers)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        text = self._text
        end = len(text)

        start = _WHITESPACE_RE.match(text, self._pos).end()
        if start >= end or text[start] == "\0":
            self._pos = end
            raise StopIteration

        char = text[start]
        kind = _STRUCTURAL.get(char)
        if kind is not None:
            self._pos = start + 1
            return Token(kind, position=start)

        stop = _RUN_RE.match(text, start + 1).end()
        run = text[start:stop]
        self._pos = stop

        if char not in NUMBERLIKE:
            return Token.word(run, start)

        value = parse_number(run)
        if value is not None:
            return Token.number(value, start)

        if self.strict_numbers:
            raise MalformedNumberError(f"invalid number {run!r}", Token.word(run, start))
        logger.debug("Malformed numeric literal %r at offset %d ends the input", run, start)
        self._pos = end
        raise StopIteration


class PeekableTokens:
    """One-token lookahead over a token iterator.

    ``depth`` tracks how deeply nested the parser currently is inside
    geometry collections.
    """

    _EMPTY = object()

    def __init__(self, tokens: Iterable[Token]):
        self._tokens = iter(tokens)
        self._peeked: object = self._EMPTY
        self.depth = 0

    @classmethod
    def from_str(cls, text: str, *, strict_numbers: bool = False) -> "PeekableTokens":
        return cls(Tokens(text, strict_numbers=strict_numbers))

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def peek(self) -> Token | None:
        """Return the next token without consuming it (``None`` at the end)."""

        if self._peeked is self._EMPTY:
            self._peeked = next(self._tokens, None)
        return self._peeked  # type: ignore[return-value]

    def next_token(self) -> Token | None:
        """Consume and return the next token (``None`` at the end)."""

        token = self.peek()
        self._peeked = self._EMPTY
        return token

    def peek_kind(self) -> TokenKind | None:
        token = self.peek()
        return None if token is None else token.kind


__all__ = [
    "NUMBERLIKE",
    "PeekableTokens",
    "Token",
    "TokenKind",
    "Tokens",
    "WHITESPACE",
    "parse_number",
]
