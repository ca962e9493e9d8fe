"""Exceptions raised while reading WKT."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .tokenizer import Token


class WktError(ValueError):
    """Base class for every WKT parsing failure."""

    def __init__(self, message: str, token: "Token | None" = None):
        if token is not None and token.position >= 0:
            message = f"{message} (at offset {token.position})"
        super().__init__(message)
        self.token = token


class UnknownTypeError(WktError):
    """The leading token is not a known geometry keyword."""


class NonAsciiKeywordError(WktError):
    """The leading word contains non-ASCII characters."""


class MalformedStructureError(WktError):
    """A parenthesis, comma or number is missing where the grammar needs one."""


class MalformedNumberError(WktError):
    """A numeric run could not be parsed (only raised in strict mode)."""


__all__ = [
    "MalformedNumberError",
    "MalformedStructureError",
    "NonAsciiKeywordError",
    "UnknownTypeError",
    "WktError",
]
