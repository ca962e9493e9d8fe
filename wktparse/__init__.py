"""Reader for Well-Known Text (WKT) geometries."""

from .config import ParserOptions
from .document import Wkt, loads
from .errors import (
    MalformedNumberError,
    MalformedStructureError,
    NonAsciiKeywordError,
    UnknownTypeError,
    WktError,
)
from .tokenizer import PeekableTokens, Token, TokenKind, Tokens
from .types import (
    Coord,
    Dimension,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = [
    "Coord",
    "Dimension",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MalformedNumberError",
    "MalformedStructureError",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "NonAsciiKeywordError",
    "ParserOptions",
    "PeekableTokens",
    "Point",
    "Polygon",
    "Token",
    "TokenKind",
    "Tokens",
    "UnknownTypeError",
    "Wkt",
    "WktError",
    "loads",
]
