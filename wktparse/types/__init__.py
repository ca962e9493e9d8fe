"""Geometry catalog.

Importing this package registers every geometry keyword with the dispatcher.
"""

from typing import Union

from .base import GEOMETRY_TYPES, Dimension, FromTokens, Geometry, read_dimension, read_geometry
from .coord import Coord
from .geometrycollection import MAX_NESTING_DEPTH, GeometryCollection
from .linestring import LineString
from .multilinestring import MultiLineString
from .multipoint import MultiPoint
from .multipolygon import MultiPolygon
from .point import Point
from .polygon import Polygon

AnyGeometry = Union[
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
]

__all__ = [
    "AnyGeometry",
    "Coord",
    "Dimension",
    "FromTokens",
    "GEOMETRY_TYPES",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MAX_NESTING_DEPTH",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "read_dimension",
    "read_geometry",
]
