"""Bridge from parsed WKT geometries to :mod:`shapely` objects.

Geometries expose ``__geo_interface__``, which is what
:func:`shapely.geometry.shape` consumes. Shapely has no notion of measures,
so ``M`` values are lost in the conversion.
"""

from __future__ import annotations

import logging

from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry

from ..document import loads as loads_document
from ..types import Geometry

logger = logging.getLogger(__name__)


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """Return the shapely equivalent of ``geometry``."""

    if not isinstance(geometry, Geometry):
        raise TypeError("geometry must be a parsed WKT geometry")
    if geometry.dimension.has_m:
        logger.debug("Dropping M values while converting %s to shapely", geometry.keyword)
    return shape(geometry)


def loads(text: str, *, strict_numbers: bool = False, reject_trailing: bool = False) -> BaseGeometry | None:
    """Parse ``text`` and return its geometry as a shapely object.

    Returns ``None`` for blank input.
    """

    document = loads_document(text, strict_numbers=strict_numbers, reject_trailing=reject_trailing)
    if not document.items:
        return None
    return to_shapely(document.items[0])


__all__ = ["loads", "to_shapely"]
