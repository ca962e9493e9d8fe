"""Helpers to read tabular WKT data into GeoDataFrames."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Any

import geopandas as gpd
import pandas as pd
from shapely.geometry.base import BaseGeometry

from ..compat.shapely import loads as loads_shapely
from ..config import ParserOptions
from ..errors import WktError

logger = logging.getLogger(__name__)

_ERROR_MODES = ("raise", "coerce")


def _ensure_path(path: Path | str | PathLike[str]) -> Path:
    """Return ``path`` as :class:`pathlib.Path` enforcing valid types."""

    if isinstance(path, Path):
        return path
    if isinstance(path, (str, PathLike)):
        return Path(path)
    raise TypeError("path must be a string, Path or os.PathLike instance")


def _parse_cell(value: Any, label: Any, errors: str, options: ParserOptions) -> BaseGeometry | None:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if not isinstance(value, str):
        raise TypeError(f"row {label!r}: WKT values must be strings, got {type(value).__name__}")

    try:
        return loads_shapely(
            value,
            strict_numbers=options.strict_numbers,
            reject_trailing=options.reject_trailing,
        )
    except WktError as exc:
        if errors == "raise":
            raise
        logger.warning("Row %r: could not parse WKT (%s); geometry left empty", label, exc)
        return None


def read_wkt_frame(
    df: pd.DataFrame,
    column: str = "wkt",
    *,
    crs: Any = None,
    errors: str = "raise",
    options: ParserOptions | None = None,
) -> gpd.GeoDataFrame:
    """Return a GeoDataFrame whose geometry column is parsed from ``column``.

    Parameters
    ----------
    df:
        DataFrame holding WKT strings under ``column``. Missing values become
        missing geometries.
    column:
        Name of the WKT column. It is replaced by the ``geometry`` column.
    crs:
        Optional CRS assigned to the resulting GeoDataFrame.
    errors:
        ``"raise"`` propagates the first :class:`~wktparse.errors.WktError`;
        ``"coerce"`` logs a warning and leaves the geometry empty.
    options:
        Parser switches, see :class:`~wktparse.config.ParserOptions`.
    """

    if column not in df.columns:
        raise ValueError(f"input DataFrame must contain a {column!r} column")
    if errors not in _ERROR_MODES:
        raise ValueError(f"errors must be one of {_ERROR_MODES}, got {errors!r}")

    options = options or ParserOptions()
    geometries = [
        _parse_cell(value, label, errors, options)
        for label, value in df[column].items()
    ]

    gdf = gpd.GeoDataFrame(df.drop(columns=[column]), geometry=geometries, crs=crs)
    parsed = sum(geometry is not None for geometry in geometries)
    logger.info("Parsed %s of %s WKT values from column %r", parsed, len(geometries), column)
    return gdf


def read_wkt_csv(
    path: Path | str | PathLike[str],
    column: str = "wkt",
    *,
    crs: Any = None,
    errors: str = "raise",
    options: ParserOptions | None = None,
    **read_csv_kwargs: Any,
) -> gpd.GeoDataFrame:
    """Read a CSV file and parse its WKT ``column`` into geometries."""

    source = _ensure_path(path)
    df = pd.read_csv(source, **read_csv_kwargs)
    return read_wkt_frame(df, column, crs=crs, errors=errors, options=options)


__all__ = ["read_wkt_csv", "read_wkt_frame"]
