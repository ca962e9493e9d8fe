"""Loading helpers for tabular WKT inputs."""

from .csv import read_wkt_csv, read_wkt_frame

__all__ = ["read_wkt_csv", "read_wkt_frame"]
