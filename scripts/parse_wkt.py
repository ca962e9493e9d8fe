"""Command line interface to inspect WKT geometries."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path


def _ensure_project_root_on_path() -> None:
    """Make the repository root importable when running as a script."""

    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_project_root_on_path()

from wktparse.config import ParserOptions, configure_logging, load_environment  # noqa: E402  (import after path fix)
from wktparse.document import Wkt  # noqa: E402
from wktparse.errors import WktError  # noqa: E402
from wktparse.types import Coord, Geometry  # noqa: E402

logger = logging.getLogger("wktparse.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "wkt",
        nargs="?",
        default=None,
        help="WKT text. Read from --file or standard input when omitted.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="File holding the WKT text.",
    )
    parser.add_argument(
        "--geojson",
        action="store_true",
        help="Print the parsed geometry as GeoJSON instead of a summary.",
    )
    parser.add_argument(
        "--strict-numbers",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Fail on malformed numbers instead of dropping them.",
    )
    parser.add_argument(
        "--reject-trailing",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Fail when text follows the geometry.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, ...).",
    )
    return parser


def count_coords(value: object) -> int:
    if isinstance(value, Coord):
        return 1
    if isinstance(value, tuple):
        return sum(count_coords(item) for item in value)
    if isinstance(value, Geometry):
        return sum(count_coords(getattr(value, name)) for name in value.__dataclass_fields__)
    return 0


def summarize(geometry: Geometry) -> str:
    dim = geometry.dimension
    tag = f" {dim.tag}" if dim.tag else ""
    return f"{geometry.keyword}{tag}: {count_coords(geometry)} coordinate(s)"


def _read_text(args: argparse.Namespace) -> str:
    if args.wkt is not None:
        return args.wkt
    if args.file is not None:
        return args.file.read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    load_environment()
    configure_logging(args.log_level)

    env_options = ParserOptions.from_env()
    options = ParserOptions(
        strict_numbers=env_options.strict_numbers if args.strict_numbers is None else args.strict_numbers,
        reject_trailing=env_options.reject_trailing if args.reject_trailing is None else args.reject_trailing,
    )

    try:
        document = Wkt.from_str(_read_text(args), options)
    except WktError as exc:
        logger.error("Invalid WKT: %s", exc)
        return 1

    if not document.items:
        logger.info("No geometry found in input")
        return 0

    for geometry in document:
        if args.geojson:
            print(json.dumps(geometry.__geo_interface__))
        else:
            print(summarize(geometry))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
