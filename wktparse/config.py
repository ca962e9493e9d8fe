"""Configuration for the WKT reader.

Settings come from ``WKTPARSE_*`` environment variables, optionally seeded
from a ``.env`` file. Importing this module has no side effects; the command
line front end calls :func:`load_environment` and :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "WKTPARSE_"
ENV_FILE = os.getenv("WKTPARSE_ENV_FILE", ".env")
LOG_LEVEL_ENV = "WKTPARSE_LOG_LEVEL"
LOG_FORMAT_ENV = "WKTPARSE_LOG_FORMAT"
STRICT_NUMBERS_ENV = "WKTPARSE_STRICT_NUMBERS"
REJECT_TRAILING_ENV = "WKTPARSE_REJECT_TRAILING"
PACKAGE_LOGGER = "wktparse"
_DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_TRUTHY = {"1", "true", "yes", "on"}

logger = logging.getLogger(__name__)


def load_environment(path: os.PathLike[str] | str = ENV_FILE) -> dict[str, str]:
    """Export the ``WKTPARSE_*`` settings found in a ``.env`` file.

    Lines look like ``KEY=value``; blank lines, ``#`` comments and keys
    without the ``WKTPARSE_`` prefix are skipped. Variables already present
    in ``os.environ`` take precedence over the file.

    Returns:
        The settings read from the file, before precedence is applied.
    """

    env_path = Path(path)
    if not env_path.is_file():
        return {}

    loaded: dict[str, str] = {}

    for number, raw_line in enumerate(env_path.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            logger.debug("%s:%d: not a KEY=value line", env_path, number)
            continue
        if not key.startswith(ENV_PREFIX):
            logger.debug("%s:%d: ignoring %s", env_path, number, key)
            continue

        loaded[key] = value.strip().strip("\"'")
        os.environ.setdefault(key, loaded[key])

    return loaded


def _resolve_log_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    if level.strip().isdigit():
        return int(level)
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | int | None = None, fmt: str | None = None) -> logging.Logger:
    """Send ``wktparse`` log records to standard error.

    Args:
        level: Logging level (``INFO``, ``DEBUG``, ``10``...). When ``None``
            the value of ``WKTPARSE_LOG_LEVEL`` is used, falling back to
            ``INFO``.
        fmt: Log record format. When ``None`` uses ``WKTPARSE_LOG_FORMAT`` or
            the default format.

    Only the package logger is touched, so applications embedding the
    parser keep their own root configuration. Calling it again updates the
    handler installed by the first call.
    """

    level_value = _resolve_log_level(level or os.getenv(LOG_LEVEL_ENV, "INFO"))
    formatter = logging.Formatter(fmt or os.getenv(LOG_FORMAT_ENV, _DEFAULT_LOG_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level_value)

    if not package_logger.handlers:
        package_logger.addHandler(logging.StreamHandler())
    for handler in package_logger.handlers:
        handler.setFormatter(formatter)

    return package_logger


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Switches that make the parser stricter than the default behaviour."""

    # Raise on numeric runs such as ``4.2p`` instead of ending the input there.
    strict_numbers: bool = False
    # Fail when tokens follow the parsed geometry instead of ignoring them.
    reject_trailing: bool = False

    @classmethod
    def from_env(cls) -> "ParserOptions":
        return cls(
            strict_numbers=_env_flag(STRICT_NUMBERS_ENV),
            reject_trailing=_env_flag(REJECT_TRAILING_ENV),
        )


__all__ = [
    "ENV_FILE",
    "ParserOptions",
    "configure_logging",
    "load_environment",
]
