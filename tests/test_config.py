from __future__ import annotations

import logging
import os

import pytest

from wktparse.config import ParserOptions, configure_logging, load_environment


def test_load_environment_reads_pairs(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n\nWKTPARSE_STRICT_NUMBERS='true'\nnot a pair\n=orphan\nHOME_DIR=/tmp\nWKTPARSE_TEST_VALUE = 42\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("WKTPARSE_STRICT_NUMBERS", "unset")
    monkeypatch.delenv("WKTPARSE_STRICT_NUMBERS")
    monkeypatch.setenv("WKTPARSE_TEST_VALUE", "keep")

    loaded = load_environment(env_file)

    assert loaded == {"WKTPARSE_STRICT_NUMBERS": "true", "WKTPARSE_TEST_VALUE": "42"}
    assert os.environ["WKTPARSE_STRICT_NUMBERS"] == "true"
    assert os.environ["WKTPARSE_TEST_VALUE"] == "keep"


def test_load_environment_keeps_existing_values(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("WKTPARSE_TEST_VALUE=new\nWKTPARSE_OTHER_VALUE=fresh\n", encoding="utf-8")
    monkeypatch.setenv("WKTPARSE_TEST_VALUE", "old")
    monkeypatch.setenv("WKTPARSE_OTHER_VALUE", "unset")
    monkeypatch.delenv("WKTPARSE_OTHER_VALUE")

    loaded = load_environment(env_file)

    assert loaded == {"WKTPARSE_TEST_VALUE": "new", "WKTPARSE_OTHER_VALUE": "fresh"}
    assert os.environ["WKTPARSE_TEST_VALUE"] == "old"
    assert os.environ["WKTPARSE_OTHER_VALUE"] == "fresh"


def test_load_environment_skips_foreign_keys(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("DATABASE_URL=postgres://db\n", encoding="utf-8")
    monkeypatch.delenv("DATABASE_URL", raising=False)

    assert load_environment(env_file) == {}
    assert "DATABASE_URL" not in os.environ


def test_load_environment_missing_file(tmp_path):
    assert load_environment(tmp_path / "missing.env") == {}


def test_parser_options_from_env(monkeypatch):
    monkeypatch.setenv("WKTPARSE_STRICT_NUMBERS", "Yes")
    monkeypatch.setenv("WKTPARSE_REJECT_TRAILING", "0")

    assert ParserOptions.from_env() == ParserOptions(strict_numbers=True, reject_trailing=False)


def test_parser_options_defaults(monkeypatch):
    monkeypatch.delenv("WKTPARSE_STRICT_NUMBERS", raising=False)
    monkeypatch.delenv("WKTPARSE_REJECT_TRAILING", raising=False)

    assert ParserOptions.from_env() == ParserOptions()


@pytest.fixture
def package_logger():
    package_logger = logging.getLogger("wktparse")
    handlers, level = list(package_logger.handlers), package_logger.level
    package_logger.handlers.clear()
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


def test_configure_logging_installs_one_handler(package_logger):
    root_handlers = list(logging.getLogger().handlers)

    assert configure_logging("debug", "%(message)s") is package_logger
    configure_logging("WARNING", "%(levelname)s %(message)s")

    assert package_logger.level == logging.WARNING
    assert len(package_logger.handlers) == 1
    assert package_logger.handlers[0].formatter._fmt == "%(levelname)s %(message)s"
    assert logging.getLogger().handlers == root_handlers


@pytest.mark.parametrize(
    ("level", "expected"),
    [("10", logging.DEBUG), ("error", logging.ERROR), ("nonsense", logging.INFO), (logging.WARNING, logging.WARNING)],
)
def test_configure_logging_level_values(package_logger, level, expected):
    configure_logging(level)
    assert package_logger.level == expected


def test_configure_logging_reads_env(package_logger, monkeypatch):
    monkeypatch.setenv("WKTPARSE_LOG_LEVEL", "debug")
    configure_logging()
    assert package_logger.level == logging.DEBUG
