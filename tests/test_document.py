from __future__ import annotations

import dataclasses

import pytest

from wktparse import (
    Coord,
    LineString,
    MalformedNumberError,
    MalformedStructureError,
    MultiLineString,
    NonAsciiKeywordError,
    ParserOptions,
    Point,
    UnknownTypeError,
    Wkt,
    WktError,
    loads,
)
from wktparse.tokenizer import Tokens


def test_empty_string():
    wkt = Wkt.from_str("")
    assert len(wkt) == 0
    assert wkt.items == ()


def test_whitespace_only_is_empty():
    assert Wkt.from_str("  \n\t").items == ()


def test_basic_point():
    wkt = Wkt.from_str("POINT (10 -20)")

    assert len(wkt) == 1
    point = wkt.items[0]
    assert isinstance(point, Point)
    assert point.coord.x == 10.0
    assert point.coord.y == -20.0
    assert point.coord.z is None
    assert point.coord.m is None


def test_basic_linestring():
    wkt = Wkt.from_str("LINESTRING (10 -20, -0 -0.5)")

    assert len(wkt) == 1
    linestring = wkt.items[0]
    assert isinstance(linestring, LineString)
    assert linestring.coords == (Coord(10.0, -20.0), Coord(0.0, -0.5))
    assert all(coord.z is None and coord.m is None for coord in linestring.coords)


def test_basic_multilinestring():
    wkt = Wkt.from_str("MULTILINESTRING ((10 -20, -0 -0.5), (0 0, 1 1, 2 2))")

    (multi,) = wkt.items
    assert isinstance(multi, MultiLineString)
    assert [len(line.coords) for line in multi.lines] == [2, 3]
    assert multi.lines[1].coords[2] == Coord(2.0, 2.0)


@pytest.mark.parametrize("text", ["POINT ()", "POINT (10)", "POINT 10", "POINT (10 -20 40)"])
def test_invalid_points(text):
    with pytest.raises(MalformedStructureError):
        Wkt.from_str(text)


def test_missing_closing_paren():
    with pytest.raises(MalformedStructureError, match=r"expected '\)'"):
        Wkt.from_str("LINESTRING (1 2, 3 4")


def test_empty_multilinestring_member_fails():
    with pytest.raises(MalformedStructureError):
        Wkt.from_str("MULTILINESTRING (())")


@pytest.mark.parametrize("text", ["point (1 2)", "Point (1 2)", "pOiNt(1 2)"])
def test_keyword_is_case_insensitive(text):
    assert Wkt.from_str(text).items == (Point(Coord(1.0, 2.0)),)


def test_non_ascii_keyword():
    with pytest.raises(NonAsciiKeywordError):
        Wkt.from_str("PÖINT (1 2)")


@pytest.mark.parametrize("text", ["CIRCLE (1 2)", "(1 2)", "10 20", ", POINT (1 2)"])
def test_unknown_type(text):
    with pytest.raises(UnknownTypeError):
        Wkt.from_str(text)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        Wkt.from_str("POINT (1)")
    assert issubclass(UnknownTypeError, WktError)


def test_error_reports_offending_token():
    with pytest.raises(MalformedStructureError) as excinfo:
        Wkt.from_str("POINT (1 x)")

    assert excinfo.value.token is not None
    assert excinfo.value.token.value == "x"
    assert "offset 9" in str(excinfo.value)


@pytest.mark.parametrize(
    "text",
    ["POINT (1 2p)", "POINT (1 2p 3)", "POINT (1 2 3p)", "LINESTRING (1 2, 3 4p 5)"],
)
def test_malformed_number_fails_parse_by_default(text):
    with pytest.raises(MalformedStructureError):
        Wkt.from_str(text)


def test_malformed_number_in_strict_mode():
    with pytest.raises(MalformedNumberError):
        Wkt.from_str("POINT (1 2p)", ParserOptions(strict_numbers=True))


def test_trailing_input_is_ignored_by_default():
    wkt = loads("POINT (1 2) POINT (3 4)")
    assert wkt.items == (Point(Coord(1.0, 2.0)),)


def test_trailing_input_rejected_on_request():
    with pytest.raises(MalformedStructureError, match="after geometry"):
        loads("POINT (1 2) junk", reject_trailing=True)


def test_from_tokens_accepts_tokenizer():
    wkt = Wkt.from_tokens(Tokens.from_str("POINT (1 2)"))
    assert list(wkt) == [Point(Coord(1.0, 2.0))]


def test_document_is_immutable():
    wkt = Wkt((Point(Coord(1.0, 2.0)), Point(Coord(3.0, 4.0))))

    assert len(wkt) == 2
    with pytest.raises(dataclasses.FrozenInstanceError):
        wkt.items = ()
