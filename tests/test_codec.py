"""Tests for the record line codec (core/codec.py)."""

from __future__ import annotations

import pytest

from boat_ledger.core.codec import (
    decode_boat,
    encode_boat,
    parse_float,
    parse_int,
    parse_location_kind,
    split_fields,
)
from boat_ledger.core.models import Boat, Land, LocationKind, Slip, Storage, Trailer
from boat_ledger.exceptions import (
    DecodeError,
    MalformedLineError,
    UnknownLocationError,
)
from conftest import make_boat


# ---------------------------------------------------------------------------
# Lenient numeric parsing
# ---------------------------------------------------------------------------

class TestParseFloat:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("40", 40.0),
            ("12.50", 12.5),
            ("  7.25", 7.25),
            ("-3.5", -3.5),
            ("1.5e1", 15.0),
            (".5", 0.5),
            ("40ft", 40.0),
            ("abc", 0.0),
            ("", 0.0),
        ],
    )
    def test_prefix_parsing(self, text: str, expected: float) -> None:
        assert parse_float(text) == expected

    @pytest.mark.parametrize("text", ["1e999", "-1e999", "9" * 400])
    def test_non_finite_reads_as_zero(self, text: str) -> None:
        assert parse_float(text) == 0.0


class TestParseInt:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12", 12),
            (" 85", 85),
            ("-4", -4),
            ("7b", 7),
            ("3.9", 3),
            ("x7", 0),
            ("", 0),
        ],
    )
    def test_prefix_parsing(self, text: str, expected: int) -> None:
        assert parse_int(text) == expected

    def test_digit_run_past_conversion_limit_reads_as_zero(self) -> None:
        assert parse_int("9" * 5000) == 0
        assert parse_int("-" + "9" * 5000 + "x") == 0


# ---------------------------------------------------------------------------
# Location keyword
# ---------------------------------------------------------------------------

class TestParseLocationKind:
    @pytest.mark.parametrize(
        ("keyword", "expected"),
        [
            ("slip", LocationKind.SLIP),
            ("SLIP", LocationKind.SLIP),
            ("Land", LocationKind.LAND),
            ("trailer", LocationKind.TRAILER),
            ("trailor", LocationKind.TRAILER),
            ("StOrAgE", LocationKind.STORAGE),
        ],
    )
    def test_case_insensitive(self, keyword: str, expected: LocationKind) -> None:
        assert parse_location_kind(keyword) is expected

    def test_unknown_keyword_raises(self) -> None:
        with pytest.raises(UnknownLocationError) as exc_info:
            parse_location_kind("dock")
        assert exc_info.value.keyword == "dock"
        assert exc_info.value.hint is not None


# ---------------------------------------------------------------------------
# decode_boat
# ---------------------------------------------------------------------------

class TestDecodeBoat:
    def test_slip(self) -> None:
        assert decode_boat("Alice,40,slip,12,0.00") == Boat(
            name="Alice", length=40.0, location=Slip(number=12), amount_owed=0.0,
        )

    def test_land(self) -> None:
        boat = decode_boat("Bob,20,land,C,0.00")
        assert boat.location == Land(bay="C")

    def test_trailer(self) -> None:
        boat = decode_boat("Carol,25,TRAILER,ABC123,10.50")
        assert boat.location == Trailer(tag="ABC123")
        assert boat.amount_owed == 10.5

    def test_legacy_trailor_spelling(self) -> None:
        boat = decode_boat("Old Salt,22,trailor,XYZ,1.00")
        assert boat.location == Trailer(tag="XYZ")

    def test_storage(self) -> None:
        boat = decode_boat("Dave,30,storage,7,42.42")
        assert boat.location == Storage(space=7)
        assert boat.amount_owed == 42.42

    def test_name_keeps_spaces(self) -> None:
        assert decode_boat("Sea Breeze,30,slip,1,0").name == "Sea Breeze"

    def test_line_terminators_stripped(self) -> None:
        boat = decode_boat("Alice,40,slip,12,5.00\r\n")
        assert boat.amount_owed == 5.0

    def test_empty_fields_collapse(self) -> None:
        boat = decode_boat("Alice,,40,slip,,12,0.00")
        assert boat == make_boat()

    def test_extra_fields_ignored(self) -> None:
        boat = decode_boat("Alice,40,slip,12,0.00,extra,junk")
        assert boat == make_boat()

    def test_out_of_range_numbers_kept(self) -> None:
        assert decode_boat("A,10,slip,999,0").location == Slip(number=999)
        assert decode_boat("A,10,storage,0,0").location == Storage(space=0)

    def test_malformed_numbers_default_to_zero(self) -> None:
        boat = decode_boat("Alice,long,slip,x7,owed")
        assert boat.length == 0.0
        assert boat.location == Slip(number=0)
        assert boat.amount_owed == 0.0

    def test_land_keeps_first_character(self) -> None:
        assert decode_boat("A,10,land,Cx,0").location == Land(bay="C")

    def test_trailer_tag_truncated(self) -> None:
        boat = decode_boat("A,10,trailer,ABCDEFGHIJKL,0")
        assert boat.location == Trailer(tag="ABCDEFGHI")

    def test_name_truncated(self) -> None:
        boat = decode_boat(f"{'n' * 200},10,slip,1,0")
        assert len(boat.name) == 127

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "Alice",
            "Alice,40",
            "Alice,40,slip",
            "Alice,40,slip,12",
            ",,,,",
        ],
    )
    def test_missing_fields(self, line: str) -> None:
        with pytest.raises(MalformedLineError):
            decode_boat(line)

    def test_unknown_location(self) -> None:
        with pytest.raises(UnknownLocationError):
            decode_boat("Alice,40,dock,12,0.00")

    def test_unknown_location_reported_on_short_line(self) -> None:
        with pytest.raises(UnknownLocationError):
            decode_boat("Alice,40,dock")

    def test_all_failures_are_decode_errors(self) -> None:
        for line in ("Alice", "Alice,40,moon,1,0"):
            with pytest.raises(DecodeError):
                decode_boat(line)


class TestSplitFields:
    def test_drops_empty_tokens(self) -> None:
        assert split_fields("a,,b,\n") == ["a", "b"]


# ---------------------------------------------------------------------------
# encode_boat
# ---------------------------------------------------------------------------

class TestEncodeBoat:
    def test_slip(self) -> None:
        assert encode_boat(make_boat()) == "Alice,40,slip,12,0.00"

    def test_land(self) -> None:
        boat = make_boat("Bob", 20.0, Land(bay="C"), 280.0)
        assert encode_boat(boat) == "Bob,20,land,C,280.00"

    def test_trailer_uses_modern_keyword(self) -> None:
        boat = make_boat("Carol", 25.0, Trailer(tag="ABC123"), 12.5)
        assert encode_boat(boat) == "Carol,25,trailer,ABC123,12.50"

    def test_storage(self) -> None:
        boat = make_boat("Dave", 30.0, Storage(space=7), -3.0)
        assert encode_boat(boat) == "Dave,30,storage,7,-3.00"

    def test_length_written_as_whole_feet(self) -> None:
        assert encode_boat(make_boat(length=40.4)).split(",")[1] == "40"
        assert encode_boat(make_boat(length=40.6)).split(",")[1] == "41"


class TestRoundTrip:
    def test_every_kind(self, every_kind: list[Boat]) -> None:
        for boat in every_kind:
            assert decode_boat(encode_boat(boat)) == boat

    def test_fractional_length_truncates_to_whole_feet(self) -> None:
        boat = make_boat(length=32.2)
        assert decode_boat(encode_boat(boat)).length == 32.0
