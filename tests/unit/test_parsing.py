"""Unit tests for request body field parsing."""

from datetime import date
from decimal import Decimal
from uuid import UUID

import pytest

from buildtrack.interfaces.api.resources.parsing import (
    parse_date,
    parse_decimal,
    parse_text,
    parse_uuid,
)


class TestParseDate:
    def test_iso_date(self) -> None:
        assert parse_date("2024-05-01") == date(2024, 5, 1)

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_is_none(self, value) -> None:
        assert parse_date(value) is None

    def test_malformed_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_date("01/05/2024")


class TestParseUuid:
    def test_valid(self) -> None:
        raw = "5b1f0c3e-8a7d-4a39-9c8e-2f1d3a4b5c6d"
        assert parse_uuid(raw) == UUID(raw)

    def test_empty_is_none(self) -> None:
        assert parse_uuid("") is None

    def test_malformed_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_uuid("not-a-uuid")


class TestParseDecimal:
    @pytest.mark.parametrize(
        "value,expected",
        [(12, Decimal("12")), ("12.50", Decimal("12.50")), (0.5, Decimal("0.5"))],
    )
    def test_numbers(self, value, expected) -> None:
        assert parse_decimal(value, "amount") == expected

    @pytest.mark.parametrize("value", [None, "", True])
    def test_missing_is_required(self, value) -> None:
        with pytest.raises(ValueError, match="amount is required"):
            parse_decimal(value, "amount")

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity"])
    def test_not_a_number(self, value) -> None:
        with pytest.raises(ValueError, match="amount must be a number"):
            parse_decimal(value, "amount")


class TestParseText:
    def test_string_passes_through(self) -> None:
        assert parse_text(" Site Supervisor ", "name") == " Site Supervisor "

    def test_missing_is_empty(self) -> None:
        assert parse_text(None, "name") == ""

    @pytest.mark.parametrize("value", [123, 1.5, True, ["a"], {"a": 1}])
    def test_non_string_raises(self, value) -> None:
        with pytest.raises(ValueError, match="name must be a string"):
            parse_text(value, "name")
