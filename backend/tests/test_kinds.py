"""Contract tests for kind resolution and the per-kind token parsers."""

import pytest

from itemcounter.counting.kinds import (
    PARSERS,
    SUPPORTED_KIND_NAMES,
    SupportedKind,
    parse_boolean,
    parse_date,
    parse_decimal,
    parse_integer,
    resolve_kind,
)


class TestResolveKind:
    def test_canonical_names(self):
        for name in SUPPORTED_KIND_NAMES:
            assert resolve_kind(name) is SupportedKind(name)

    def test_case_insensitive(self):
        assert resolve_kind("BOOLEAN") is SupportedKind.BOOLEAN
        assert resolve_kind(" Date ") is SupportedKind.DATE

    def test_legacy_aliases(self):
        assert resolve_kind("string") is SupportedKind.TEXT
        assert resolve_kind("Double") is SupportedKind.DECIMAL
        assert resolve_kind("datetime") is SupportedKind.DATE

    def test_enum_passthrough(self):
        assert resolve_kind(SupportedKind.INTEGER) is SupportedKind.INTEGER

    def test_unknown_returns_none(self):
        assert resolve_kind("unknown") is None

    def test_every_kind_has_a_parser(self):
        assert set(PARSERS) == set(SupportedKind)


class TestParseInteger:
    def test_plain_and_signed(self):
        assert parse_integer("42") == "42"
        assert parse_integer("-7") == "-7"
        assert parse_integer("+7") == "7"

    def test_leading_zeros_normalize(self):
        assert parse_integer("007") == "7"

    @pytest.mark.parametrize("token", ["", "1.5", "abc", " 1", "1_000", "0x10", "1e3"])
    def test_rejects_non_integers(self, token):
        with pytest.raises(ValueError):
            parse_integer(token)

    def test_32_bit_range(self):
        assert parse_integer("2147483647") == "2147483647"
        assert parse_integer("-2147483648") == "-2147483648"
        with pytest.raises(ValueError, match="range"):
            parse_integer("2147483648")


class TestParseDecimal:
    def test_equal_values_share_a_label(self):
        assert parse_decimal("1.50") == parse_decimal("1.5")
        assert parse_decimal("2") == parse_decimal("2.0")

    def test_negative_zero_folds_into_zero(self):
        assert parse_decimal("-0.0") == parse_decimal("0")

    def test_exponent(self):
        assert parse_decimal("1e3") == parse_decimal("1000")

    @pytest.mark.parametrize(
        ("token", "label"),
        [("inf", "inf"), ("-Infinity", "-inf"), ("NaN", "nan"), ("+inf", "inf")],
    )
    def test_special_values(self, token, label):
        assert parse_decimal(token) == label

    @pytest.mark.parametrize("token", ["", "abc", "1,5", "1_0", "1.2.3"])
    def test_rejects_non_numbers(self, token):
        with pytest.raises(ValueError):
            parse_decimal(token)


class TestParseBoolean:
    @pytest.mark.parametrize("token", ["true", "TRUE", "Yes", "1", " yes "])
    def test_true_words(self, token):
        assert parse_boolean(token) == "True"

    @pytest.mark.parametrize("token", ["false", "No", "0", "FALSE"])
    def test_false_words(self, token):
        assert parse_boolean(token) == "False"

    @pytest.mark.parametrize("token", ["maybe", "y", "2", ""])
    def test_rejects_other_words(self, token):
        with pytest.raises(ValueError):
            parse_boolean(token)


class TestParseDate:
    def test_slash_format(self):
        assert parse_date("01/15/2024") == "2024-01-15"
        assert parse_date("1/5/2024") == "2024-01-05"

    def test_iso_format(self):
        assert parse_date("2024-01-15") == "2024-01-15"

    def test_time_component_is_dropped(self):
        assert parse_date("2024-01-15T10:30:00") == "2024-01-15"
        assert parse_date("2024-01-15 23:59") == "2024-01-15"
        assert parse_date("01/15/2024 10:30") == "2024-01-15"
        assert parse_date("01/15/2024 10:30 PM") == "2024-01-15"
        assert parse_date("2024-01-15 10:30 PM") == "2024-01-15"
        assert parse_date("2024-01-15 10:30:45 am") == "2024-01-15"

    def test_rejection_reason_is_readable(self):
        with pytest.raises(ValueError, match="^not a recognised date$"):
            parse_date("2024-01-15 25:00")

    @pytest.mark.parametrize("token", ["2024-13-01", "13/01/2024", "yesterday", "2024/01/15", ""])
    def test_rejects_invalid_dates(self, token):
        with pytest.raises(ValueError):
            parse_date(token)
