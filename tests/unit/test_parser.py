"""Unit tests for semrange.parser: OR splitting, end-to-end parsing,
error propagation and the ``must_parse_range`` wrapper.
"""
from __future__ import annotations

import logging
import time

import pytest
import semver

from semrange.ast.nodes import And, Comparator, Operator, Or
from semrange.config import RangeConfig
from semrange.errors import (
    ArithmeticOverflowError,
    ComparatorSyntaxError,
    RangeParseError,
    RangeSyntaxError,
    VersionSyntaxError,
)
from semrange.parser import RangeParser, must_parse_range, parse_range


def _cmp(operator: Operator, text: str) -> Comparator:
    return Comparator(operator, semver.Version.parse(text))


# ---------------------------------------------------------------------------
# Splitting and normalizing
# ---------------------------------------------------------------------------


class TestRangeParserSplit:
    def test_split_on_or(self, parser: RangeParser) -> None:
        assert parser.split("1.x || >=2.5.0 ||  5.0.0 - 7.2.3") == [
            "1.x",
            ">=2.5.0",
            "5.0.0 - 7.2.3",
        ]

    def test_split_drops_empty_segments(self, parser: RangeParser) -> None:
        assert parser.split("1.2.3 || || ") == ["1.2.3"]

    def test_normalize_groups(self, parser: RangeParser) -> None:
        assert parser.normalize("^1.2.3 || 2.x") == [
            [">=1.2.3", "<2.0.0"],
            [">=2.0.0", "<3.0.0"],
        ]


# ---------------------------------------------------------------------------
# Tree shape
# ---------------------------------------------------------------------------


class TestParseStructure:
    def test_or_of_and_groups(self) -> None:
        expr = parse_range(">1.0.0 <2.0.0 || >=3.0.0")
        assert expr == Or(
            (
                And((_cmp(Operator.GT, "1.0.0"), _cmp(Operator.LT, "2.0.0"))),
                And((_cmp(Operator.GTE, "3.0.0"),)),
            )
        )

    def test_single_segment_is_still_or(self) -> None:
        expr = parse_range("1.2.3")
        assert isinstance(expr, Or)
        assert expr.operands == (And((_cmp(Operator.EQ, "1.2.3"),)),)

    def test_trailing_or_is_ignored(self) -> None:
        assert parse_range("1.2.3 ||") == parse_range("1.2.3")

    def test_str_renders_canonical_form(self) -> None:
        assert str(parse_range("~1.2 || 3.x")) == ">=1.2.0 <1.3.0 || >=3.0.0 <4.0.0"

    def test_not_equal(self) -> None:
        expr = parse_range("!=1.2.3")
        assert expr.operands[0].operands == (_cmp(Operator.NEQ, "1.2.3"),)  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


class TestParseMatching:
    @pytest.mark.parametrize(
        "version,expected",
        [
            ("1.1.1", True),
            ("3.0.0", True),
            ("3.5.0", True),
            ("1.0.0", False),
            ("2.0.0", False),
            ("2.9.9", False),
        ],
    )
    def test_disjunction(self, version: str, expected: bool) -> None:
        expr = parse_range(">1.0.0 <2.0.0 || >=3.0.0")
        assert expr.matches(version) is expected

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("1.2.2", False),
            ("1.2.3", True),
            ("2.0.0", True),
            ("2.3.4", True),
            ("2.3.5", False),
        ],
    )
    def test_hyphen_is_inclusive(self, version: str, expected: bool) -> None:
        assert parse_range("1.2.3 - 2.3.4").matches(version) is expected

    @pytest.mark.parametrize(
        "version", ["0.0.0", "1.2.3", "1.0.0-alpha", "1.2.3+build.7", "10.20.30-rc.1"]
    )
    def test_empty_bounds_never_match(self, version: str) -> None:
        assert parse_range(f">={version} <{version}").matches(version) is False

    @pytest.mark.parametrize(
        "version", ["0.0.0", "1.2.3", "1.0.0-alpha", "1.2.3+build.7", "10.20.30-rc.1"]
    )
    def test_exact_matches_itself(self, version: str) -> None:
        assert parse_range(f"={version}").matches(version) is True

    @pytest.mark.parametrize("text", ["x", "X", "*", "x.x", "x || 1.0.0"])
    def test_wildcards_match_everything(self, text: str) -> None:
        expr = parse_range(text)
        for version in ("0.0.0", "1.2.3", "999.999.999"):
            assert expr.matches(version)

    def test_strict_wildcard_bound_matches_nothing(self) -> None:
        expr = parse_range(">x")
        assert not expr.matches("0.0.0")
        assert not expr.matches("1.2.3")

    def test_not_equal_excludes_one_version(self) -> None:
        expr = parse_range("1.x !=1.2.3")
        assert expr.matches("1.2.4")
        assert not expr.matches("1.2.3")
        assert not expr.matches("2.0.0")

    def test_prerelease_ordering_applies(self) -> None:
        expr = parse_range(">=1.2.3-beta")
        assert expr.matches("1.2.3-beta.1")
        assert expr.matches("1.2.3")
        assert not expr.matches("1.2.3-alpha")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    @pytest.mark.parametrize("text", ["", "   ", "||", " || || "])
    def test_no_comparators(self, text: str) -> None:
        with pytest.raises(RangeSyntaxError):
            parse_range(text)

    def test_bad_version(self) -> None:
        with pytest.raises(VersionSyntaxError) as exc_info:
            parse_range(">=1.2.x.y")
        assert exc_info.value.version_text == "1.2.x.y"
        assert exc_info.value.range_text == ">=1.2.x.y"

    def test_dangling_hyphen(self) -> None:
        with pytest.raises(RangeSyntaxError):
            parse_range("1.2.3 -")

    @pytest.mark.parametrize("text", ["=>1.0.0", "#1.2.3", "1.0.0 || =<2.0.0"])
    def test_bad_operator(self, text: str) -> None:
        with pytest.raises(ComparatorSyntaxError) as exc_info:
            parse_range(text)
        assert exc_info.value.range_text == text

    def test_overflow_carries_range(self) -> None:
        with pytest.raises(ArithmeticOverflowError) as exc_info:
            parse_range("^10.0.0", RangeConfig(max_component=10))
        assert exc_info.value.range_text == "^10.0.0"

    def test_errors_share_base_class(self) -> None:
        for text in ("", ">=1.2.x.y", "=>1.0.0"):
            with pytest.raises(RangeParseError):
                parse_range(text)

    def test_error_in_later_segment_aborts_parse(self) -> None:
        with pytest.raises(VersionSyntaxError):
            parse_range("^1.2.3 || >=1.2.x.y")


# ---------------------------------------------------------------------------
# Loose mode
# ---------------------------------------------------------------------------


class TestLooseParsing:
    def test_keyword_shortcut(self) -> None:
        assert parse_range("01.2.3", loose=True).matches("1.2.3")

    def test_config(self, loose_parser: RangeParser) -> None:
        assert loose_parser.parse("1.2.3beta").matches("1.2.3-beta")

    def test_loose_caret(self, loose_parser: RangeParser) -> None:
        expr = loose_parser.parse("^01.02.03")
        assert expr.matches("1.5.0")
        assert not expr.matches("2.0.0")

    def test_strict_rejects_loose_syntax(self) -> None:
        with pytest.raises(VersionSyntaxError):
            parse_range("01.2.3")

    def test_keyword_overrides_config(self) -> None:
        with pytest.raises(VersionSyntaxError):
            parse_range("01.2.3", RangeConfig(loose=True), loose=False)


# ---------------------------------------------------------------------------
# must_parse_range
# ---------------------------------------------------------------------------


class TestMustParseRange:
    def test_valid_range(self) -> None:
        assert must_parse_range("^1.2.3") == parse_range("^1.2.3")

    def test_invalid_range_exits(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.CRITICAL, logger="semrange.parser.parser"):
            with pytest.raises(SystemExit) as exc_info:
                must_parse_range(">=1.2.x.y")
        assert ">=1.2.x.y" in str(exc_info.value.code)
        assert any(record.levelno == logging.CRITICAL for record in caplog.records)

    def test_loose_shortcut(self) -> None:
        assert must_parse_range("01.2.3", loose=True).matches("1.2.3")

    def test_loose_shortcut_off_exits(self) -> None:
        with pytest.raises(SystemExit):
            must_parse_range("01.2.3", RangeConfig(loose=True), loose=False)


# ---------------------------------------------------------------------------
# Whitespace handling
# ---------------------------------------------------------------------------


class TestWideWhitespace:
    def test_long_gap_between_comparators(self) -> None:
        start = time.perf_counter()
        expr = parse_range(">=1.0.0" + " " * 10_000 + "<2.0.0")
        assert time.perf_counter() - start < 1.0
        assert expr.matches("1.5.0")
        assert not expr.matches("2.0.0")

    def test_long_gap_around_or(self, parser: RangeParser) -> None:
        gap = " " * 10_000
        assert parser.split(f"1.x{gap}||{gap}3.x") == ["1.x", "3.x"]

    def test_tabs_and_newlines_separate_tokens(self) -> None:
        assert parse_range(">=1.0.0\t<2.0.0\n||\n3.x") == parse_range(">=1.0.0 <2.0.0 || 3.x")

    def test_normalize_rejects_empty_range(self, parser: RangeParser) -> None:
        with pytest.raises(RangeSyntaxError):
            parser.normalize("  ||  ")
