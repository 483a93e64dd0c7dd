"""Unit tests for semrange.version: strict and loose parsing, coercion
and precedence ordering.
"""
from __future__ import annotations

import pytest
import semver

from semrange.errors import RangeParseError, VersionSyntaxError
from semrange.version import coerce_version, compare_versions, parse_version


# ---------------------------------------------------------------------------
# Strict parsing
# ---------------------------------------------------------------------------


class TestParseVersionStrict:
    def test_plain_release(self) -> None:
        version = parse_version("1.2.3")
        assert (version.major, version.minor, version.patch) == (1, 2, 3)
        assert version.prerelease is None
        assert version.build is None

    def test_prerelease_and_build(self) -> None:
        version = parse_version("1.2.3-beta.1+build.5")
        assert version.prerelease == "beta.1"
        assert version.build == "build.5"

    def test_leading_v_is_dropped(self) -> None:
        assert parse_version("v1.2.3") == semver.Version(1, 2, 3)

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert parse_version("  1.2.3 ") == semver.Version(1, 2, 3)

    @pytest.mark.parametrize("text", ["1.2", "01.2.3", "1.2.3beta", "=1.2.3", "abc", ""])
    def test_invalid_raises(self, text: str) -> None:
        with pytest.raises(VersionSyntaxError):
            parse_version(text)

    def test_error_carries_text(self) -> None:
        with pytest.raises(VersionSyntaxError) as exc_info:
            parse_version("1.2")
        assert exc_info.value.version_text == "1.2"
        assert exc_info.value.range_text == ""
        assert "1.2" in str(exc_info.value)

    def test_error_is_range_parse_error(self) -> None:
        with pytest.raises(RangeParseError):
            parse_version("nope")


# ---------------------------------------------------------------------------
# Loose parsing
# ---------------------------------------------------------------------------


class TestParseVersionLoose:
    def test_leading_zeros(self) -> None:
        assert parse_version("01.02.03", loose=True) == semver.Version(1, 2, 3)

    def test_prefix_run(self) -> None:
        assert parse_version("=v1.2.3", loose=True) == semver.Version(1, 2, 3)

    def test_prerelease_without_hyphen(self) -> None:
        version = parse_version("1.2.3beta", loose=True)
        assert version.prerelease == "beta"

    def test_build_is_kept(self) -> None:
        version = parse_version("1.2.3-rc.1+sha.abc", loose=True)
        assert version.prerelease == "rc.1"
        assert version.build == "sha.abc"

    def test_still_requires_three_parts(self) -> None:
        with pytest.raises(VersionSyntaxError):
            parse_version("1.2", loose=True)


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


class TestCoerceVersion:
    def test_version_passes_through(self) -> None:
        version = semver.Version(1, 0, 0)
        assert coerce_version(version) is version

    def test_string_is_parsed(self) -> None:
        assert coerce_version("2.0.0") == semver.Version(2, 0, 0)

    def test_loose_string(self) -> None:
        assert coerce_version("v02.0.0", loose=True) == semver.Version(2, 0, 0)


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


_ORDERED = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
    "1.0.1",
    "1.1.0",
    "2.0.0",
]


class TestCompareVersions:
    @pytest.mark.parametrize("lower,higher", list(zip(_ORDERED, _ORDERED[1:])))
    def test_precedence(self, lower: str, higher: str) -> None:
        a, b = parse_version(lower), parse_version(higher)
        assert compare_versions(a, b) == -1
        assert compare_versions(b, a) == 1

    def test_equal(self) -> None:
        assert compare_versions(parse_version("1.2.3"), parse_version("1.2.3")) == 0

    def test_build_metadata_ignored(self) -> None:
        a = parse_version("1.0.0+a")
        b = parse_version("1.0.0+b")
        assert compare_versions(a, b) == 0
