"""Version parsing and ordering.

Versions are ``semver.Version`` objects from the ``semver`` library,
which owns the SemVer 2.0.0 precedence rules: numeric prerelease
identifiers compare as integers, alphanumeric ones lexically, numeric
sorts before alphanumeric, a prerelease sorts before its release, and
build metadata never takes part in ordering.

This module adapts that library to the two operations range evaluation
needs, ``parse_version`` and ``compare_versions``, and adds the loose
syntax (``v01.2.3beta``) that ``semver`` itself rejects.
"""
from __future__ import annotations

from typing import Union

import semver

from semrange.errors import VersionSyntaxError
from semrange.grammar import PatternName, default_grammar

VersionLike = Union[semver.Version, str]


def parse_version(text: str, loose: bool = False) -> semver.Version:
    """Parse a version string.

    Parameters
    ----------
    text:
        ``v?MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``.
    loose:
        Also accept leading zeros, any run of ``v``/``=``/whitespace
        before the version, and a prerelease without its hyphen.

    Returns
    -------
    semver.Version
        The parsed, immutable version.

    Raises
    ------
    VersionSyntaxError
        If ``text`` is not a valid version in the selected mode.
    """
    if loose:
        return _parse_loose(text)
    candidate = text.strip()
    if candidate[:1] == "v":
        candidate = candidate[1:]
    try:
        return semver.Version.parse(candidate)
    except (ValueError, TypeError) as exc:
        raise VersionSyntaxError(text, reason=str(exc)) from exc


def _parse_loose(text: str) -> semver.Version:
    match = default_grammar().match(PatternName.LOOSE, text.strip())
    if match is None:
        raise VersionSyntaxError(text, reason="not a valid loose version")
    major, minor, patch, prerelease, build = match.groups()
    return semver.Version(
        int(major),
        int(minor),
        int(patch),
        prerelease=prerelease,
        build=build,
    )


def coerce_version(value: VersionLike, loose: bool = False) -> semver.Version:
    """Return ``value`` as a ``semver.Version``, parsing it if it is a string."""
    if isinstance(value, semver.Version):
        return value
    return parse_version(value, loose=loose)


def compare_versions(a: semver.Version, b: semver.Version) -> int:
    """Three-way compare two versions, ignoring build metadata.

    Returns
    -------
    int
        ``-1`` if ``a < b``, ``0`` if equal, ``1`` if ``a > b``.
    """
    result = a.compare(b)
    return (result > 0) - (result < 0)
