"""Pattern vocabulary for version-range expressions.

Every recognizer used by the normalizer and the predicate builder is
named by a member of the ``PatternName`` enum, and every name maps to
one regular-expression source string in ``PATTERN_SOURCES``.  The
sources are composed from smaller fragments (numeric identifier,
prerelease, build metadata, ...) so that a fragment is written once and
reused wherever it appears.

Most recognizers come in two flavours: the strict form, which follows
the SemVer 2.0.0 grammar exactly, and a ``*_LOOSE`` form that also
accepts leading zeros, a ``v``/``=`` prefix and a prerelease without
its leading hyphen (``1.2.3beta``).

Capture groups are positional.  The group layout of each pattern is
documented next to its definition because the normalizer reads
captures by index.
"""
from __future__ import annotations

from enum import Enum, auto
from typing import Final


class PatternName(Enum):
    """Exhaustive enumeration of the named range-grammar patterns."""

    # -----------------------------------------------------------------
    # Identifiers
    # -----------------------------------------------------------------
    NUMERIC_IDENTIFIER = auto()
    NUMERIC_IDENTIFIER_LOOSE = auto()
    NON_NUMERIC_IDENTIFIER = auto()
    PRERELEASE_IDENTIFIER = auto()
    PRERELEASE_IDENTIFIER_LOOSE = auto()
    BUILD_IDENTIFIER = auto()

    # -----------------------------------------------------------------
    # Version fragments
    # -----------------------------------------------------------------
    MAIN_VERSION = auto()
    MAIN_VERSION_LOOSE = auto()
    PRERELEASE = auto()
    PRERELEASE_LOOSE = auto()
    BUILD = auto()
    FULL = auto()
    LOOSE = auto()

    # -----------------------------------------------------------------
    # Comparators
    # -----------------------------------------------------------------
    GTLT = auto()
    COMPARATOR = auto()
    COMPARATOR_LOOSE = auto()
    COMPARATOR_TRIM = auto()

    # -----------------------------------------------------------------
    # X-ranges
    # -----------------------------------------------------------------
    XRANGE_IDENTIFIER = auto()
    XRANGE_IDENTIFIER_LOOSE = auto()
    XRANGE_PLAIN = auto()
    XRANGE_PLAIN_LOOSE = auto()
    XRANGE = auto()
    XRANGE_LOOSE = auto()

    # -----------------------------------------------------------------
    # Tilde / caret ranges
    # -----------------------------------------------------------------
    LONE_TILDE = auto()
    TILDE_TRIM = auto()
    TILDE = auto()
    TILDE_LOOSE = auto()
    LONE_CARET = auto()
    CARET_TRIM = auto()
    CARET = auto()
    CARET_LOOSE = auto()

    # -----------------------------------------------------------------
    # Whole-segment shapes
    # -----------------------------------------------------------------
    HYPHEN_RANGE = auto()
    HYPHEN_RANGE_LOOSE = auto()
    STAR = auto()
    OR_SEPARATOR = auto()
    WHITESPACE = auto()


# Patterns whose meaning changes under loose parsing, keyed by the strict
# name.  ``Grammar.pattern(name, loose=True)`` consults this table.
LOOSE_VARIANTS: Final[dict[PatternName, PatternName]] = {
    PatternName.NUMERIC_IDENTIFIER: PatternName.NUMERIC_IDENTIFIER_LOOSE,
    PatternName.PRERELEASE_IDENTIFIER: PatternName.PRERELEASE_IDENTIFIER_LOOSE,
    PatternName.MAIN_VERSION: PatternName.MAIN_VERSION_LOOSE,
    PatternName.PRERELEASE: PatternName.PRERELEASE_LOOSE,
    PatternName.FULL: PatternName.LOOSE,
    PatternName.COMPARATOR: PatternName.COMPARATOR_LOOSE,
    PatternName.XRANGE_IDENTIFIER: PatternName.XRANGE_IDENTIFIER_LOOSE,
    PatternName.XRANGE_PLAIN: PatternName.XRANGE_PLAIN_LOOSE,
    PatternName.XRANGE: PatternName.XRANGE_LOOSE,
    PatternName.TILDE: PatternName.TILDE_LOOSE,
    PatternName.CARET: PatternName.CARET_LOOSE,
    PatternName.HYPHEN_RANGE: PatternName.HYPHEN_RANGE_LOOSE,
}


def _build_sources() -> dict[PatternName, str]:
    """Compose every pattern source from its fragments."""
    src: dict[PatternName, str] = {}
    P = PatternName

    # A single ``0``, or a non-zero digit followed by zero or more digits.
    src[P.NUMERIC_IDENTIFIER] = r"0|[1-9]\d*"
    src[P.NUMERIC_IDENTIFIER_LOOSE] = r"[0-9]+"

    # Zero or more digits, then a letter or hyphen, then letters, digits
    # or hyphens.
    src[P.NON_NUMERIC_IDENTIFIER] = r"\d*[a-zA-Z-][a-zA-Z0-9-]*"

    # Groups: 1 major, 2 minor, 3 patch
    src[P.MAIN_VERSION] = (
        f"({src[P.NUMERIC_IDENTIFIER]})\\."
        f"({src[P.NUMERIC_IDENTIFIER]})\\."
        f"({src[P.NUMERIC_IDENTIFIER]})"
    )
    src[P.MAIN_VERSION_LOOSE] = (
        f"({src[P.NUMERIC_IDENTIFIER_LOOSE]})\\."
        f"({src[P.NUMERIC_IDENTIFIER_LOOSE]})\\."
        f"({src[P.NUMERIC_IDENTIFIER_LOOSE]})"
    )

    src[P.PRERELEASE_IDENTIFIER] = (
        f"(?:{src[P.NUMERIC_IDENTIFIER]}|{src[P.NON_NUMERIC_IDENTIFIER]})"
    )
    src[P.PRERELEASE_IDENTIFIER_LOOSE] = (
        f"(?:{src[P.NUMERIC_IDENTIFIER_LOOSE]}|{src[P.NON_NUMERIC_IDENTIFIER]})"
    )

    # Group: 1 dot-separated prerelease identifiers (hyphen excluded)
    src[P.PRERELEASE] = (
        f"(?:-({src[P.PRERELEASE_IDENTIFIER]}"
        f"(?:\\.{src[P.PRERELEASE_IDENTIFIER]})*))"
    )
    src[P.PRERELEASE_LOOSE] = (
        f"(?:-?({src[P.PRERELEASE_IDENTIFIER_LOOSE]}"
        f"(?:\\.{src[P.PRERELEASE_IDENTIFIER_LOOSE]})*))"
    )

    src[P.BUILD_IDENTIFIER] = r"[0-9A-Za-z-]+"

    # Group: 1 dot-separated build identifiers (plus sign excluded)
    src[P.BUILD] = (
        f"(?:\\+({src[P.BUILD_IDENTIFIER]}"
        f"(?:\\.{src[P.BUILD_IDENTIFIER]})*))"
    )

    full_plain = (
        f"v?{src[P.MAIN_VERSION]}{src[P.PRERELEASE]}?{src[P.BUILD]}?"
    )
    loose_plain = (
        f"[v=\\s]*{src[P.MAIN_VERSION_LOOSE]}"
        f"{src[P.PRERELEASE_LOOSE]}?{src[P.BUILD]}?"
    )

    # Groups: 1 major, 2 minor, 3 patch, 4 prerelease, 5 build
    src[P.FULL] = f"^{full_plain}$"
    src[P.LOOSE] = f"^{loose_plain}$"

    # Group: 1 the operator (possibly empty)
    src[P.GTLT] = r"((?:<|>)?=?)"

    src[P.COMPARATOR] = f"^{src[P.GTLT]}\\s*({full_plain})$|^$"
    src[P.COMPARATOR_LOOSE] = f"^{src[P.GTLT]}\\s*({loose_plain})$|^$"

    # "x.x" is a valid x-range identifier sequence meaning any version.
    # Only the major position is required.
    src[P.XRANGE_IDENTIFIER] = f"{src[P.NUMERIC_IDENTIFIER]}|x|X|\\*"
    src[P.XRANGE_IDENTIFIER_LOOSE] = f"{src[P.NUMERIC_IDENTIFIER_LOOSE]}|x|X|\\*"

    # Groups: 1 major, 2 minor, 3 patch, 4 prerelease, 5 build
    src[P.XRANGE_PLAIN] = (
        f"[v=\\s]*({src[P.XRANGE_IDENTIFIER]})"
        f"(?:\\.({src[P.XRANGE_IDENTIFIER]})"
        f"(?:\\.({src[P.XRANGE_IDENTIFIER]})"
        f"(?:{src[P.PRERELEASE]})?"
        f"{src[P.BUILD]}?"
        ")?)?"
    )
    src[P.XRANGE_PLAIN_LOOSE] = (
        f"[v=\\s]*({src[P.XRANGE_IDENTIFIER_LOOSE]})"
        f"(?:\\.({src[P.XRANGE_IDENTIFIER_LOOSE]})"
        f"(?:\\.({src[P.XRANGE_IDENTIFIER_LOOSE]})"
        f"(?:{src[P.PRERELEASE_LOOSE]})?"
        f"{src[P.BUILD]}?"
        ")?)?"
    )

    # Groups: 1 operator, 2 major, 3 minor, 4 patch, 5 prerelease, 6 build
    src[P.XRANGE] = f"^{src[P.GTLT]}\\s*{src[P.XRANGE_PLAIN]}$"
    src[P.XRANGE_LOOSE] = f"^{src[P.GTLT]}\\s*{src[P.XRANGE_PLAIN_LOOSE]}$"

    src[P.LONE_TILDE] = r"(?:~>?)"
    src[P.TILDE_TRIM] = f"(\\s*){src[P.LONE_TILDE]}\\s+"
    # Groups: 1 major, 2 minor, 3 patch, 4 prerelease, 5 build
    src[P.TILDE] = f"^{src[P.LONE_TILDE]}{src[P.XRANGE_PLAIN]}$"
    src[P.TILDE_LOOSE] = f"^{src[P.LONE_TILDE]}{src[P.XRANGE_PLAIN_LOOSE]}$"

    src[P.LONE_CARET] = r"(?:\^)"
    src[P.CARET_TRIM] = f"(\\s*){src[P.LONE_CARET]}\\s+"
    # Groups: 1 major, 2 minor, 3 patch, 4 prerelease, 5 build
    src[P.CARET] = f"^{src[P.LONE_CARET]}{src[P.XRANGE_PLAIN]}$"
    src[P.CARET_LOOSE] = f"^{src[P.LONE_CARET]}{src[P.XRANGE_PLAIN_LOOSE]}$"

    # Strips whitespace between an operator and its operand, so that
    # ``> 1.2.3`` becomes ``>1.2.3``.
    # Groups: 1 leading whitespace, 2 operator, 3 operand
    src[P.COMPARATOR_TRIM] = (
        f"(\\s*){src[P.GTLT]}\\s*({loose_plain}|{src[P.XRANGE_PLAIN]})"
    )

    # Groups: 1 "from" literal, 2-6 its major/minor/patch/prerelease/build,
    #         7 "to" literal, 8-12 its major/minor/patch/prerelease/build
    src[P.HYPHEN_RANGE] = (
        f"^\\s*({src[P.XRANGE_PLAIN]})"
        "\\s+-\\s+"
        f"({src[P.XRANGE_PLAIN]})"
        "\\s*$"
    )
    src[P.HYPHEN_RANGE_LOOSE] = (
        f"^\\s*({src[P.XRANGE_PLAIN_LOOSE]})"
        "\\s+-\\s+"
        f"({src[P.XRANGE_PLAIN_LOOSE]})"
        "\\s*$"
    )

    src[P.STAR] = r"^(<|>)?=?\s*\*$"
    src[P.OR_SEPARATOR] = r"\s*\|\|\s*"
    src[P.WHITESPACE] = r"\s+"

    return src


PATTERN_SOURCES: Final[dict[PatternName, str]] = _build_sources()
