"""semrange: version-range parsing and matching for semantic versions.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import semrange

    # Parse a range into an expression tree
    r = semrange.parse_range(">1.0.0 <2.0.0 || >=3.0.0")

    # Evaluate it against versions
    r.matches("1.1.1")      # True
    r.matches("2.0.0")      # False

    # See the canonical comparators a shorthand expands to
    semrange.normalize("~1.2")      # ['>=1.2.0', '<1.3.0']

    # Compose ranges without re-parsing
    both = semrange.parse_range("^1.2") & semrange.parse_range("<1.5.0")

    semrange.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from semrange.config import DEFAULT_CONFIG, RangeConfig
from semrange.errors import (
    ArithmeticOverflowError,
    ComparatorSyntaxError,
    RangeParseError,
    RangeSyntaxError,
    VersionSyntaxError,
)

__version__: str = "0.1.0"

if TYPE_CHECKING:
    import semver

    from semrange.ast.nodes import Or, Range
    from semrange.version import VersionLike


def parse_range(
    raw: str, config: RangeConfig | None = None, *, loose: bool | None = None
) -> "Or":
    """Parse a range string into an expression tree.

    Parameters
    ----------
    raw:
        The range, for example ``"^1.2.3 || 2.x"``.
    config:
        Parsing configuration.
    loose:
        Shortcut overriding ``config.loose``.

    Returns
    -------
    Or
        One ``And`` group per ``||``-separated segment.

    Raises
    ------
    RangeParseError
        If the range is malformed.
    """
    from semrange.parser.parser import parse_range as _parse_range

    return _parse_range(raw, config, loose=loose)


def must_parse_range(
    raw: str, config: RangeConfig | None = None, *, loose: bool | None = None
) -> "Or":
    """Parse a range string, exiting the process if it is malformed."""
    from semrange.parser.parser import must_parse_range as _must_parse_range

    return _must_parse_range(raw, config, loose=loose)


def normalize(segment: str, config: RangeConfig | None = None) -> list[str]:
    """Expand one ``||``-free range segment into canonical comparator tokens.

    Parameters
    ----------
    segment:
        A range segment such as ``"1.2 - 3.4"`` or ``"^0.2.3"``.

    Returns
    -------
    list[str]
        The comparator tokens, for example ``[">=1.2.0", "<3.5.0"]``.
    """
    from semrange.normalizer import normalize as _normalize

    return _normalize(segment, config)


def satisfies(
    version: "VersionLike", range_: "Range | str", config: RangeConfig | None = None
) -> bool:
    """Return True if ``version`` satisfies ``range_``."""
    from semrange.evaluator import satisfies as _satisfies

    return _satisfies(version, range_, config)


def max_satisfying(
    versions: Iterable["VersionLike"],
    range_: "Range | str",
    config: RangeConfig | None = None,
) -> "semver.Version | None":
    """Return the highest version satisfying ``range_``, or ``None``."""
    from semrange.evaluator import max_satisfying as _max_satisfying

    return _max_satisfying(versions, range_, config)


def min_satisfying(
    versions: Iterable["VersionLike"],
    range_: "Range | str",
    config: RangeConfig | None = None,
) -> "semver.Version | None":
    """Return the lowest version satisfying ``range_``, or ``None``."""
    from semrange.evaluator import min_satisfying as _min_satisfying

    return _min_satisfying(versions, range_, config)


__all__ = [
    "__version__",
    "parse_range",
    "must_parse_range",
    "normalize",
    "satisfies",
    "max_satisfying",
    "min_satisfying",
    "RangeConfig",
    "DEFAULT_CONFIG",
    "RangeParseError",
    "ComparatorSyntaxError",
    "VersionSyntaxError",
    "RangeSyntaxError",
    "ArithmeticOverflowError",
]
