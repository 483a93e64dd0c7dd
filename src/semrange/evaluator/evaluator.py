"""Range evaluator: decides whether versions satisfy a range.

``evaluate`` walks the expression tree produced by ``parse_range``:
an ``Or`` holds if any operand holds, an ``And`` if every operand holds
(so an empty ``And`` is vacuously true), and a ``Comparator`` applies
its operator to the three-way compare of the candidate against its
operand.

The remaining helpers accept either a parsed range or range text and
are what the CLI builds on.
"""
from __future__ import annotations

from collections.abc import Iterable

import semver

from semrange.ast.nodes import And, Comparator, Or, Range
from semrange.config import RangeConfig
from semrange.version import VersionLike, coerce_version, compare_versions


def evaluate(expr: Range, version: VersionLike, loose: bool = False) -> bool:
    """Return True if ``version`` satisfies ``expr``.

    Parameters
    ----------
    expr:
        A range expression tree.
    version:
        The candidate, as a ``semver.Version`` or a version string.
    loose:
        Parse a string candidate with the loose syntax.

    Raises
    ------
    VersionSyntaxError
        If ``version`` is a string that is not a valid version.
    TypeError
        If ``expr`` is not a range node.
    """
    return _evaluate(expr, coerce_version(version, loose=loose))


def _evaluate(expr: Range, version: semver.Version) -> bool:
    if isinstance(expr, Comparator):
        return expr.operator.test(compare_versions(version, expr.version))
    if isinstance(expr, And):
        return all(_evaluate(operand, version) for operand in expr.operands)
    if isinstance(expr, Or):
        return any(_evaluate(operand, version) for operand in expr.operands)
    raise TypeError(f"Not a range expression: {expr!r}")


def _as_range(value: Range | str, config: RangeConfig | None) -> Range:
    if isinstance(value, str):
        from semrange.parser.parser import parse_range

        return parse_range(value, config=config)
    return value


def satisfies(
    version: VersionLike, range_: Range | str, config: RangeConfig | None = None
) -> bool:
    """Return True if ``version`` satisfies ``range_``.

    ``range_`` may be range text, which is parsed with ``config``.
    """
    loose = bool(config and config.loose)
    return evaluate(_as_range(range_, config), version, loose=loose)


def _matching(
    versions: Iterable[VersionLike], range_: Range | str, config: RangeConfig | None
) -> list[semver.Version]:
    expr = _as_range(range_, config)
    loose = bool(config and config.loose)
    candidates = (coerce_version(v, loose=loose) for v in versions)
    return [v for v in candidates if _evaluate(expr, v)]


def max_satisfying(
    versions: Iterable[VersionLike],
    range_: Range | str,
    config: RangeConfig | None = None,
) -> semver.Version | None:
    """Return the highest version in ``versions`` that satisfies ``range_``.

    Returns ``None`` when no candidate matches.
    """
    best: semver.Version | None = None
    for candidate in _matching(versions, range_, config):
        if best is None or compare_versions(candidate, best) > 0:
            best = candidate
    return best


def min_satisfying(
    versions: Iterable[VersionLike],
    range_: Range | str,
    config: RangeConfig | None = None,
) -> semver.Version | None:
    """Return the lowest version in ``versions`` that satisfies ``range_``.

    Returns ``None`` when no candidate matches.
    """
    best: semver.Version | None = None
    for candidate in _matching(versions, range_, config):
        if best is None or compare_versions(candidate, best) < 0:
            best = candidate
    return best
