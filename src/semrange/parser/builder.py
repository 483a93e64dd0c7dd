"""Predicate builder: turns canonical comparator tokens into range nodes.

Each token produced by the normalizer is split at its first digit into
an operator substring and a version substring.  The operator is looked
up in ``OPERATORS`` and the version is parsed with
``semrange.version.parse_version``; the pair becomes a ``Comparator``.
The comparators of one OR-group are collected, in token order, into an
``And`` node.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final

import semver

from semrange.ast.nodes import And, Comparator, Operator
from semrange.config import DEFAULT_CONFIG, RangeConfig
from semrange.errors import ComparatorSyntaxError, RangeSyntaxError, VersionSyntaxError
from semrange.version import parse_version

_FIRST_DIGIT: Final[re.Pattern[str]] = re.compile(r"\d", re.ASCII)

# A lone wildcard token stands for any version.
_WILDCARD_TOKENS: Final[frozenset[str]] = frozenset({"x", "X", "*"})

OPERATORS: Final[dict[str, Operator]] = {
    "": Operator.EQ,
    "=": Operator.EQ,
    "==": Operator.EQ,
    "!": Operator.NEQ,
    "!=": Operator.NEQ,
    ">": Operator.GT,
    ">=": Operator.GTE,
    "<": Operator.LT,
    "<=": Operator.LTE,
}


def split_comparator(token: str, range_text: str = "") -> tuple[str, str]:
    """Split a comparator token into ``(operator, version)`` substrings.

    The version starts at the first digit; everything before it is the
    operator.  ``">=1.2.3"`` gives ``(">=", "1.2.3")``.

    Raises
    ------
    RangeSyntaxError
        If the token contains no digit, so no version can follow.
    """
    token = token.strip()
    match = _FIRST_DIGIT.search(token)
    if match is None:
        raise RangeSyntaxError(f"Could not get version from {token!r}", range_text)
    index = match.start()
    return token[:index].strip(), token[index:]


def parse_operator(operator: str, token: str = "", range_text: str = "") -> Operator:
    """Map an operator substring to its ``Operator``.

    A trailing ``v`` (as in ``>=v1.2.3``) belongs to the version and is
    ignored.

    Raises
    ------
    ComparatorSyntaxError
        If the substring is not a known operator.
    """
    key = operator[:-1] if operator.endswith("v") else operator
    try:
        return OPERATORS[key]
    except KeyError:
        raise ComparatorSyntaxError(operator, token or operator, range_text) from None


def build_comparator(
    token: str, range_text: str = "", config: RangeConfig | None = None
) -> Comparator:
    """Build one ``Comparator`` from a canonical token.

    Raises
    ------
    RangeSyntaxError
        If the token has no version part.
    ComparatorSyntaxError
        If the operator is unknown.
    VersionSyntaxError
        If the version substring does not parse; the error carries the
        substring and ``range_text``.
    """
    config = config or DEFAULT_CONFIG
    if token in _WILDCARD_TOKENS:
        return Comparator(Operator.GTE, semver.Version(0, 0, 0))

    operator_text, version_text = split_comparator(token, range_text)
    operator = parse_operator(operator_text, token, range_text)
    try:
        version = parse_version(version_text, loose=config.loose)
    except VersionSyntaxError as exc:
        raise VersionSyntaxError(version_text, range_text, exc.reason) from exc
    return Comparator(operator, version)


def build(
    tokens: Sequence[str], range_text: str = "", config: RangeConfig | None = None
) -> And:
    """Build the AND-group for one normalized OR-group.

    Parameters
    ----------
    tokens:
        Canonical comparator tokens from the normalizer.
    range_text:
        The full range being parsed, attached to errors for diagnostics.
        Defaults to the tokens joined by spaces.
    config:
        Parsing configuration; ``loose`` selects loose version parsing.

    Returns
    -------
    And
        The comparators in token order.  Empty (and so matching every
        version) when ``tokens`` is empty.
    """
    range_text = range_text or " ".join(tokens)
    return And(tuple(build_comparator(token, range_text, config) for token in tokens))
