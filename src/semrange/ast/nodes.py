"""Expression tree for parsed version ranges.

A parsed range is a small boolean expression over comparators::

    Range ::= Comparator | And(Range, ...) | Or(Range, ...)

``parse_range`` always produces an ``Or`` whose operands are ``And``
groups of ``Comparator`` leaves.  The ``and_``/``or_`` combinators (and
the ``&``/``|`` operators) compose already-built ranges without
re-parsing and may produce deeper trees.

Every node is a frozen dataclass, so trees are immutable, hashable and
compare structurally.  Evaluation lives in ``semrange.evaluator``;
``matches`` on a node is a shortcut to it.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

import semver

if TYPE_CHECKING:
    from semrange.version import VersionLike


class Operator(Enum):
    """Comparator kinds, valued by their canonical symbol."""

    EQ = "="
    NEQ = "!="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="

    @property
    def symbol(self) -> str:
        return self.value

    def test(self, cmp: int) -> bool:
        """Apply this operator to a three-way compare result.

        Parameters
        ----------
        cmp:
            ``compare_versions(candidate, operand)``: -1, 0 or 1.
        """
        if self is Operator.EQ:
            return cmp == 0
        if self is Operator.NEQ:
            return cmp != 0
        if self is Operator.GT:
            return cmp == 1
        if self is Operator.GTE:
            return cmp >= 0
        if self is Operator.LT:
            return cmp == -1
        return cmp <= 0


class _Combinable:
    """Boolean combinators shared by every range node."""

    __slots__ = ()

    def matches(self, version: VersionLike, loose: bool = False) -> bool:
        """Return True if ``version`` satisfies this range.

        ``version`` may be a ``semver.Version`` or a version string.
        """
        from semrange.evaluator.evaluator import evaluate

        return evaluate(self, version, loose=loose)  # type: ignore[arg-type]

    def and_(self, other: Range) -> And:
        """Return a range satisfied only when both ranges are."""
        return And(_flatten(And, (self, other)))  # type: ignore[arg-type]

    def or_(self, other: Range) -> Or:
        """Return a range satisfied when either range is."""
        return Or(_flatten(Or, (self, other)))  # type: ignore[arg-type]

    def __and__(self, other: Range) -> And:
        return self.and_(other)

    def __or__(self, other: Range) -> Or:
        return self.or_(other)


@dataclass(frozen=True, slots=True)
class Comparator(_Combinable):
    """A single ``<operator><version>`` constraint."""

    operator: Operator
    version: semver.Version

    def __str__(self) -> str:
        if self.operator is Operator.EQ:
            return str(self.version)
        return f"{self.operator.symbol}{self.version}"


@dataclass(frozen=True, slots=True)
class And(_Combinable):
    """Conjunction of sub-ranges.  With no operands it matches everything."""

    operands: tuple[Range, ...] = ()

    def __str__(self) -> str:
        if not self.operands:
            return "*"
        return " ".join(
            f"({operand})" if isinstance(operand, Or) else str(operand)
            for operand in self.operands
        )


@dataclass(frozen=True, slots=True)
class Or(_Combinable):
    """Disjunction of sub-ranges.  With no operands it matches nothing."""

    operands: tuple[Range, ...] = ()

    def __str__(self) -> str:
        if not self.operands:
            return "<0.0.0"
        return " || ".join(str(operand) for operand in self.operands)


Range = Union[Comparator, And, Or]


def _flatten(kind: type[And] | type[Or], nodes: tuple[Range, ...]) -> tuple[Range, ...]:
    """Splice operands of same-kind nodes into one flat tuple."""
    operands: list[Range] = []
    for node in nodes:
        if isinstance(node, kind):
            operands.extend(node.operands)
        else:
            operands.append(node)
    return tuple(operands)
