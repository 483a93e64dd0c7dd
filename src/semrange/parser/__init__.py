"""Range parser module.

Exports the ``RangeParser`` class, the ``parse_range`` and
``must_parse_range`` entry points, the predicate builder and the parse
error types.
"""
from __future__ import annotations

from semrange.errors import (
    ArithmeticOverflowError,
    ComparatorSyntaxError,
    RangeParseError,
    RangeSyntaxError,
    VersionSyntaxError,
)
from semrange.parser.builder import (
    OPERATORS,
    build,
    build_comparator,
    parse_operator,
    split_comparator,
)
from semrange.parser.parser import RangeParser, must_parse_range, parse_range

__all__ = [
    "RangeParser",
    "parse_range",
    "must_parse_range",
    "build",
    "build_comparator",
    "split_comparator",
    "parse_operator",
    "OPERATORS",
    "RangeParseError",
    "ComparatorSyntaxError",
    "VersionSyntaxError",
    "RangeSyntaxError",
    "ArithmeticOverflowError",
]
