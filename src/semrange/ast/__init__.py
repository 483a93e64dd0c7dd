"""Range expression tree module.

Exports the node types and the ``RangeSerializer``.
"""
from __future__ import annotations

from semrange.ast.nodes import And, Comparator, Operator, Or, Range
from semrange.ast.serializer import RangeSerializer

__all__ = [
    "Operator",
    "Comparator",
    "And",
    "Or",
    "Range",
    "RangeSerializer",
]
