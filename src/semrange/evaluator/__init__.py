"""Range evaluator module.

Exports ``evaluate`` and the ``satisfies`` / ``max_satisfying`` /
``min_satisfying`` helpers.
"""
from __future__ import annotations

from semrange.evaluator.evaluator import (
    evaluate,
    max_satisfying,
    min_satisfying,
    satisfies,
)

__all__ = ["evaluate", "satisfies", "max_satisfying", "min_satisfying"]
