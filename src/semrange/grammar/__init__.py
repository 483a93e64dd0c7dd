"""Range grammar module.

Exports pattern names, pattern sources and the compiled ``Grammar``.
"""
from __future__ import annotations

from semrange.grammar.grammar import RANGE_GRAMMAR, Grammar, default_grammar
from semrange.grammar.patterns import LOOSE_VARIANTS, PATTERN_SOURCES, PatternName

__all__ = [
    "PatternName",
    "PATTERN_SOURCES",
    "LOOSE_VARIANTS",
    "Grammar",
    "default_grammar",
    "RANGE_GRAMMAR",
]
