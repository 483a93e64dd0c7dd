"""Range normalizer module.

Exports the ``Normalizer`` class and the ``normalize`` convenience
function.
"""
from __future__ import annotations

from semrange.normalizer.normalizer import Normalizer, increment, is_wildcard, normalize

__all__ = ["Normalizer", "normalize", "is_wildcard", "increment"]
