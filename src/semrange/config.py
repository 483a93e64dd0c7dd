"""Parsing configuration shared by the normalizer, builder and parser."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# Largest version component a wildcard expansion may produce (unsigned 64-bit).
MAX_COMPONENT: Final[int] = 2**64 - 1


@dataclass(frozen=True)
class RangeConfig:
    """Configuration for range parsing.

    Parameters
    ----------
    loose:
        Accept the loose version syntax: leading zeros, a ``v`` or ``=``
        prefix, and a prerelease without its hyphen (``1.2.3beta``).
    max_component:
        Largest value an increment during wildcard expansion may produce.
        Larger results raise ``ArithmeticOverflowError``.
    """

    loose: bool = False
    max_component: int = MAX_COMPONENT


DEFAULT_CONFIG: Final[RangeConfig] = RangeConfig()
