#!/usr/bin/env python3
"""Example: Quickstart for semrange

Minimal working example: parse a range, check versions against it,
inspect its canonical comparators and pick the best candidate.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install semrange
"""
from __future__ import annotations

import semrange

RANGE = "^1.2.3 || ~2.4 || 3.x"
CANDIDATES = ["1.1.0", "1.2.3", "1.9.4", "2.4.9", "2.5.0", "3.7.1", "4.0.0"]


def main() -> None:
    print(f"semrange version: {semrange.__version__}")

    # Step 1: Parse the range into an expression tree
    expr = semrange.parse_range(RANGE)
    print(f"Parsed {RANGE!r} as: {expr}")

    # Step 2: See what each shorthand expands to
    for segment in RANGE.split("||"):
        print(f"  {segment.strip():<8} -> {' '.join(semrange.normalize(segment))}")

    # Step 3: Check candidates
    for version in CANDIDATES:
        verdict = "match" if expr.matches(version) else "no match"
        print(f"  {version:<8} {verdict}")

    # Step 4: Pick the best candidates
    print(f"Highest match: {semrange.max_satisfying(CANDIDATES, expr)}")
    print(f"Lowest match:  {semrange.min_satisfying(CANDIDATES, expr)}")

    # Step 5: Malformed ranges raise a RangeParseError subclass
    try:
        semrange.parse_range(">=1.2.x.y")
    except semrange.RangeParseError as exc:
        print(f"Rejected: {exc}")


if __name__ == "__main__":
    main()
