#!/usr/bin/env python3
"""Example: Composing ranges and exporting the tree

Combines two parsed ranges without re-parsing, then dumps the result
to JSON and YAML and reads it back.

Usage:
    python examples/02_compose_and_export.py
"""
from __future__ import annotations

import semrange
from semrange.ast import RangeSerializer


def main() -> None:
    supported = semrange.parse_range(">=1.4.0 <3.0.0")
    not_broken = semrange.parse_range("<2.1.0 || >=2.2.0")

    # & builds an And node, | an Or node
    allowed = supported & not_broken
    print(f"Combined range: {allowed}")
    for version in ("1.3.9", "1.4.0", "2.1.5", "2.2.0", "3.0.0"):
        print(f"  {version:<6} {'allowed' if allowed.matches(version) else 'rejected'}")

    serializer = RangeSerializer()
    print("\nJSON:")
    print(serializer.to_json(allowed))

    yaml_text = serializer.to_yaml(allowed)
    print("YAML:")
    print(yaml_text)

    restored = serializer.from_yaml(yaml_text)
    print(f"Round trip equal: {restored == allowed}")


if __name__ == "__main__":
    main()
