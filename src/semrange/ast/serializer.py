"""Range tree serialization and deserialization.

Converts a parsed range to a plain dict/list structure and back, and
to and from JSON and YAML.  Union members are tagged with a ``"kind"``
discriminator so that deserialization is unambiguous.

Usage
-----
::

    from semrange.ast.serializer import RangeSerializer

    serializer = RangeSerializer()
    data = serializer.to_dict(parse_range("^1.2.3 || 2.x"))
    yaml_text = serializer.to_yaml(parse_range("^1.2.3"))
    tree = serializer.from_yaml(yaml_text)
"""
from __future__ import annotations

import json

import yaml

from semrange.ast.nodes import And, Comparator, Operator, Or, Range
from semrange.version import parse_version


class RangeSerializer:
    """Converts between range trees and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (tree → dict)
    # ------------------------------------------------------------------

    def to_dict(self, expr: Range) -> dict[str, object]:
        """Serialize a range tree to a JSON-compatible dict."""
        if isinstance(expr, Comparator):
            return {
                "kind": "Comparator",
                "operator": expr.operator.symbol,
                "version": str(expr.version),
            }
        if isinstance(expr, (And, Or)):
            return {
                "kind": type(expr).__name__,
                "operands": [self.to_dict(operand) for operand in expr.operands],
            }
        raise TypeError(f"Cannot serialize {expr!r}")

    # ------------------------------------------------------------------
    # Deserialization (dict → tree)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Range:
        """Rebuild a range tree from the output of ``to_dict``.

        Versions are read with the loose syntax, so trees parsed in loose
        mode (``>=1.2.3-01``) load back unchanged.

        Raises
        ------
        ValueError
            On an unknown ``kind`` or operator.
        """
        kind = data.get("kind")
        if kind == "Comparator":
            return Comparator(
                operator=Operator(str(data["operator"])),
                version=parse_version(str(data["version"]), loose=True),
            )
        if kind in ("And", "Or"):
            raw_operands = data.get("operands") or []
            operands = tuple(self.from_dict(item) for item in raw_operands)  # type: ignore[union-attr]
            return And(operands) if kind == "And" else Or(operands)
        raise ValueError(f"Unknown range node kind: {kind!r}")

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, expr: Range, indent: int = 2) -> str:
        """Serialize a range tree to a JSON string."""
        return json.dumps(self.to_dict(expr), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Range:
        """Deserialize a range tree from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, expr: Range) -> str:
        """Serialize a range tree to a YAML string."""
        return yaml.dump(self.to_dict(expr), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> Range:
        """Deserialize a range tree from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
