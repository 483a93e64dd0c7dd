"""semrange CLI package."""
from __future__ import annotations

from semrange.cli.main import cli

__all__ = ["cli"]
