"""Version module.

Exports the parse and compare operations over ``semver.Version``.
"""
from __future__ import annotations

from semrange.version.version import (
    VersionLike,
    coerce_version,
    compare_versions,
    parse_version,
)

__all__ = ["parse_version", "compare_versions", "coerce_version", "VersionLike"]
