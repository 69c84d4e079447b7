"""Domain port definitions for adapters."""

from __future__ import annotations

from .reading import CatalogSource, HierarchySource

__all__ = ["CatalogSource", "HierarchySource"]
