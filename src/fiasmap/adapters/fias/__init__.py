"""FIAS XML extract adapter."""

from __future__ import annotations

from .reader import XmlCatalogReader, XmlHierarchyReader, ensure_readable, iter_element_attributes

__all__ = [
    "XmlCatalogReader",
    "XmlHierarchyReader",
    "ensure_readable",
    "iter_element_attributes",
]
