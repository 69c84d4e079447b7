"""Ports for reading registry extracts.

Sources are callables returning a fresh iterator on every call, so a
resolution run may scan the same extract more than once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fiasmap.domain.model import HierarchyRecord, ObjectRecord


@runtime_checkable
class CatalogSource(Protocol):
    """Callable port yielding address object catalog records in file order."""

    def __call__(self) -> Iterator[ObjectRecord]: ...


@runtime_checkable
class HierarchySource(Protocol):
    """Callable port yielding administrative hierarchy records in file order."""

    def __call__(self) -> Iterator[HierarchyRecord]: ...


__all__ = ["CatalogSource", "HierarchySource"]
