"""Transient records read from the registry extracts."""

from __future__ import annotations

from dataclasses import dataclass

from .primitives import ObjectId


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectRecord:
    """One ``OBJECT`` row of the address object catalog."""

    object_id: ObjectId
    name: str
    level: int
    type_code: str
    is_actual: bool
    is_active: bool

    @property
    def is_current(self) -> bool:
        return self.is_actual and self.is_active


@dataclass(frozen=True, slots=True, kw_only=True)
class HierarchyRecord:
    """One ``ITEM`` row of the administrative hierarchy extract."""

    object_id: ObjectId
    path: str
