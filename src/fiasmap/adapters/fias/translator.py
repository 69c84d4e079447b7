"""Translate validated extract rows into domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fiasmap.domain.model import HierarchyRecord, ObjectRecord

if TYPE_CHECKING:
    from .schema import AddressObjectRow, HierarchyItemRow


def to_object_record(row: AddressObjectRow) -> ObjectRecord:
    return ObjectRecord(
        object_id=row.object_id,
        name=row.name,
        level=row.level,
        type_code=row.type_name,
        is_actual=row.is_actual,
        is_active=row.is_active,
    )


def to_hierarchy_record(row: HierarchyItemRow) -> HierarchyRecord:
    return HierarchyRecord(object_id=row.object_id, path=row.path)
