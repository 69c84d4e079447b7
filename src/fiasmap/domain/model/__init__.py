"""Domain model for the settlement registry."""

from __future__ import annotations

from .entities import District, RegistryCorrection, Settlement
from .enums import DistrictKind, UnresolvedReason
from .primitives import (
    CITY_LEVEL,
    GARDEN_LEVEL,
    LOCALITY_LEVEL,
    REGION_LEVEL,
    Chain,
    ObjectId,
)
from .records import HierarchyRecord, ObjectRecord

__all__ = [
    "CITY_LEVEL",
    "GARDEN_LEVEL",
    "LOCALITY_LEVEL",
    "REGION_LEVEL",
    "Chain",
    "District",
    "DistrictKind",
    "HierarchyRecord",
    "ObjectId",
    "ObjectRecord",
    "RegistryCorrection",
    "Settlement",
    "UnresolvedReason",
]
