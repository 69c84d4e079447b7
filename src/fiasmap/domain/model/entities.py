"""Resolved entities produced by a resolution run."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import DistrictKind
from .primitives import ObjectId


@dataclass(frozen=True, slots=True, kw_only=True)
class District:
    id: ObjectId
    name: str
    kind: DistrictKind


@dataclass(frozen=True, slots=True, kw_only=True)
class RegistryCorrection:
    """A hand-curated district the source registry is known to be missing.

    Corrections are appended after the catalog scan so they never shadow a
    district that the catalog does provide.
    """

    id: ObjectId
    name: str
    kind: DistrictKind = DistrictKind.CITY

    def to_district(self) -> District:
        return District(id=self.id, name=self.name, kind=self.kind)


@dataclass(frozen=True, slots=True, kw_only=True)
class Settlement:
    id: ObjectId
    name: str
    district: District

    @property
    def district_name(self) -> str:
        return self.district.name

    @property
    def district_kind(self) -> DistrictKind:
        return self.district.kind

    def __str__(self) -> str:
        return f"{self.id} {self.name} ({self.district_name}, {self.district_kind})"
