"""Classification rules shared by the resolution stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from fiasmap.domain.model import (
    CITY_LEVEL,
    GARDEN_LEVEL,
    LOCALITY_LEVEL,
    REGION_LEVEL,
    District,
    DistrictKind,
)

if TYPE_CHECKING:
    from fiasmap.domain.model import ObjectRecord

CITY_TYPE_CODE: Final[str] = "г"
GARDEN_TYPE_CODE: Final[str] = "снт"
DISTRICT_CHAIN_POSITION: Final[int] = 1


@dataclass(frozen=True, slots=True, kw_only=True)
class RegistryRules:
    """Level codes and type markers that drive classification.

    ``district_position`` is the chain index holding the owning first-level
    unit; index 0 is always the national root.
    """

    region_level: int = REGION_LEVEL
    city_level: int = CITY_LEVEL
    locality_level: int = LOCALITY_LEVEL
    garden_level: int = GARDEN_LEVEL
    city_type_code: str = CITY_TYPE_CODE
    garden_type_code: str = GARDEN_TYPE_CODE
    district_position: int = DISTRICT_CHAIN_POSITION

    def __post_init__(self) -> None:
        if self.district_position < 1:
            raise ValueError("district_position must point past the national root")


DEFAULT_RULES: Final[RegistryRules] = RegistryRules()


def classify_district(
    record: ObjectRecord, rules: RegistryRules = DEFAULT_RULES
) -> District | None:
    """Return the district described by ``record`` or ``None``.

    Activity flags are ignored on purpose: superseded boundaries still own
    settlements through the hierarchy paths.
    """

    if record.level == rules.region_level:
        return District(id=record.object_id, name=record.name, kind=DistrictKind.DISTRICT)
    if record.level == rules.city_level and record.type_code == rules.city_type_code:
        return District(id=record.object_id, name=record.name, kind=DistrictKind.CITY)
    return None


def is_settlement_candidate(record: ObjectRecord, rules: RegistryRules = DEFAULT_RULES) -> bool:
    if not record.is_current:
        return False
    if record.level in (rules.city_level, rules.locality_level):
        return True
    return record.level == rules.garden_level and record.type_code == rules.garden_type_code


def settlement_name(record: ObjectRecord) -> str:
    return f"{record.type_code} {record.name}"
