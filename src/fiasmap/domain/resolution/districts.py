"""District extraction from the address object catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from fiasmap.domain.model import District, ObjectId

from .orchestrator import ResolutionPhase
from .rules import DEFAULT_RULES, RegistryRules, classify_district

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from fiasmap.domain.model import ObjectRecord, RegistryCorrection

    from .context import ResolutionContext

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DistrictIndex:
    """Every extracted district in scan order plus a first-match id lookup."""

    districts: tuple[District, ...] = ()
    by_id: Mapping[ObjectId, District] = field(default_factory=dict[ObjectId, District])

    @classmethod
    def build(cls, districts: Iterable[District]) -> DistrictIndex:
        ordered = tuple(districts)
        by_id: dict[ObjectId, District] = {}
        collisions: set[ObjectId] = set()
        for district in ordered:
            if district.id not in by_id:
                by_id[district.id] = district
            elif district.id not in collisions:
                collisions.add(district.id)
                log.warning(
                    "Duplicate district id %s (%r); keeping first match %r",
                    district.id,
                    district.name,
                    by_id[district.id].name,
                )
        return cls(districts=ordered, by_id=by_id)

    def get(self, district_id: ObjectId) -> District | None:
        return self.by_id.get(district_id)

    def __len__(self) -> int:
        return len(self.districts)

    def __contains__(self, district_id: object) -> bool:
        return district_id in self.by_id


@dataclass(slots=True)
class DistrictExtractor:
    """Accumulates districts one catalog record at a time."""

    rules: RegistryRules = DEFAULT_RULES
    corrections: Sequence[RegistryCorrection] = ()
    _found: list[District] = field(default_factory=list[District], init=False)

    def observe(self, record: ObjectRecord) -> None:
        district = classify_district(record, self.rules)
        if district is not None:
            self._found.append(district)

    def finish(self) -> DistrictIndex:
        patched = [correction.to_district() for correction in self.corrections]
        log.info(
            "Extracted %s districts from catalog, %s from registry corrections",
            len(self._found),
            len(patched),
        )
        return DistrictIndex.build([*self._found, *patched])


def extract_districts(
    records: Iterable[ObjectRecord],
    *,
    rules: RegistryRules = DEFAULT_RULES,
    corrections: Sequence[RegistryCorrection] = (),
) -> DistrictIndex:
    """Scan ``records`` once and return the district lookup."""

    extractor = DistrictExtractor(rules=rules, corrections=corrections)
    for record in records:
        extractor.observe(record)
    return extractor.finish()


class DistrictExtractionPhase(ResolutionPhase):
    """Dedicated catalog pass building the district lookup."""

    name: str = "district_extraction"

    def run(self, context: ResolutionContext) -> None:
        context.districts = extract_districts(
            context.catalog(),
            rules=context.rules,
            corrections=context.corrections,
        )
