"""Single-pass catalog scan feeding districts, candidates and assembly."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .candidates import CandidateFilter
from .districts import DistrictExtractor
from .orchestrator import ResolutionPhase

if TYPE_CHECKING:
    from fiasmap.domain.model import ObjectRecord

    from .context import ResolutionContext

log = getLogger(__name__)


class CatalogScanPhase(ResolutionPhase):
    """Read the catalog once instead of three times.

    Every record goes through the district extractor and the candidate
    filter; records accepted as candidates are buffered so the assembly
    phase does not need to re-read the catalog.
    """

    name: str = "catalog_scan"

    def run(self, context: ResolutionContext) -> None:
        extractor = DistrictExtractor(rules=context.rules, corrections=context.corrections)
        candidate_filter = CandidateFilter(rules=context.rules)
        buffered: list[ObjectRecord] = []
        scanned = 0

        for record in context.catalog():
            scanned += 1
            extractor.observe(record)
            if candidate_filter.observe(record):
                buffered.append(record)

        log.info("Scanned %s catalog records", scanned)
        context.districts = extractor.finish()
        context.candidates = candidate_filter.finish()
        context.settlement_records = buffered
