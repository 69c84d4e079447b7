"""Entry points for running a settlement resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from .assembly import SettlementAssemblyPhase
from .candidates import CandidateFilterPhase
from .catalog import CatalogScanPhase
from .chains import ChainResolutionPhase
from .context import ResolutionContext
from .districts import DistrictExtractionPhase
from .orchestrator import ResolutionPipeline
from .rules import DEFAULT_RULES, RegistryRules

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fiasmap.domain.model import District, RegistryCorrection, Settlement
    from fiasmap.domain.ports import CatalogSource, HierarchySource

    from .assembly import UnresolvedSettlement

log = getLogger(__name__)


class ScanMode(StrEnum):
    """How often the catalog is read; both modes yield the same result."""

    FUSED = "fused"
    SEQUENTIAL = "sequential"


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolutionResult:
    settlements: tuple[Settlement, ...]
    districts: tuple[District, ...]
    unresolved: tuple[UnresolvedSettlement, ...]
    candidate_count: int
    chain_count: int

    @property
    def unresolved_count(self) -> int:
        return len(self.unresolved)


def build_pipeline(scan_mode: ScanMode = ScanMode.FUSED) -> ResolutionPipeline:
    if scan_mode is ScanMode.SEQUENTIAL:
        return ResolutionPipeline(
            phases=(
                DistrictExtractionPhase(),
                CandidateFilterPhase(),
                ChainResolutionPhase(),
                SettlementAssemblyPhase(),
            )
        )
    return ResolutionPipeline(
        phases=(CatalogScanPhase(), ChainResolutionPhase(), SettlementAssemblyPhase())
    )


def resolve_settlements(
    catalog: CatalogSource,
    hierarchy: HierarchySource,
    *,
    rules: RegistryRules = DEFAULT_RULES,
    corrections: Sequence[RegistryCorrection] = (),
    scan_mode: ScanMode = ScanMode.FUSED,
) -> ResolutionResult:
    """Resolve every current settlement to its owning district.

    Read failures propagate unchanged; a run never returns partial results.
    """

    context = ResolutionContext(
        catalog=catalog,
        hierarchy=hierarchy,
        rules=rules,
        corrections=corrections,
    )
    build_pipeline(scan_mode).run(context)

    if context.districts is None or context.candidates is None or context.chains is None:
        raise RuntimeError("Resolution pipeline finished without running every phase")

    result = ResolutionResult(
        settlements=tuple(context.settlements),
        districts=context.districts.districts,
        unresolved=tuple(context.unresolved),
        candidate_count=len(context.candidates),
        chain_count=len(context.chains),
    )
    if result.unresolved:
        log.warning("%s settlement candidates could not be resolved", result.unresolved_count)
    return result
