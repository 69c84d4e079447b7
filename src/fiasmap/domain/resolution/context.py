"""Shared state threaded through the resolution phases."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fiasmap.domain.model import Settlement

from .assembly import UnresolvedSettlement
from .rules import DEFAULT_RULES, RegistryRules

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fiasmap.domain.model import ObjectRecord, RegistryCorrection
    from fiasmap.domain.ports import CatalogSource, HierarchySource

    from .candidates import CandidateSet
    from .chains import ChainIndex
    from .districts import DistrictIndex


@dataclass(slots=True, kw_only=True)
class ResolutionContext:
    """Inputs of a run plus the output slot of every phase.

    ``settlement_records`` stays ``None`` unless a fused catalog scan buffered
    the settlement-eligible records for the assembly phase.
    """

    catalog: CatalogSource
    hierarchy: HierarchySource
    rules: RegistryRules = DEFAULT_RULES
    corrections: Sequence[RegistryCorrection] = ()

    districts: DistrictIndex | None = None
    candidates: CandidateSet | None = None
    settlement_records: list[ObjectRecord] | None = None
    chains: ChainIndex | None = None
    settlements: list[Settlement] = field(default_factory=list[Settlement])
    unresolved: list[UnresolvedSettlement] = field(default_factory=list[UnresolvedSettlement])
