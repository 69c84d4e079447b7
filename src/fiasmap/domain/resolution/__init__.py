"""Settlement resolution engine.

A run turns the flat, id-keyed registry extracts into settlements tagged
with their owning district. The work is split into phases that share a
``ResolutionContext``:

1. district extraction (catalog)
2. settlement candidate filtering (catalog)
3. chain resolution (hierarchy)
4. settlement assembly (catalog, chains, districts)

Phases 1 and 2 and the record buffer for phase 4 are normally fused into a
single catalog scan.
"""

from __future__ import annotations

from .assembly import (
    AssemblyResult,
    SettlementAssemblyPhase,
    UnresolvedSettlement,
    assemble_settlements,
)
from .candidates import CandidateFilter, CandidateFilterPhase, CandidateSet, filter_candidates
from .catalog import CatalogScanPhase
from .chains import ChainIndex, ChainResolutionPhase, decode_chain, resolve_chains
from .context import ResolutionContext
from .districts import DistrictExtractionPhase, DistrictExtractor, DistrictIndex, extract_districts
from .orchestrator import ResolutionPhase, ResolutionPipeline
from .rules import DEFAULT_RULES, RegistryRules, classify_district, is_settlement_candidate
from .runner import ResolutionResult, ScanMode, build_pipeline, resolve_settlements

__all__ = [
    "DEFAULT_RULES",
    "AssemblyResult",
    "CandidateFilter",
    "CandidateFilterPhase",
    "CandidateSet",
    "CatalogScanPhase",
    "ChainIndex",
    "ChainResolutionPhase",
    "DistrictExtractionPhase",
    "DistrictExtractor",
    "DistrictIndex",
    "RegistryRules",
    "ResolutionContext",
    "ResolutionPhase",
    "ResolutionPipeline",
    "ResolutionResult",
    "ScanMode",
    "SettlementAssemblyPhase",
    "UnresolvedSettlement",
    "assemble_settlements",
    "build_pipeline",
    "classify_district",
    "decode_chain",
    "extract_districts",
    "filter_candidates",
    "is_settlement_candidate",
    "resolve_chains",
    "resolve_settlements",
]
