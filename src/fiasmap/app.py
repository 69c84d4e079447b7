"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from fiasmap.adapters.fias import XmlCatalogReader, XmlHierarchyReader, ensure_readable
from fiasmap.config import get_registry_corrections, get_registry_rules
from fiasmap.domain.resolution import ResolutionResult, ScanMode, resolve_settlements

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fiasmap.config import RegistryPaths
    from fiasmap.domain.model import RegistryCorrection
    from fiasmap.domain.resolution import RegistryRules


log = getLogger(__name__)


def resolve_registry_settlements(
    paths: RegistryPaths,
    *,
    rules: RegistryRules | None = None,
    corrections: Sequence[RegistryCorrection] | None = None,
    scan_mode: ScanMode = ScanMode.FUSED,
) -> ResolutionResult:
    """Resolve settlements from the XML extracts named in ``paths``."""

    ensure_readable(paths.addr_obj)
    ensure_readable(paths.adm_hierarchy)
    if paths.addr_obj_params is not None:
        ensure_readable(paths.addr_obj_params)

    effective_rules = rules or get_registry_rules()
    effective_corrections = get_registry_corrections() if corrections is None else corrections
    log.info(
        "Starting settlement resolution: addr_obj=%s, adm_hierarchy=%s, scan_mode=%s, "
        "corrections=%s",
        paths.addr_obj,
        paths.adm_hierarchy,
        scan_mode,
        len(effective_corrections),
    )

    result = resolve_settlements(
        XmlCatalogReader(paths.addr_obj),
        XmlHierarchyReader(paths.adm_hierarchy),
        rules=effective_rules,
        corrections=effective_corrections,
        scan_mode=scan_mode,
    )

    log.info(
        f"Finished settlement resolution: settlements={len(result.settlements)}, "
        f"districts={len(result.districts)}, candidates={result.candidate_count}, "
        f"chains={result.chain_count}, unresolved={result.unresolved_count}"
    )
    return result
