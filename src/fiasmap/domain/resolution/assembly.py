"""Settlement assembly: joining candidates, chains and districts."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from fiasmap.domain.model import Settlement, UnresolvedReason

from .orchestrator import ResolutionPhase
from .rules import DEFAULT_RULES, RegistryRules, is_settlement_candidate, settlement_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fiasmap.domain.model import Chain, ObjectId, ObjectRecord

    from .chains import ChainIndex
    from .context import ResolutionContext
    from .districts import DistrictIndex

log = getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class UnresolvedSettlement:
    """A current settlement record that could not be tied to a district."""

    object_id: ObjectId
    name: str
    reason: UnresolvedReason
    chain: Chain | None = None

    def __str__(self) -> str:
        suffix = "" if self.chain is None else f" path={'.'.join(map(str, self.chain))}"
        return f"{self.object_id} {self.name}: {self.reason}{suffix}"


@dataclass(slots=True)
class AssemblyResult:
    settlements: list[Settlement] = field(default_factory=list[Settlement])
    unresolved: list[UnresolvedSettlement] = field(default_factory=list[UnresolvedSettlement])


def assemble_settlements(
    records: Iterable[ObjectRecord],
    chains: ChainIndex,
    districts: DistrictIndex,
    *,
    rules: RegistryRules = DEFAULT_RULES,
) -> AssemblyResult:
    """Emit a settlement for each current candidate record with a known district.

    The candidate predicate is evaluated afresh for every record. Candidates
    without a chain, with a chain too short to name a district, or whose
    district id is unknown are left out of ``settlements`` and reported in
    ``unresolved`` instead.
    """

    result = AssemblyResult()
    for record in records:
        if not is_settlement_candidate(record, rules):
            continue

        name = settlement_name(record)
        chain = chains.for_object(record.object_id)
        if chain is None:
            _report(result, record, name, UnresolvedReason.NO_CHAIN)
            continue
        if len(chain) <= rules.district_position:
            _report(result, record, name, UnresolvedReason.CHAIN_TOO_SHORT, chain)
            continue
        district = districts.get(chain[rules.district_position])
        if district is None:
            _report(result, record, name, UnresolvedReason.DISTRICT_NOT_FOUND, chain)
            continue

        result.settlements.append(Settlement(id=record.object_id, name=name, district=district))

    log.info(
        "Assembled %s settlements, %s unresolved",
        len(result.settlements),
        len(result.unresolved),
    )
    return result


def _report(
    result: AssemblyResult,
    record: ObjectRecord,
    name: str,
    reason: UnresolvedReason,
    chain: Chain | None = None,
) -> None:
    entry = UnresolvedSettlement(object_id=record.object_id, name=name, reason=reason, chain=chain)
    log.debug("Unresolved settlement %s", entry)
    result.unresolved.append(entry)


class SettlementAssemblyPhase(ResolutionPhase):
    """Final join; reads buffered records when a fused scan collected them."""

    name: str = "settlement_assembly"

    def run(self, context: ResolutionContext) -> None:
        if context.districts is None:
            raise RuntimeError("District extraction must run before settlement assembly")
        if context.chains is None:
            raise RuntimeError("Chain resolution must run before settlement assembly")

        records = (
            context.settlement_records
            if context.settlement_records is not None
            else context.catalog()
        )
        assembled = assemble_settlements(
            records, context.chains, context.districts, rules=context.rules
        )
        context.settlements = assembled.settlements
        context.unresolved = assembled.unresolved
