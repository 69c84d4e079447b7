"""Settlement candidate filtering."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from fiasmap.domain.model import ObjectId

from .orchestrator import ResolutionPhase
from .rules import DEFAULT_RULES, RegistryRules, is_settlement_candidate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fiasmap.domain.model import ObjectRecord

    from .context import ResolutionContext

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CandidateSet:
    """Candidate ids in stream order (duplicates kept) with a hash lookup."""

    ids: tuple[ObjectId, ...] = ()
    members: frozenset[ObjectId] = frozenset()

    @classmethod
    def from_ids(cls, ids: Iterable[ObjectId]) -> CandidateSet:
        ordered = tuple(ids)
        return cls(ids=ordered, members=frozenset(ordered))

    def __contains__(self, object_id: object) -> bool:
        return object_id in self.members

    def __len__(self) -> int:
        return len(self.ids)


@dataclass(slots=True)
class CandidateFilter:
    rules: RegistryRules = DEFAULT_RULES
    _ids: list[ObjectId] = field(default_factory=list[ObjectId], init=False)

    def observe(self, record: ObjectRecord) -> bool:
        if not is_settlement_candidate(record, self.rules):
            return False
        self._ids.append(record.object_id)
        return True

    def finish(self) -> CandidateSet:
        candidates = CandidateSet.from_ids(self._ids)
        log.info(
            "Selected %s settlement candidates (%s distinct)",
            len(candidates),
            len(candidates.members),
        )
        return candidates


def filter_candidates(
    records: Iterable[ObjectRecord], *, rules: RegistryRules = DEFAULT_RULES
) -> CandidateSet:
    """Return ids of current settlement records, preserving stream order."""

    candidate_filter = CandidateFilter(rules=rules)
    for record in records:
        candidate_filter.observe(record)
    return candidate_filter.finish()


class CandidateFilterPhase(ResolutionPhase):
    name: str = "candidate_filter"

    def run(self, context: ResolutionContext) -> None:
        context.candidates = filter_candidates(context.catalog(), rules=context.rules)
