"""Decoding hierarchy paths and keeping the chains of settlement candidates."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from fiasmap.domain.errors import MalformedRecordError
from fiasmap.domain.model import Chain, ObjectId

from .orchestrator import ResolutionPhase

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from fiasmap.domain.model import HierarchyRecord

    from .candidates import CandidateSet
    from .context import ResolutionContext

log = getLogger(__name__)

PATH_DELIMITER: Final[str] = "."


def decode_chain(path: str) -> Chain:
    """Split a dot-separated hierarchy path into ids, root first."""

    try:
        return tuple(int(segment) for segment in path.split(PATH_DELIMITER))
    except ValueError as exc:
        raise MalformedRecordError(f"Undecodable hierarchy path {path!r}") from exc


@dataclass(frozen=True, slots=True)
class ChainIndex:
    """Retained chains in hierarchy order; the first chain per terminal id wins."""

    chains: tuple[Chain, ...] = ()
    by_terminal: Mapping[ObjectId, Chain] = field(default_factory=dict[ObjectId, Chain])

    @classmethod
    def build(cls, chains: Iterable[Chain]) -> ChainIndex:
        ordered = tuple(chains)
        by_terminal: dict[ObjectId, Chain] = {}
        for chain in ordered:
            by_terminal.setdefault(chain[-1], chain)
        return cls(chains=ordered, by_terminal=by_terminal)

    def for_object(self, object_id: ObjectId) -> Chain | None:
        return self.by_terminal.get(object_id)

    def __len__(self) -> int:
        return len(self.chains)


def resolve_chains(items: Iterable[HierarchyRecord], candidates: CandidateSet) -> ChainIndex:
    """Decode every hierarchy path and keep those ending in a candidate id."""

    retained: list[Chain] = []
    scanned = 0
    for position, item in enumerate(items, start=1):
        scanned += 1
        try:
            chain = decode_chain(item.path)
        except MalformedRecordError as exc:
            raise MalformedRecordError(
                f"Undecodable hierarchy path {item.path!r} for object {item.object_id}",
                position=position,
            ) from exc
        if chain[-1] in candidates:
            retained.append(chain)

    index = ChainIndex.build(retained)
    log.info("Retained %s of %s hierarchy chains", len(index), scanned)
    return index


class ChainResolutionPhase(ResolutionPhase):
    name: str = "chain_resolution"

    def run(self, context: ResolutionContext) -> None:
        if context.candidates is None:
            raise RuntimeError("Candidate filtering must run before chain resolution")
        context.chains = resolve_chains(context.hierarchy(), context.candidates)
