"""Phase-based orchestrator for a settlement resolution run."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .context import ResolutionContext

log = getLogger(__name__)


class ResolutionPhase(Protocol):
    """Contract implemented by each resolution phase."""

    name: str

    def run(self, context: ResolutionContext) -> None: ...


@dataclass(slots=True)
class ResolutionPipeline:
    """Compose and execute the ordered resolution phases.

    Phases communicate only through the context; each one reads what earlier
    phases stored and never mutates it.
    """

    phases: Sequence[ResolutionPhase] = field(default_factory=tuple)

    def with_phase(self, phase: ResolutionPhase) -> ResolutionPipeline:
        """Return a new pipeline appending ``phase`` at the end."""

        return ResolutionPipeline(phases=(*self.phases, phase))

    def extend(self, phases: Iterable[ResolutionPhase]) -> ResolutionPipeline:
        """Return a new pipeline with the provided ``phases`` concatenated."""

        return ResolutionPipeline(phases=(*self.phases, *tuple(phases)))

    def run(self, context: ResolutionContext) -> ResolutionContext:
        """Execute the configured phases in-order against ``context``."""

        for phase in self.phases:
            log.debug("Running resolution phase %s", phase.name)
            phase.run(context)
        return context
