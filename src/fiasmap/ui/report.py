"""Plain-text settlement report."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fiasmap.domain.resolution import ResolutionResult


def render_report(result: ResolutionResult, *, show_unresolved: bool = False) -> Iterator[str]:
    for settlement in result.settlements:
        yield "\t".join(
            (
                str(settlement.id),
                settlement.name,
                settlement.district_name,
                settlement.district_kind,
            )
        )
    yield f"Settlements: {len(result.settlements)}"

    if show_unresolved:
        for entry in result.unresolved:
            yield f"unresolved\t{entry}"
        yield f"Unresolved: {result.unresolved_count}"
