from __future__ import annotations

from fiasmap.domain.model import District, DistrictKind, UnresolvedReason
from fiasmap.domain.resolution import (
    CandidateSet,
    ChainIndex,
    DistrictIndex,
    assemble_settlements,
    resolve_chains,
)
from tests.helpers.registry import make_item, make_object

NORTH = District(id=100, name="North", kind=DistrictKind.DISTRICT)


def _chains(*paths: str, candidates: tuple[int, ...]) -> ChainIndex:
    items = [make_item(int(path.rsplit(".", 1)[-1]), path) for path in paths]
    return resolve_chains(items, CandidateSet.from_ids(candidates))


def test_settlement_takes_district_from_second_chain_element() -> None:
    records = [make_object(200, "Springfield", level=5, type_code="city")]

    result = assemble_settlements(
        records, _chains("1.100.200", candidates=(200,)), DistrictIndex.build([NORTH])
    )

    assert len(result.settlements) == 1
    settlement = result.settlements[0]
    assert settlement.id == 200
    assert settlement.name == "city Springfield"
    assert settlement.district is NORTH
    assert settlement.district_name == "North"
    assert settlement.district_kind is DistrictKind.DISTRICT
    assert result.unresolved == []


def test_predicate_is_evaluated_again_for_every_record() -> None:
    chains = _chains("1.100.200", candidates=(200,))
    records = [make_object(200, "Springfield", level=5, type_code="city", is_active=False)]

    result = assemble_settlements(records, chains, DistrictIndex.build([NORTH]))

    assert result.settlements == []
    assert result.unresolved == []


def test_unresolved_candidates_are_reported_not_emitted() -> None:
    records = [
        make_object(200, "Springfield", level=5, type_code="city"),
        make_object(210, "Lonely", level=6, type_code="д"),
        make_object(220, "Orphan", level=6, type_code="д"),
    ]
    chains = _chains("200", "1.555.220", candidates=(200, 210, 220))

    result = assemble_settlements(records, chains, DistrictIndex.build([NORTH]))

    assert result.settlements == []
    assert [(entry.object_id, entry.reason) for entry in result.unresolved] == [
        (200, UnresolvedReason.CHAIN_TOO_SHORT),
        (210, UnresolvedReason.NO_CHAIN),
        (220, UnresolvedReason.DISTRICT_NOT_FOUND),
    ]
    assert result.unresolved[0].chain == (200,)
    assert result.unresolved[1].chain is None
    assert str(result.unresolved[2]) == "220 д Orphan: district_not_found path=1.555.220"


def test_duplicate_candidate_records_each_produce_a_settlement() -> None:
    record = make_object(200, "Springfield", level=5, type_code="city")
    chains = _chains("1.100.200", candidates=(200, 200))

    result = assemble_settlements([record, record], chains, DistrictIndex.build([NORTH]))

    assert [settlement.id for settlement in result.settlements] == [200, 200]


def test_output_follows_catalog_order() -> None:
    records = [
        make_object(320, "Rosebud", level=7, type_code="снт"),
        make_object(200, "Springfield", level=5, type_code="city"),
    ]
    chains = _chains("1.100.200", "1.100.320", candidates=(200, 320))

    result = assemble_settlements(records, chains, DistrictIndex.build([NORTH]))

    assert [settlement.name for settlement in result.settlements] == [
        "снт Rosebud",
        "city Springfield",
    ]
