from __future__ import annotations

from fiasmap.domain.resolution import CandidateSet, filter_candidates
from tests.helpers.registry import make_object


def test_candidates_keep_stream_order_and_duplicates() -> None:
    records = [
        make_object(310, "Ogdenville", level=6, type_code="д"),
        make_object(100, "North", level=2),
        make_object(200, "Springfield", level=5, type_code="г"),
        make_object(310, "Ogdenville", level=6, type_code="д"),
        make_object(320, "Rosebud", level=7, type_code="снт"),
    ]

    candidates = filter_candidates(records)

    assert candidates.ids == (310, 200, 310, 320)
    assert candidates.members == frozenset({200, 310, 320})
    assert 310 in candidates
    assert 100 not in candidates


def test_stale_records_are_not_candidates() -> None:
    records = [
        make_object(200, "Springfield", level=5, type_code="г", is_actual=False),
        make_object(210, "Capital", level=5, type_code="г", is_active=False),
    ]

    assert filter_candidates(records) == CandidateSet()
