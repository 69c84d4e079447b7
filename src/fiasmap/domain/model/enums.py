"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class DistrictKind(StrEnum):
    DISTRICT = "district"
    CITY = "city"


class UnresolvedReason(StrEnum):
    """Why a settlement candidate could not be tied to a district."""

    NO_CHAIN = "no_chain"
    CHAIN_TOO_SHORT = "chain_too_short"
    DISTRICT_NOT_FOUND = "district_not_found"
