"""Domain primitives: scalar aliases + registry level codes."""

from __future__ import annotations

from typing import Final, TypeAlias

ObjectId: TypeAlias = int
Chain: TypeAlias = tuple[ObjectId, ...]

REGION_LEVEL: Final[int] = 2
CITY_LEVEL: Final[int] = 5
LOCALITY_LEVEL: Final[int] = 6
GARDEN_LEVEL: Final[int] = 7
