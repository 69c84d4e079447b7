from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pytest

from fiasmap.config.registry import (
    ADDR_OBJ_ENV,
    ADDR_OBJ_PARAMS_ENV,
    ADM_HIERARCHY_ENV,
    CORRECTIONS_FILE_ENV,
)
from tests.helpers.registry import make_item, make_object, write_catalog, write_hierarchy

if TYPE_CHECKING:
    from pathlib import Path

    from fiasmap.domain.model import HierarchyRecord, ObjectRecord


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (ADDR_OBJ_ENV, ADDR_OBJ_PARAMS_ENV, ADM_HIERARCHY_ENV, CORRECTIONS_FILE_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_catalog() -> tuple[ObjectRecord, ...]:
    return (
        make_object(100, "North", level=2),
        make_object(200, "Springfield", level=5, type_code="city"),
        make_object(300, "Shelbyville", level=5, type_code="г"),
        make_object(310, "Ogdenville", level=6, type_code="д"),
        make_object(320, "Rosebud", level=7, type_code="снт"),
        make_object(330, "Old Mill", level=6, type_code="д", is_active=False),
        make_object(340, "Street", level=8, type_code="ул"),
    )


@pytest.fixture
def sample_hierarchy() -> tuple[HierarchyRecord, ...]:
    return (
        make_item(100, "1.100"),
        make_item(200, "1.100.200"),
        make_item(300, "1.300"),
        make_item(310, "1.300.310"),
        make_item(320, "1.100.320"),
        make_item(330, "1.100.330"),
        make_item(340, "1.100.200.340"),
    )


@dataclass(frozen=True, slots=True)
class RegistryFiles:
    addr_obj: Path
    adm_hierarchy: Path
    addr_obj_params: Path


@pytest.fixture
def registry_files(
    tmp_path: Path,
    sample_catalog: tuple[ObjectRecord, ...],
    sample_hierarchy: tuple[HierarchyRecord, ...],
) -> RegistryFiles:
    params = tmp_path / "AS_ADDR_OBJ_PARAMS.XML"
    params.write_text("<?xml version='1.0' encoding='utf-8'?>\n<PARAMS/>\n", encoding="utf-8")
    return RegistryFiles(
        addr_obj=write_catalog(tmp_path / "AS_ADDR_OBJ.XML", sample_catalog),
        adm_hierarchy=write_hierarchy(tmp_path / "AS_ADM_HIERARCHY.XML", sample_hierarchy),
        addr_obj_params=params,
    )
