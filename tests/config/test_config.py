from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from fiasmap.config import (
    DEFAULT_CORRECTIONS,
    ConfigurationError,
    MissingConfigurationError,
    get_registry_corrections,
    get_registry_paths,
    load_corrections,
    require_env_vars,
)
from fiasmap.domain.model import DistrictKind, RegistryCorrection


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_raises_when_any_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR"])

    assert "MISSING_VAR" in str(exc.value)


def test_require_env_vars_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_vars(["EXAMPLE_VAR"])


def test_require_env_vars_prefers_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMP_VAR", "123")

    assert os.getenv("TEMP_VAR") == "123"
    result = require_env_vars(["TEMP_VAR"], overrides={"TEMP_VAR": "456"})
    assert result["TEMP_VAR"] == "456"


def test_registry_paths_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIAS_ADDR_OBJ", "/data/AS_ADDR_OBJ.XML")
    monkeypatch.setenv("FIAS_ADM_HIERARCHY", "/data/AS_ADM_HIERARCHY.XML")

    paths = get_registry_paths()

    assert paths.addr_obj == Path("/data/AS_ADDR_OBJ.XML")
    assert paths.adm_hierarchy == Path("/data/AS_ADM_HIERARCHY.XML")
    assert paths.addr_obj_params is None


def test_registry_paths_explicit_values_override_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("FIAS_ADDR_OBJ", "/env/objects.xml")

    paths = get_registry_paths(
        addr_obj="/cli/objects.xml",
        adm_hierarchy="/cli/hierarchy.xml",
        addr_obj_params="/cli/params.xml",
    )

    assert paths.addr_obj == Path("/cli/objects.xml")
    assert paths.addr_obj_params == Path("/cli/params.xml")


def test_registry_paths_report_every_missing_extract() -> None:
    with pytest.raises(MissingConfigurationError) as exc:
        get_registry_paths()

    assert "FIAS_ADDR_OBJ" in str(exc.value)
    assert "FIAS_ADM_HIERARCHY" in str(exc.value)


def test_default_corrections_hold_the_known_gap() -> None:
    assert get_registry_corrections() == DEFAULT_CORRECTIONS
    assert DEFAULT_CORRECTIONS == (
        RegistryCorrection(id=969166, name="ЗАТО Комаровский", kind=DistrictKind.CITY),
    )


def test_corrections_load_from_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "corrections.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "name": "Patched City"},
                {"id": 2, "name": "Patched District", "kind": "district"},
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("FIASMAP_CORRECTIONS_FILE", str(path))

    corrections = get_registry_corrections()

    assert corrections == (
        RegistryCorrection(id=1, name="Patched City", kind=DistrictKind.CITY),
        RegistryCorrection(id=2, name="Patched District", kind=DistrictKind.DISTRICT),
    )


@pytest.mark.parametrize(
    "payload",
    ["not json", '{"id": 1}', '[{"id": 1, "name": "x", "kind": "village"}]', '[{"name": "x"}]'],
)
def test_invalid_corrections_raise_configuration_error(tmp_path: Path, payload: str) -> None:
    path = tmp_path / "corrections.json"
    path.write_text(payload, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_corrections(path)


def test_unreadable_corrections_raise_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_corrections(tmp_path / "absent.json")
