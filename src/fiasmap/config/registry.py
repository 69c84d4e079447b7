"""Registry extract locations, classification rules and data corrections."""

from __future__ import annotations

import json
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from fiasmap.domain.model import DistrictKind, RegistryCorrection
from fiasmap.domain.resolution import RegistryRules

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

log = getLogger(__name__)

ADDR_OBJ_ENV: Final[str] = "FIAS_ADDR_OBJ"
ADDR_OBJ_PARAMS_ENV: Final[str] = "FIAS_ADDR_OBJ_PARAMS"
ADM_HIERARCHY_ENV: Final[str] = "FIAS_ADM_HIERARCHY"
CORRECTIONS_FILE_ENV: Final[str] = "FIASMAP_CORRECTIONS_FILE"

# ZATO Komarovsky owns settlements but has no catalog record of its own.
DEFAULT_CORRECTIONS: Final[tuple[RegistryCorrection, ...]] = (
    RegistryCorrection(id=969166, name="ЗАТО Комаровский", kind=DistrictKind.CITY),
)


@dataclass(frozen=True, slots=True)
class RegistryPaths:
    """Locations of the three registry extracts.

    The parameters extract is optional; it is only checked for readability.
    """

    addr_obj: Path
    adm_hierarchy: Path
    addr_obj_params: Path | None = None


def get_registry_paths(
    *,
    addr_obj: str | None = None,
    adm_hierarchy: str | None = None,
    addr_obj_params: str | None = None,
) -> RegistryPaths:
    """Resolve extract paths from explicit values, falling back to the environment."""

    values = require_env_vars(
        (ADDR_OBJ_ENV, ADM_HIERARCHY_ENV),
        overrides={ADDR_OBJ_ENV: addr_obj, ADM_HIERARCHY_ENV: adm_hierarchy},
    )
    params = optional_env_var(ADDR_OBJ_PARAMS_ENV, addr_obj_params)
    return RegistryPaths(
        addr_obj=Path(values[ADDR_OBJ_ENV]).expanduser(),
        adm_hierarchy=Path(values[ADM_HIERARCHY_ENV]).expanduser(),
        addr_obj_params=Path(params).expanduser() if params else None,
    )


def get_registry_rules() -> RegistryRules:
    return RegistryRules()


class CorrectionEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    name: str
    kind: DistrictKind = DistrictKind.CITY

    def to_correction(self) -> RegistryCorrection:
        return RegistryCorrection(id=self.id, name=self.name, kind=self.kind)


_CORRECTIONS_ADAPTER: Final[TypeAdapter[list[CorrectionEntry]]] = TypeAdapter(
    list[CorrectionEntry]
)


def load_corrections(path: Path) -> tuple[RegistryCorrection, ...]:
    """Read a JSON list of ``{"id", "name", "kind"}`` corrections."""

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read registry corrections {path}: {exc}") from exc
    try:
        entries = _CORRECTIONS_ADAPTER.validate_python(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid registry corrections {path}: {exc}") from exc
    log.info("Loaded %s registry corrections from %s", len(entries), path)
    return tuple(entry.to_correction() for entry in entries)


def get_registry_corrections(path: str | None = None) -> Sequence[RegistryCorrection]:
    """Return corrections from ``path`` or the environment, else the built-in list."""

    source = optional_env_var(CORRECTIONS_FILE_ENV, path)
    if source is None:
        return DEFAULT_CORRECTIONS
    return load_corrections(Path(source).expanduser())
