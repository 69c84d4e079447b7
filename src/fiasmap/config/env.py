"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def require_env_vars(
    names: Sequence[str], *, overrides: Mapping[str, str | None] | None = None
) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank.

    Non-blank ``overrides`` take precedence over the environment, which lets
    command-line options satisfy a requirement.
    """

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = (overrides or {}).get(name) or os.getenv(name)
        if value is None or not value.strip():
            missing.append(name)
            continue
        values[name] = value

    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(f"Missing configuration for: {missing_list}")

    return values


def optional_env_var(name: str, override: str | None = None) -> str | None:
    value = override or os.getenv(name)
    if value is None or not value.strip():
        return None
    return value
