"""Failures that abort a resolution run."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class RegistryError(RuntimeError):
    """Base class for registry read failures."""


class SourceUnavailableError(RegistryError):
    """Raised when a registry extract cannot be opened."""

    def __init__(self, source: Path | str, reason: str | None = None) -> None:
        message = f"Registry source unavailable: {source}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.source = source


class MalformedRecordError(RegistryError):
    """Raised when a scan hits a record (or XML fragment) it cannot decode."""

    def __init__(
        self,
        message: str,
        *,
        source: Path | str | None = None,
        position: int | None = None,
    ) -> None:
        details = [message]
        if source is not None:
            details.append(f"source={source}")
        if position is not None:
            details.append(f"record={position}")
        super().__init__(", ".join(details))
        self.source = source
        self.position = position
