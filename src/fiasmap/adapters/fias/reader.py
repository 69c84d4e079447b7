"""Streaming readers for the FIAS XML extracts.

Each reader is a re-openable record source: calling it opens the file and
yields domain records in document order. Open failures, XML syntax errors
and rows that fail schema validation abort the scan with a
``RegistryError`` subclass.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

import lxml.etree as LET
from pydantic import ValidationError

from fiasmap.domain.errors import MalformedRecordError, SourceUnavailableError

from .schema import ITEM_TAG, OBJECT_TAG, AddressObjectRow, HierarchyItemRow
from .translator import to_hierarchy_record, to_object_record

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fiasmap.domain.model import HierarchyRecord, ObjectRecord

log = getLogger(__name__)


def iter_element_attributes(path: Path, tag: str) -> Iterator[tuple[int, dict[str, str]]]:
    """Yield ``(position, attributes)`` for every ``tag`` element in ``path``.

    Elements are matched on their local name and released as soon as they
    have been read so memory stays flat on multi-gigabyte extracts.
    """

    try:
        handle = path.open("rb")
    except OSError as exc:
        raise SourceUnavailableError(path, exc.strerror) from exc

    position = 0
    with handle:
        try:
            for _event, element in LET.iterparse(handle, events=("end",)):
                if LET.QName(element).localname != tag:
                    continue
                position += 1
                attributes = {str(key): str(value) for key, value in element.attrib.items()}
                element.clear(keep_tail=True)
                while element.getprevious() is not None:
                    del element.getparent()[0]
                yield position, attributes
        except LET.XMLSyntaxError as exc:
            raise MalformedRecordError(
                f"XML syntax error: {exc}", source=path, position=position + 1
            ) from exc

    log.debug("Read %s <%s> elements from %s", position, tag, path)


def ensure_readable(path: Path) -> None:
    """Fail fast when an extract the run depends on cannot be opened."""

    try:
        with path.open("rb"):
            pass
    except OSError as exc:
        raise SourceUnavailableError(path, exc.strerror) from exc


@dataclass(frozen=True, slots=True)
class XmlCatalogReader:
    """Address object catalog (``AS_ADDR_OBJ``) source."""

    path: Path

    def __call__(self) -> Iterator[ObjectRecord]:
        log.info("Scanning address object catalog %s", self.path)
        for position, attributes in iter_element_attributes(self.path, OBJECT_TAG):
            try:
                row = AddressObjectRow.model_validate(attributes)
            except ValidationError as exc:
                raise MalformedRecordError(
                    f"Invalid {OBJECT_TAG} element: {exc}", source=self.path, position=position
                ) from exc
            yield to_object_record(row)


@dataclass(frozen=True, slots=True)
class XmlHierarchyReader:
    """Administrative hierarchy (``AS_ADM_HIERARCHY``) source."""

    path: Path

    def __call__(self) -> Iterator[HierarchyRecord]:
        log.info("Scanning administrative hierarchy %s", self.path)
        for position, attributes in iter_element_attributes(self.path, ITEM_TAG):
            try:
                row = HierarchyItemRow.model_validate(attributes)
            except ValidationError as exc:
                raise MalformedRecordError(
                    f"Invalid {ITEM_TAG} element: {exc}", source=self.path, position=position
                ) from exc
            yield to_hierarchy_record(row)
