"""Attribute schemas for rows of the FIAS XML extracts."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

OBJECT_TAG: Final[str] = "OBJECT"
ITEM_TAG: Final[str] = "ITEM"
FLAG_TRUE: Final[str] = "1"


class FiasBaseModel(BaseModel):
    # extracts carry dozens of bookkeeping attributes the resolution never reads
    model_config = ConfigDict(extra="ignore", frozen=True)


class AddressObjectRow(FiasBaseModel):
    """``OBJECT`` element of ``AS_ADDR_OBJ``."""

    object_id: int = Field(alias="OBJECTID")
    name: str = Field(alias="NAME")
    level: int = Field(alias="LEVEL")
    type_name: str = Field(alias="TYPENAME")
    is_actual: bool = Field(alias="ISACTUAL")
    is_active: bool = Field(alias="ISACTIVE")

    @field_validator("is_actual", "is_active", mode="before")
    @classmethod
    def _parse_flag(cls, value: object) -> bool:
        # only the literal "1" counts as set
        return value == FLAG_TRUE


class HierarchyItemRow(FiasBaseModel):
    """``ITEM`` element of ``AS_ADM_HIERARCHY``."""

    object_id: int = Field(alias="OBJECTID")
    path: str = Field(alias="PATH")
