"""Entry DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from typing import Any
from pydantic import AliasChoices, BaseModel, Field, field_validator
from paytrack.domain.entries import coerce_hours, coerce_number


class EntrySubmit(BaseModel):
    """Form payload. Blank or non-numeric fields are accepted as 0."""

    work_hr: float = Field(default=0.0, validation_alias=AliasChoices("work_hr", "workHr"))
    ot_hr: float = Field(default=0.0, validation_alias=AliasChoices("ot_hr", "otHr"))
    extra: float = 0.0
    remark: str = ""

    @field_validator("work_hr", "ot_hr", mode="before")
    @classmethod
    def lenient_hours(cls, v: Any) -> float:
        return coerce_hours(v)

    @field_validator("extra", mode="before")
    @classmethod
    def lenient_extra(cls, v: Any) -> float:
        return coerce_number(v)

    @field_validator("remark", mode="before")
    @classmethod
    def remark_text(cls, v: Any) -> str:
        return "" if v is None else str(v)


class EntryRead(BaseModel):
    model_config = {"from_attributes": True}

    date: str
    work_hr: float
    ot_hr: float
    extra: float
    remark: str
    flagged: bool = False


class EntryList(BaseModel):
    items: list[EntryRead]
    total: int
