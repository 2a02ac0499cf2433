"""Rate settings DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from typing import Any
from pydantic import AliasChoices, BaseModel, Field, field_validator
from paytrack.domain.rates import coerce_rate


class RateSettingsRead(BaseModel):
    model_config = {"from_attributes": True}

    hourly_rate: float
    ot_rate: float


class RateSettingsUpdate(BaseModel):
    """Non-numeric or negative rates are accepted as 0."""

    hourly_rate: float = Field(default=0.0, validation_alias=AliasChoices("hourly_rate", "hourlyRate"))
    ot_rate: float = Field(default=0.0, validation_alias=AliasChoices("ot_rate", "otRate"))

    @field_validator("hourly_rate", "ot_rate", mode="before")
    @classmethod
    def lenient_rate(cls, v: Any) -> float:
        return coerce_rate(v)
