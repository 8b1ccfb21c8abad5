"""Pydantic schemas for chart requests and responses."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChartRequest(BaseModel):
    """Raw chart request body.

    Only the JSON shape is checked here; calendar and range validation
    happens in the chart service so every caller gets the same rules.
    """

    model_config = ConfigDict(populate_by_name=True)

    date: str | None = None
    time: str | None = None
    tz_offset_minutes: float | None = Field(default=None, alias="tzOffsetMinutes", strict=True)
    orb: float | None = Field(default=None, strict=True)


class ChartMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tz_offset_minutes: float = Field(alias="tzOffsetMinutes")
    orb: float
    confidence: Literal["high", "low"]
    note: str | None = None


class ChartSubject(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    time: str | None = None
    location_text: str = Field(default="Timezone offset only", alias="locationText")


class ChartAspect(BaseModel):
    """An aspect between two bodies."""

    a: str
    b: str
    aspect: str
    separation: float
    orb: float
    intensity: Literal["tight", "medium", "wide"]


class ChartResponse(BaseModel):
    """Complete chart output for a single birth moment."""

    model_config = ConfigDict(populate_by_name=True)

    ok: Literal[True] = True
    meta: ChartMeta
    subject: ChartSubject
    jd: float
    planets: dict[str, float]
    aspects: list[ChartAspect] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    ok: Literal[False] = False
    error: str
