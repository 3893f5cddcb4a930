"""Legacy summary payload served at ``/api/timeline``."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class HijriSpan(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_ah: int = Field(alias="startAH")
    end_ah: int = Field(alias="endAH")


class SirahEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    type: Literal["revelation", "migration", "treaty", "battle", "milestone"]
    year_ah: int = Field(alias="yearAH", description="Approximate; negative means pre-Hijrah.")
    month: Optional[str] = None
    location: Optional[str] = None
    summary: Optional[str] = None
    links: List[str] = Field(default_factory=list)


class AsbabLink(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ayah_range: str = Field(alias="ayahRange")
    summary: str
    sources: List[str] = Field(default_factory=list)
    confidence: Literal["variant", "supported", "weak"]


class Revelation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    surah_id: int = Field(alias="surahId")
    surah_name: str = Field(alias="surahName")
    place: Literal["meccan", "medinan"]
    revelation_order: int = Field(alias="revelationOrder")
    approx_year_ah: int = Field(alias="approxYearAH")
    linked_event_ids: List[str] = Field(default_factory=list, alias="linkedEventIds")
    asbab: List[AsbabLink] = Field(default_factory=list)


class TimelinePayload(BaseModel):
    meccan: HijriSpan
    medinan: HijriSpan
    events: List[SirahEvent]
    revelations: List[Revelation]

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
