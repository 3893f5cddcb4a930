"""Display groupings derived from a timeline document."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .timeline import EventItem, SurahItem

ALL = "All"


class PlacedSurah(BaseModel):
    """A surah together with the stage it was authored under."""

    stage_id: str
    stage_period: str
    surah: SurahItem


class PlacedEvent(BaseModel):
    stage_id: str
    stage_period: str
    event: EventItem


class TimelineSection(BaseModel):
    """One (event, related surahs, year) grouping."""

    event: Optional[PlacedEvent] = None
    surahs: List[PlacedSurah] = Field(default_factory=list)
    year: int


class TimelineFilters(BaseModel):
    period: str = ALL
    theme: str = ALL
    search: str = ""

    @property
    def is_empty(self) -> bool:
        return self.period == ALL and self.theme == ALL and not self.search


GroupingMode = Literal["positional", "linked"]
