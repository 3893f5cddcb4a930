"""Detailed timeline document: stages holding surah and event items."""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator


class ApiData(BaseModel):
    """Chapter metadata attached to a surah by the enrichment service."""

    verses_count: int
    pages: List[int] = Field(default_factory=list)
    bismillah_pre: bool = True
    name_simple: str
    name_complex: str
    translated_name: str


class SurahItem(BaseModel):
    """A surah placed on the timeline by its revelation order."""

    type: Literal["surah"] = "surah"
    revelation_order: int
    name_en: str
    name_ar: str
    chapter_number: Union[int, List[int]]
    verses_range: Optional[str] = None
    location: str
    themes: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    api_data: Optional[ApiData] = None

    @field_validator("chapter_number")
    @classmethod
    def _non_empty_chapters(cls, value: Union[int, List[int]]) -> Union[int, List[int]]:
        if isinstance(value, list) and not value:
            raise ValueError("chapter_number must name at least one chapter")
        return value

    @property
    def chapter_numbers(self) -> List[int]:
        if isinstance(self.chapter_number, list):
            return list(self.chapter_number)
        return [self.chapter_number]

    @property
    def primary_chapter(self) -> int:
        """The chapter used for enrichment and verse reading."""
        return self.chapter_numbers[0]


class EventItem(BaseModel):
    """A dated event from the life of the Prophet."""

    type: Literal["event"] = "event"
    name: str
    year_ce: int
    location: str
    linked_surahs: List[int] = Field(default_factory=list)
    notes: Optional[str] = None


TimelineItem = Annotated[Union[SurahItem, EventItem], Field(discriminator="type")]


class Stage(BaseModel):
    id: str
    name: str
    period: str
    timespan_ce: str
    description: str
    items: List[TimelineItem] = Field(default_factory=list)


class DocumentMetadata(BaseModel):
    generated_at: str
    notes: Optional[str] = None


class TimelineDocument(BaseModel):
    """Versioned, ordered list of stages."""

    version: str
    stages: List[Stage]
    metadata: DocumentMetadata

    @model_validator(mode="after")
    def _unique_items(self) -> "TimelineDocument":
        seen_orders: set[int] = set()
        seen_events: set[tuple[str, int]] = set()
        for stage in self.stages:
            for item in stage.items:
                if isinstance(item, SurahItem):
                    if item.revelation_order in seen_orders:
                        raise ValueError(
                            f"Duplicate surah revelation order {item.revelation_order} in stage {stage.id}"
                        )
                    seen_orders.add(item.revelation_order)
                elif isinstance(item, EventItem):
                    key = (item.name, item.year_ce)
                    if key in seen_events:
                        raise ValueError(f"Duplicate event {item.name!r} ({item.year_ce}) in stage {stage.id}")
                    seen_events.add(key)
        return self

    def surahs(self) -> List[SurahItem]:
        return [item for stage in self.stages for item in stage.items if isinstance(item, SurahItem)]

    def events(self) -> List[EventItem]:
        return [item for stage in self.stages for item in stage.items if isinstance(item, EventItem)]

    def to_payload(self) -> dict:
        """JSON-ready dict with unset optional fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)
