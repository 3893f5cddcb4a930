"""Request/response models for the public API."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .sections import TimelineSection


class DisplayTranslation(BaseModel):
    text: str
    resource_name: Optional[str] = None
    resource_id: Optional[int] = None


class DisplayVerse(BaseModel):
    """Verse ready for the reader: plain-text translations, Uthmani text always set."""

    id: int
    verse_number: int
    verse_key: str
    text_uthmani: str
    translations: List[DisplayTranslation] = Field(default_factory=list)


class ChapterSummary(BaseModel):
    id: int
    name: str
    arabic_name: str
    total_verses: int
    revelation_place: str


class AllVersesResponse(BaseModel):
    verses: List[DisplayVerse]
    chapter_info: ChapterSummary


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_records: int
    per_page: int


class PaginatedVersesResponse(BaseModel):
    verses: List[DisplayVerse]
    pagination: Pagination


class FilterOptions(BaseModel):
    periods: List[str]
    themes: List[str]


class SectionsResponse(BaseModel):
    sections: List[TimelineSection]
    total_sections: int


class HealthResponse(BaseModel):
    ok: bool = True
    enrichment: Literal["enabled", "disabled"]
