"""Typed models shared across the application."""

from .api import (
    AllVersesResponse,
    ChapterSummary,
    DisplayTranslation,
    DisplayVerse,
    FilterOptions,
    HealthResponse,
    PaginatedVersesResponse,
    Pagination,
    SectionsResponse,
)
from .chapter import ChapterInfo, TranslatedName, UpstreamPagination, Verse, VersePage, VerseTranslation, VerseWord
from .sections import ALL, PlacedEvent, PlacedSurah, TimelineFilters, TimelineSection
from .summary import AsbabLink, HijriSpan, Revelation, SirahEvent, TimelinePayload
from .timeline import ApiData, DocumentMetadata, EventItem, Stage, SurahItem, TimelineDocument, TimelineItem

__all__ = [
    "ALL",
    "AllVersesResponse",
    "ApiData",
    "AsbabLink",
    "ChapterInfo",
    "ChapterSummary",
    "DisplayTranslation",
    "DisplayVerse",
    "DocumentMetadata",
    "EventItem",
    "FilterOptions",
    "HealthResponse",
    "HijriSpan",
    "PaginatedVersesResponse",
    "Pagination",
    "PlacedEvent",
    "PlacedSurah",
    "Revelation",
    "SectionsResponse",
    "SirahEvent",
    "Stage",
    "SurahItem",
    "TimelineDocument",
    "TimelineFilters",
    "TimelineItem",
    "TimelinePayload",
    "TimelineSection",
    "TranslatedName",
    "UpstreamPagination",
    "Verse",
    "VersePage",
    "VerseTranslation",
    "VerseWord",
]
