"""Presentation contracts for the timeline UI."""

from .verse_reader import ClientVerseSource, HttpVerseSource, VerseFetchError, VerseReader, VerseReaderState
from .viewmodels import (
    EventCardViewModel,
    InfoPanelViewModel,
    SectionViewModel,
    SurahCardViewModel,
    TimelineViewModel,
    info_panel,
    timeline_view,
)

__all__ = [
    "ClientVerseSource",
    "EventCardViewModel",
    "HttpVerseSource",
    "InfoPanelViewModel",
    "SectionViewModel",
    "SurahCardViewModel",
    "TimelineViewModel",
    "VerseFetchError",
    "VerseReader",
    "VerseReaderState",
    "info_panel",
    "timeline_view",
]
