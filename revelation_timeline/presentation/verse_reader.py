"""Verse-reading overlay state: one fetch per selection, local pagination."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

import httpx

from revelation_timeline.client.quran_client import QuranContentClient
from revelation_timeline.config import settings
from revelation_timeline.models.api import AllVersesResponse, ChapterSummary, DisplayVerse
from revelation_timeline.models.timeline import SurahItem
from revelation_timeline.services.verses import fetch_all_verses

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to load verses"


class VerseFetchError(Exception):
    """The verses endpoint answered with a non-success status."""


class VerseSource(Protocol):
    async def fetch_all(self, chapter_number: int) -> AllVersesResponse:
        ...


class HttpVerseSource:
    """Reads ``/api/chapters/{n}/verses/all`` from a running server."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self.http = http_client

    async def fetch_all(self, chapter_number: int) -> AllVersesResponse:
        response = await self.http.get(f"/api/chapters/{chapter_number}/verses/all")
        if response.status_code != 200:
            raise VerseFetchError(f"Failed to fetch verses: {response.reason_phrase}")
        return AllVersesResponse.model_validate(response.json())


class ClientVerseSource:
    """Fetches straight from the content API, bypassing the HTTP layer."""

    def __init__(self, client: QuranContentClient) -> None:
        self.client = client

    async def fetch_all(self, chapter_number: int) -> AllVersesResponse:
        return await fetch_all_verses(self.client, chapter_number)


@dataclass
class VerseReaderState:
    surah: SurahItem
    chapter_info: ChapterSummary
    verses: List[DisplayVerse] = field(default_factory=list)
    loading: bool = True
    error: Optional[str] = None
    current_page: int = 1


class VerseReader:
    """Holds the verses of the selected surah and pages through them in memory."""

    def __init__(self, source: VerseSource, page_size: Optional[int] = None) -> None:
        self.source = source
        self.page_size = page_size or settings.verses_per_page
        self.state: Optional[VerseReaderState] = None

    @property
    def is_open(self) -> bool:
        return self.state is not None

    async def open(self, surah: SurahItem) -> VerseReaderState:
        chapter_number = surah.primary_chapter
        state = VerseReaderState(
            surah=surah,
            chapter_info=ChapterSummary(
                id=chapter_number,
                name=surah.name_en,
                arabic_name=surah.name_ar,
                total_verses=0,
                revelation_place=surah.location,
            ),
        )
        self.state = state

        try:
            response = await self.source.fetch_all(chapter_number)
        except Exception as exc:
            logger.warning("Failed to fetch verses for chapter %s: %s", chapter_number, exc)
            state.error = str(exc) or DEFAULT_ERROR_MESSAGE
        else:
            state.verses = list(response.verses)
            state.chapter_info = response.chapter_info
        state.loading = False
        return state

    def close(self) -> None:
        self.state = None

    @property
    def total_pages(self) -> int:
        if self.state is None:
            return 1
        return math.ceil(len(self.state.verses) / self.page_size)

    def go_to_page(self, page: int) -> int:
        if self.state is None:
            raise RuntimeError("No surah is open.")
        self.state.current_page = min(max(page, 1), max(self.total_pages, 1))
        return self.state.current_page

    def page_verses(self, page: Optional[int] = None) -> List[DisplayVerse]:
        if self.state is None:
            return []
        page = self.state.current_page if page is None else page
        start = (page - 1) * self.page_size
        return self.state.verses[start:start + self.page_size]

    def pages(self) -> List[List[DisplayVerse]]:
        return [self.page_verses(page) for page in range(1, self.total_pages + 1)]
