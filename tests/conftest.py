"""Shared fixtures: an in-process content client and small timeline documents."""

from __future__ import annotations

import asyncio
from typing import Dict, Iterable, List, Optional, Set

import pytest

from revelation_timeline.errors import ChapterNotFoundError, ClientNotConfiguredError, UpstreamContentError
from revelation_timeline.models.chapter import (
    ChapterInfo,
    TranslatedName,
    UpstreamPagination,
    Verse,
    VersePage,
    VerseTranslation,
)
from revelation_timeline.models.timeline import TimelineDocument


def make_chapter(
    chapter_id: int,
    verses_count: int = 7,
    name_simple: Optional[str] = None,
    name_arabic: str = "سورة",
    translated: Optional[str] = None,
) -> ChapterInfo:
    name = name_simple or f"Chapter {chapter_id}"
    return ChapterInfo(
        id=chapter_id,
        revelation_place="makkah",
        revelation_order=chapter_id,
        bismillah_pre=chapter_id != 9,
        name_simple=name,
        name_complex=name,
        name_arabic=name_arabic,
        verses_count=verses_count,
        pages=[chapter_id, chapter_id + 1],
        translated_name=TranslatedName(language_name="english", name=translated if translated is not None else f"The {name}"),
    )


def make_verses(chapter_id: int, count: int) -> List[Verse]:
    return [
        Verse(
            id=chapter_id * 1000 + number,
            verse_number=number,
            verse_key=f"{chapter_id}:{number}",
            text_uthmani=f"آية {number}",
            translations=[
                VerseTranslation(
                    text=f"Verse {number} text<sup foot_note=\"{number}\">{number}</sup>",
                    resource_id=20,
                    resource_name="Saheeh International",
                )
            ],
        )
        for number in range(1, count + 1)
    ]


class FakeContentClient:
    """Stands in for ``QuranContentClient`` without any network access."""

    def __init__(
        self,
        chapters: Optional[Dict[int, ChapterInfo]] = None,
        failing: Iterable[int] = (),
        fail_all: bool = False,
        configured: bool = True,
        delay: float = 0.0,
    ) -> None:
        self.chapters = chapters if chapters is not None else {}
        self.failing: Set[int] = set(failing)
        self.fail_all = fail_all
        self.configured = configured
        self.delay = delay
        self.calls: List[tuple] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    def _chapter(self, chapter_number: int) -> ChapterInfo:
        if not self.configured:
            raise ClientNotConfiguredError("QURAN_CLIENT_ID and QURAN_CLIENT_SECRET are not configured.")
        if self.fail_all or chapter_number in self.failing:
            raise UpstreamContentError(f"API request failed for chapter {chapter_number}")
        if chapter_number not in self.chapters:
            self.chapters[chapter_number] = make_chapter(chapter_number)
        return self.chapters[chapter_number]

    async def get_chapter_info(self, chapter_number: int) -> ChapterInfo:
        self.calls.append(("chapter", chapter_number))
        if self.delay:
            await asyncio.sleep(self.delay)
        return self._chapter(chapter_number)

    async def get_all_chapters(self) -> List[ChapterInfo]:
        self.calls.append(("chapters",))
        if not self.configured:
            raise ClientNotConfiguredError("QURAN_CLIENT_ID and QURAN_CLIENT_SECRET are not configured.")
        if self.fail_all:
            raise UpstreamContentError("API request failed for /chapters")
        return [make_chapter(number) for number in range(1, 115)]

    async def get_chapter_verses(self, chapter_number: int, page: int = 1, per_page: int = 10) -> VersePage:
        self.calls.append(("verses", chapter_number, page, per_page))
        chapter = self._chapter(chapter_number)
        verses = make_verses(chapter_number, chapter.verses_count)
        start = (page - 1) * per_page
        return VersePage(
            verses=verses[start:start + per_page],
            pagination=UpstreamPagination(per_page=per_page, current_page=page, total_records=len(verses)),
        )

    async def get_all_chapter_verses(self, chapter_number: int) -> List[Verse]:
        self.calls.append(("all_verses", chapter_number))
        if chapter_number > 114:
            raise ChapterNotFoundError(chapter_number)
        chapter = self._chapter(chapter_number)
        return make_verses(chapter_number, chapter.verses_count)


def _surah(order: int, chapter, themes, name: Optional[str] = None, **extra) -> dict:
    return {
        "type": "surah",
        "revelation_order": order,
        "name_en": name or f"Surah {order}",
        "name_ar": "سورة",
        "chapter_number": chapter,
        "location": "Makkah",
        "themes": themes,
        **extra,
    }


@pytest.fixture
def small_document() -> TimelineDocument:
    """Two events (610, 622) and four surahs split across two stages."""
    return TimelineDocument.model_validate(
        {
            "version": "test",
            "stages": [
                {
                    "id": "stage-a",
                    "name": "Early Makkah",
                    "period": "Makkah",
                    "timespan_ce": "610–613",
                    "description": "",
                    "items": [
                        _surah(1, 96, ["Knowledge", "Creation"], name="Al-Alaq", verses_range="1–5"),
                        _surah(2, 68, ["Character", "Patience", "Consolation"], name="Al-Qalam"),
                        {
                            "type": "event",
                            "name": "First Revelation",
                            "year_ce": 610,
                            "location": "Cave of Hira",
                            "linked_surahs": [96],
                        },
                    ],
                },
                {
                    "id": "stage-b",
                    "name": "Migration",
                    "period": "Medinah",
                    "timespan_ce": "622",
                    "description": "",
                    "items": [
                        {
                            "type": "event",
                            "name": "Hijrah",
                            "year_ce": 622,
                            "location": "Makkah → Madinah",
                            "linked_surahs": [],
                        },
                        _surah(4, 74, ["Warning"], name="Al-Muddaththir"),
                        _surah(3, 73, ["Night Prayer", "Discipline", "Preparation"], name="Al-Muzzammil"),
                    ],
                },
            ],
            "metadata": {"generated_at": "2025-10-29T00:00:00Z"},
        }
    )


@pytest.fixture
def fake_client() -> FakeContentClient:
    return FakeContentClient()
