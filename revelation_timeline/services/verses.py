"""Shape upstream verses for the reader endpoints."""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Iterable, List

from revelation_timeline.models.api import (
    AllVersesResponse,
    ChapterSummary,
    DisplayTranslation,
    DisplayVerse,
    PaginatedVersesResponse,
    Pagination,
)
from revelation_timeline.models.chapter import ChapterInfo, Verse

if TYPE_CHECKING:
    from revelation_timeline.client.quran_client import QuranContentClient

FOOTNOTE_PATTERN = re.compile(r"<sup[^>]*>.*?</sup>", re.DOTALL)
TAG_PATTERN = re.compile(r"<[^>]*>")


def clean_html(text: str) -> str:
    """Drop footnote markers, then any remaining tags."""
    without_footnotes = FOOTNOTE_PATTERN.sub("", text)
    return TAG_PATTERN.sub("", without_footnotes).strip()


def uthmani_text(verse: Verse) -> str:
    if verse.text_uthmani:
        return verse.text_uthmani
    if verse.text_imlaei_simple:
        return verse.text_imlaei_simple
    if verse.words:
        return " ".join(
            word.text or word.code_v1 or ""
            for word in verse.words
            if word.char_type_name == "word"
        )
    return f"Verse {verse.verse_number}"


def format_verse(verse: Verse) -> DisplayVerse:
    return DisplayVerse(
        id=verse.id,
        verse_number=verse.verse_number,
        verse_key=verse.verse_key,
        text_uthmani=uthmani_text(verse),
        translations=[
            DisplayTranslation(
                text=clean_html(translation.text),
                resource_name=translation.resource_name,
                resource_id=translation.resource_id,
            )
            for translation in verse.translations
        ],
    )


def format_verses(verses: Iterable[Verse]) -> List[DisplayVerse]:
    return [format_verse(verse) for verse in verses]


def build_all_verses_response(chapter: ChapterInfo, verses: Iterable[Verse]) -> AllVersesResponse:
    return AllVersesResponse(
        verses=format_verses(verses),
        chapter_info=ChapterSummary(
            id=chapter.id,
            name=chapter.name_simple,
            arabic_name=chapter.name_arabic,
            total_verses=chapter.verses_count,
            revelation_place=chapter.revelation_place,
        ),
    )


def build_paginated_response(
    chapter: ChapterInfo,
    verses: Iterable[Verse],
    page: int,
    per_page: int,
) -> PaginatedVersesResponse:
    return PaginatedVersesResponse(
        verses=format_verses(verses),
        pagination=Pagination(
            current_page=page,
            total_pages=math.ceil(chapter.verses_count / per_page),
            total_records=chapter.verses_count,
            per_page=per_page,
        ),
    )


async def fetch_all_verses(client: QuranContentClient, chapter_number: int) -> AllVersesResponse:
    """Chapter info plus every verse of the chapter, formatted for display."""
    chapter = await client.get_chapter_info(chapter_number)
    verses = await client.get_all_chapter_verses(chapter_number)
    return build_all_verses_response(chapter, verses)
