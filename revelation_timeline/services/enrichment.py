"""Merge live chapter metadata onto the surah entries of a timeline document."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Awaitable, Callable, Dict, List, Literal, Optional

from pydantic import BaseModel

from revelation_timeline.client.quran_client import QuranContentClient
from revelation_timeline.models.chapter import ChapterInfo
from revelation_timeline.models.timeline import ApiData, Stage, SurahItem, TimelineDocument

logger = logging.getLogger(__name__)

ARABIC_PATTERN = re.compile(r"[\u0600-\u06FF]")

EnrichmentState = Literal["enriched", "partial", "disabled", "failed"]


class EnrichmentStatus(BaseModel):
    """Outcome of the most recent document enrichment."""

    state: EnrichmentState
    total_surahs: int = 0
    enriched_surahs: int = 0
    failed_surahs: int = 0


class ChapterCache:
    """Chapter metadata keyed by chapter number, with in-flight fetches shared."""

    def __init__(self) -> None:
        self._entries: Dict[int, ChapterInfo] = {}
        self._pending: Dict[int, "asyncio.Future[ChapterInfo]"] = {}

    def __contains__(self, chapter_number: int) -> bool:
        return chapter_number in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, chapter_number: int) -> Optional[ChapterInfo]:
        return self._entries.get(chapter_number)

    def put(self, chapter: ChapterInfo) -> None:
        self._entries[chapter.id] = chapter

    def clear(self) -> None:
        self._entries.clear()

    async def get_or_fetch(
        self,
        chapter_number: int,
        fetch: Callable[[int], Awaitable[ChapterInfo]],
    ) -> ChapterInfo:
        cached = self._entries.get(chapter_number)
        if cached is not None:
            return cached
        pending = self._pending.get(chapter_number)
        if pending is not None:
            return await pending

        task = asyncio.ensure_future(fetch(chapter_number))
        self._pending[chapter_number] = task
        try:
            chapter = await task
        finally:
            self._pending.pop(chapter_number, None)
        self._entries[chapter_number] = chapter
        return chapter


def apply_chapter_info(surah: SurahItem, chapter: ChapterInfo) -> SurahItem:
    """Return a copy of ``surah`` carrying ``chapter``'s metadata."""
    translated = chapter.translated_name.name
    update: Dict[str, object] = {
        "api_data": ApiData(
            verses_count=chapter.verses_count,
            pages=list(chapter.pages),
            bismillah_pre=chapter.bismillah_pre,
            name_simple=chapter.name_simple,
            name_complex=chapter.name_complex,
            translated_name=translated,
        )
    }
    # name_en stays Latin script.
    if translated and translated.strip() and not ARABIC_PATTERN.search(translated):
        update["name_en"] = translated
    if chapter.name_arabic:
        update["name_ar"] = chapter.name_arabic
    if not surah.verses_range and chapter.verses_count:
        update["verses_range"] = f"1-{chapter.verses_count}"
    return surah.model_copy(update=update, deep=True)


class SurahEnrichmentService:
    """Enriches timeline documents; never fails the caller."""

    def __init__(self, client: QuranContentClient, cache: Optional[ChapterCache] = None) -> None:
        self.client = client
        self.cache = cache if cache is not None else ChapterCache()
        self.api_available = True
        self.last_status: Optional[EnrichmentStatus] = None

    @property
    def enabled(self) -> bool:
        return self.client.is_configured and self.api_available

    async def get_chapter_info(self, chapter_number: int) -> ChapterInfo:
        return await self.cache.get_or_fetch(chapter_number, self.client.get_chapter_info)

    async def _enrich_surah(self, surah: SurahItem) -> SurahItem:
        chapter = await self.get_chapter_info(surah.primary_chapter)
        return apply_chapter_info(surah, chapter)

    async def enrich_surah(self, surah: SurahItem) -> SurahItem:
        if not self.enabled:
            return surah
        try:
            return await self._enrich_surah(surah)
        except Exception as exc:
            logger.warning("Failed to enrich surah %s: %s", surah.name_en, exc)
            return surah

    async def enrich_document(self, document: TimelineDocument) -> TimelineDocument:
        surahs = document.surahs()
        if not self.enabled:
            self.last_status = EnrichmentStatus(state="disabled", total_surahs=len(surahs))
            return document

        try:
            results = await asyncio.gather(
                *(self._enrich_surah(surah) for surah in surahs),
                return_exceptions=True,
            )
            enriched: Dict[int, SurahItem] = {}
            failed = 0
            for surah, result in zip(surahs, results):
                if isinstance(result, BaseException):
                    failed += 1
                    logger.warning("Failed to enrich surah %s: %s", surah.name_en, result)
                    continue
                enriched[surah.revelation_order] = result

            if surahs and not enriched:
                self.last_status = EnrichmentStatus(
                    state="failed", total_surahs=len(surahs), failed_surahs=failed
                )
                return document

            stages: List[Stage] = []
            for stage in document.stages:
                items = [
                    enriched.get(item.revelation_order, item) if isinstance(item, SurahItem) else item
                    for item in stage.items
                ]
                stages.append(stage.model_copy(update={"items": items}))
            result_document = document.model_copy(update={"stages": stages})
        except Exception as exc:
            logger.error("Failed to enrich timeline document: %s", exc)
            self.last_status = EnrichmentStatus(state="failed", total_surahs=len(surahs))
            return document

        self.last_status = EnrichmentStatus(
            state="partial" if failed else "enriched",
            total_surahs=len(surahs),
            enriched_surahs=len(enriched),
            failed_surahs=failed,
        )
        return result_document

    async def preload_chapters(self) -> None:
        """Warm the cache from the chapter listing; a failure disables enrichment."""
        if not self.enabled:
            return
        try:
            logger.info("Preloading chapter data from the content API")
            chapters = await self.client.get_all_chapters()
        except Exception as exc:
            logger.error("Failed to preload chapter data: %s", exc)
            self.api_available = False
            return
        for chapter in chapters:
            self.cache.put(chapter)
        logger.info("Preloaded %s chapters", len(chapters))

    def clear_cache(self) -> None:
        self.cache.clear()
