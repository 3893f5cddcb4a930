"""Group timeline items into display sections and apply the UI filters."""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Tuple

from revelation_timeline.models.api import FilterOptions
from revelation_timeline.models.sections import (
    ALL,
    GroupingMode,
    PlacedEvent,
    PlacedSurah,
    TimelineFilters,
    TimelineSection,
)
from revelation_timeline.models.timeline import EventItem, SurahItem, TimelineDocument

logger = logging.getLogger(__name__)

DEFAULT_TRAILING_BASE_YEAR = 622


def flatten(document: TimelineDocument) -> Tuple[List[PlacedEvent], List[PlacedSurah]]:
    """Events ordered by year and surahs ordered by revelation order, with their stage."""
    events: List[PlacedEvent] = []
    surahs: List[PlacedSurah] = []
    for stage in document.stages:
        for item in stage.items:
            if isinstance(item, EventItem):
                events.append(PlacedEvent(stage_id=stage.id, stage_period=stage.period, event=item))
            elif isinstance(item, SurahItem):
                surahs.append(PlacedSurah(stage_id=stage.id, stage_period=stage.period, surah=item))
    events.sort(key=lambda placed: placed.event.year_ce)
    surahs.sort(key=lambda placed: placed.surah.revelation_order)
    return events, surahs


def _trailing_section(sections: List[TimelineSection], surahs: List[PlacedSurah]) -> TimelineSection:
    base_year = sections[-1].year if sections else DEFAULT_TRAILING_BASE_YEAR
    return TimelineSection(event=None, surahs=surahs, year=base_year + 1)


def _positional_sections(events: List[PlacedEvent], surahs: List[PlacedSurah]) -> List[TimelineSection]:
    per_event = math.ceil(len(surahs) / len(events))
    sections = [
        TimelineSection(
            event=placed,
            surahs=surahs[index * per_event:(index + 1) * per_event],
            year=placed.event.year_ce,
        )
        for index, placed in enumerate(events)
    ]
    assigned = len(events) * per_event
    if assigned < len(surahs):
        sections.append(_trailing_section(sections, surahs[assigned:]))
    return sections


def _linked_sections(events: List[PlacedEvent], surahs: List[PlacedSurah]) -> List[TimelineSection]:
    owner: Dict[int, int] = {}
    for index, placed in enumerate(events):
        for chapter in placed.event.linked_surahs:
            owner.setdefault(chapter, index)

    buckets: List[List[PlacedSurah]] = [[] for _ in events]
    unlinked: List[PlacedSurah] = []
    for placed in surahs:
        owners = [owner[chapter] for chapter in placed.surah.chapter_numbers if chapter in owner]
        if owners:
            buckets[min(owners)].append(placed)
        else:
            unlinked.append(placed)

    sections = [
        TimelineSection(event=placed, surahs=bucket, year=placed.event.year_ce)
        for placed, bucket in zip(events, buckets)
    ]
    if unlinked:
        sections.append(_trailing_section(sections, unlinked))
    return sections


def build_sections(document: TimelineDocument, mode: GroupingMode = "positional") -> List[TimelineSection]:
    """Derive (event, surahs, year) groupings.

    ``positional`` spreads surahs evenly over the events in chronological
    order; ``linked`` follows each event's ``linked_surahs``. A document
    without events yields no sections in either mode.
    """
    events, surahs = flatten(document)
    if not events:
        return []
    if mode == "linked":
        return _linked_sections(events, surahs)
    return _positional_sections(events, surahs)


def _period_matches(stage_period: str, period: str) -> bool:
    return period == ALL or period.lower() in stage_period.lower()


def event_matches(placed: PlacedEvent, filters: TimelineFilters) -> bool:
    if not _period_matches(placed.stage_period, filters.period):
        return False
    if filters.search:
        term = filters.search.lower()
        event = placed.event
        if term not in event.name.lower() and term not in event.location.lower():
            return False
    return True


def surah_matches(placed: PlacedSurah, filters: TimelineFilters) -> bool:
    if not _period_matches(placed.stage_period, filters.period):
        return False
    surah = placed.surah
    if filters.theme != ALL and filters.theme not in surah.themes:
        return False
    if filters.search:
        term = filters.search.lower()
        if (
            term not in surah.name_en.lower()
            and term not in surah.name_ar.lower()
            and not any(term in theme.lower() for theme in surah.themes)
        ):
            return False
    return True


def filter_sections(sections: List[TimelineSection], filters: TimelineFilters) -> List[TimelineSection]:
    """Apply period/theme/search; an event and its surahs are filtered independently."""
    filtered: List[TimelineSection] = []
    for section in sections:
        event: Optional[PlacedEvent] = section.event
        if event is not None and not event_matches(event, filters):
            event = None
        surahs = [placed for placed in section.surahs if surah_matches(placed, filters)]
        if event is None and not surahs:
            continue
        filtered.append(section.model_copy(update={"event": event, "surahs": surahs}))
    return filtered


def query_timeline(
    document: TimelineDocument,
    filters: Optional[TimelineFilters] = None,
    mode: GroupingMode = "positional",
) -> List[TimelineSection]:
    filters = filters or TimelineFilters()
    sections = build_sections(document, mode)
    result = filter_sections(sections, filters)
    logger.debug(
        "Timeline query %s (mode=%s) kept %s of %s sections",
        filters.model_dump(),
        mode,
        len(result),
        len(sections),
    )
    return result


def filter_options(document: TimelineDocument) -> FilterOptions:
    """Distinct periods and themes in document order, each led by ``All``."""
    periods: List[str] = []
    themes: List[str] = []
    for stage in document.stages:
        if stage.period not in periods:
            periods.append(stage.period)
        for item in stage.items:
            if not isinstance(item, SurahItem):
                continue
            for theme in item.themes:
                if theme not in themes:
                    themes.append(theme)
    return FilterOptions(periods=[ALL, *periods], themes=[ALL, *themes])
