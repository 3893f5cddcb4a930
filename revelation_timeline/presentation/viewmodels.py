"""View models for the timeline cards, info panel and filter bar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from revelation_timeline.models.sections import GroupingMode, PlacedEvent, PlacedSurah, TimelineFilters, TimelineSection
from revelation_timeline.models.timeline import EventItem, SurahItem, TimelineDocument
from revelation_timeline.query.timeline_filter import filter_options, query_timeline

CARD_THEME_LIMIT = 2


@dataclass(frozen=True)
class SurahCardViewModel:
    revelation_order: int
    chapter_number: int
    name_en: str
    name_ar: str
    chapter_label: str
    verses_range: Optional[str]
    verses_count: Optional[int]
    themes: Tuple[str, ...]
    tooltip: Optional[str]


@dataclass(frozen=True)
class EventCardViewModel:
    name: str
    year_label: str
    location: str
    tooltip: Optional[str]


@dataclass(frozen=True)
class SectionViewModel:
    year: int
    event: Optional[EventCardViewModel]
    surahs: Tuple[SurahCardViewModel, ...]


@dataclass(frozen=True)
class InfoPanelViewModel:
    """Details shown when an item on the timeline is selected."""

    title: str
    subtitle: Optional[str]
    details: Tuple[Tuple[str, str], ...]
    themes: Tuple[str, ...] = ()
    notes: Optional[str] = None


@dataclass(frozen=True)
class TimelineViewModel:
    sections: Tuple[SectionViewModel, ...]
    periods: Tuple[str, ...]
    themes: Tuple[str, ...]
    filters: TimelineFilters = field(default_factory=TimelineFilters)

    @property
    def is_empty(self) -> bool:
        return not self.sections


def chapter_label(surah: SurahItem) -> str:
    return ", ".join(str(number) for number in surah.chapter_numbers)


def surah_card(placed: PlacedSurah) -> SurahCardViewModel:
    surah = placed.surah
    return SurahCardViewModel(
        revelation_order=surah.revelation_order,
        chapter_number=surah.primary_chapter,
        name_en=surah.name_en,
        name_ar=surah.name_ar,
        chapter_label=chapter_label(surah),
        verses_range=surah.verses_range,
        verses_count=surah.api_data.verses_count if surah.api_data else None,
        themes=tuple(surah.themes[:CARD_THEME_LIMIT]),
        tooltip=surah.notes,
    )


def event_card(placed: PlacedEvent) -> EventCardViewModel:
    event = placed.event
    return EventCardViewModel(
        name=event.name,
        year_label=f"{event.year_ce} CE",
        location=event.location,
        tooltip=event.notes,
    )


def section_view(section: TimelineSection) -> SectionViewModel:
    return SectionViewModel(
        year=section.year,
        event=event_card(section.event) if section.event else None,
        surahs=tuple(surah_card(placed) for placed in section.surahs),
    )


def info_panel(item: Union[SurahItem, EventItem]) -> InfoPanelViewModel:
    if isinstance(item, SurahItem):
        details: List[Tuple[str, str]] = [
            ("Revelation Order", f"#{item.revelation_order}"),
            ("Chapter", chapter_label(item)),
            ("Location", item.location),
        ]
        if item.verses_range:
            details.append(("Verses", item.verses_range))
        if item.api_data:
            details.append(("Total Verses", str(item.api_data.verses_count)))
            if item.api_data.pages:
                details.append(("Pages", ", ".join(str(page) for page in item.api_data.pages)))
            if item.api_data.translated_name:
                details.append(("Translation", item.api_data.translated_name))
        return InfoPanelViewModel(
            title=item.name_en,
            subtitle=item.name_ar,
            details=tuple(details),
            themes=tuple(item.themes),
            notes=item.notes,
        )
    if isinstance(item, EventItem):
        details = [("Year", f"{item.year_ce} CE"), ("Location", item.location)]
        if item.linked_surahs:
            details.append(("Related Surahs", ", ".join(str(number) for number in item.linked_surahs)))
        return InfoPanelViewModel(title=item.name, subtitle=None, details=tuple(details), notes=item.notes)
    raise TypeError(f"Unsupported timeline item: {type(item).__name__}")


def timeline_view(
    document: TimelineDocument,
    filters: Optional[TimelineFilters] = None,
    mode: GroupingMode = "positional",
) -> TimelineViewModel:
    filters = filters or TimelineFilters()
    options = filter_options(document)
    return TimelineViewModel(
        sections=tuple(section_view(section) for section in query_timeline(document, filters, mode)),
        periods=tuple(options.periods),
        themes=tuple(options.themes),
        filters=filters,
    )
