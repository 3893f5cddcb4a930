"""Grouping and filtering of the detailed timeline."""

from __future__ import annotations

import pytest

from revelation_timeline.data import DETAILED_DOCUMENT
from revelation_timeline.models.sections import TimelineFilters
from revelation_timeline.models.timeline import TimelineDocument
from revelation_timeline.query import build_sections, filter_options, filter_sections, flatten, query_timeline


def orders(section):
    return [placed.surah.revelation_order for placed in section.surahs]


class TestGrouping:

    def test_two_events_four_surahs(self, small_document):
        sections = build_sections(small_document)

        assert [(s.event.event.year_ce, orders(s)) for s in sections] == [
            (610, [1, 2]),
            (622, [3, 4]),
        ]
        assert all(section.event is not None for section in sections)

    def test_flatten_sorts_across_stages(self, small_document):
        events, surahs = flatten(small_document)

        assert [placed.event.year_ce for placed in events] == [610, 622]
        assert [placed.surah.revelation_order for placed in surahs] == [1, 2, 3, 4]
        assert surahs[2].stage_id == "stage-b"
        assert surahs[2].stage_period == "Medinah"

    def test_no_events_yields_no_sections(self):
        document = TimelineDocument.model_validate(
            {
                "version": "x",
                "stages": [
                    {
                        "id": "s",
                        "name": "Only surahs",
                        "period": "Makkah",
                        "timespan_ce": "610",
                        "description": "",
                        "items": [
                            {
                                "type": "surah",
                                "revelation_order": 1,
                                "name_en": "Al-Alaq",
                                "name_ar": "العلق",
                                "chapter_number": 96,
                                "location": "Makkah",
                                "themes": [],
                            }
                        ],
                    }
                ],
                "metadata": {"generated_at": "now"},
            }
        )

        assert build_sections(document) == []
        assert build_sections(document, mode="linked") == []
        assert query_timeline(document) == []

    @pytest.mark.parametrize("mode", ["positional", "linked"])
    def test_sections_partition_every_surah(self, mode):
        sections = build_sections(DETAILED_DOCUMENT, mode=mode)
        placed = [order for section in sections for order in orders(section)]
        expected = sorted(surah.revelation_order for surah in DETAILED_DOCUMENT.surahs())

        assert sorted(placed) == expected
        assert len(placed) == len(set(placed))

    def test_positional_split_of_detailed_document(self):
        sections = build_sections(DETAILED_DOCUMENT)

        assert [section.year for section in sections] == [610, 613, 616, 620, 622]
        assert [len(section.surahs) for section in sections] == [4, 4, 4, 4, 1]

    def test_linked_mode_follows_event_links(self):
        sections = build_sections(DETAILED_DOCUMENT, mode="linked")
        by_year = {section.year: orders(section) for section in sections}

        assert by_year[610] == [1]
        assert by_year[613] == [4]
        assert by_year[616] == [11, 12, 13, 14]
        assert by_year[620] == [15]
        assert by_year[622] == []
        trailing = sections[-1]
        assert trailing.event is None
        assert trailing.year == 623
        assert orders(trailing) == [2, 3, 5, 6, 7, 8, 9, 10, 16, 17]


class TestFilters:

    def test_theme_filter_is_exact_membership(self, small_document):
        sections = query_timeline(small_document, TimelineFilters(theme="Patience"))
        kept = [order for section in sections for order in orders(section)]

        assert 2 in kept  # Character, Patience, Consolation
        assert 3 not in kept  # Night Prayer, Discipline, Preparation
        # events are not subject to the theme filter
        assert [section.event.event.name for section in sections] == ["First Revelation", "Hijrah"]

    def test_period_filter_drops_event_but_filters_surahs_independently(self, small_document):
        sections = query_timeline(small_document, TimelineFilters(period="makkah"))

        assert len(sections) == 1
        assert sections[0].event.event.name == "First Revelation"
        assert orders(sections[0]) == [1, 2]

        medinah = query_timeline(small_document, TimelineFilters(period="Medinah"))
        assert [(s.event.event.name, orders(s)) for s in medinah] == [("Hijrah", [3, 4])]

    def test_period_filter_keeps_surahs_when_event_is_excluded(self):
        document = TimelineDocument.model_validate(
            {
                "version": "x",
                "stages": [
                    {
                        "id": "a",
                        "name": "A",
                        "period": "Makkah",
                        "timespan_ce": "620",
                        "description": "",
                        "items": [
                            {"type": "event", "name": "Isra", "year_ce": 620, "location": "Makkah"},
                        ],
                    },
                    {
                        "id": "b",
                        "name": "B",
                        "period": "Medinah",
                        "timespan_ce": "624",
                        "description": "",
                        "items": [
                            {
                                "type": "surah",
                                "revelation_order": 87,
                                "name_en": "Al-Baqarah",
                                "name_ar": "البقرة",
                                "chapter_number": 2,
                                "location": "Medinah",
                                "themes": ["Law"],
                            }
                        ],
                    },
                ],
                "metadata": {"generated_at": "now"},
            }
        )

        sections = query_timeline(document, TimelineFilters(period="Medinah"))

        assert len(sections) == 1
        assert sections[0].event is None
        assert orders(sections[0]) == [87]

    def test_search_matches_event_location_and_surah_fields(self, small_document):
        by_location = query_timeline(small_document, TimelineFilters(search="HIRA"))
        assert [s.event.event.name for s in by_location if s.event] == ["First Revelation"]

        by_theme = query_timeline(small_document, TimelineFilters(search="discipline"))
        kept = [order for section in by_theme for order in orders(section)]
        assert kept == [3]
        assert all(section.event is None for section in by_theme)

        by_arabic = query_timeline(small_document, TimelineFilters(search="سورة"))
        assert sum(len(section.surahs) for section in by_arabic) == 4

    def test_sections_without_matches_are_dropped(self, small_document):
        assert query_timeline(small_document, TimelineFilters(search="no such thing")) == []

    @pytest.mark.parametrize(
        "filters",
        [
            TimelineFilters(),
            TimelineFilters(period="Makkah"),
            TimelineFilters(theme="Patience"),
            TimelineFilters(search="al-"),
            TimelineFilters(period="Medinah", theme="Warning", search="mud"),
        ],
    )
    def test_filtering_is_idempotent(self, filters):
        sections = build_sections(DETAILED_DOCUMENT)
        once = filter_sections(sections, filters)

        assert filter_sections(once, filters) == once

    def test_filter_options_follow_document_order(self):
        options = filter_options(DETAILED_DOCUMENT)

        assert options.periods == ["All", "Makkah", "Late Makkah → Pre-Hijrah"]
        assert options.themes[:4] == ["All", "Knowledge", "Creation", "Faith"]
        assert len(options.themes) == len(set(options.themes))
        assert "Patience" in options.themes
