"""Timeline document validation and the bundled data."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from revelation_timeline.data import DETAILED_DOCUMENT, SUMMARY_PAYLOAD
from revelation_timeline.errors import InvalidChapterError, parse_chapter_number
from revelation_timeline.models.chapter import ChapterInfo
from revelation_timeline.models.timeline import EventItem, SurahItem, TimelineDocument


def document(items, version="t"):
    return {
        "version": version,
        "stages": [
            {
                "id": "s",
                "name": "Stage",
                "period": "Makkah",
                "timespan_ce": "610",
                "description": "",
                "items": items,
            }
        ],
        "metadata": {"generated_at": "now"},
    }


def surah(order, chapter=1):
    return {
        "type": "surah",
        "revelation_order": order,
        "name_en": f"Surah {order}",
        "name_ar": "سورة",
        "chapter_number": chapter,
        "location": "Makkah",
    }


class TestTimelineDocument:

    def test_items_are_discriminated_by_type(self):
        doc = TimelineDocument.model_validate(
            document([surah(1), {"type": "event", "name": "Hijrah", "year_ce": 622, "location": "Madinah"}])
        )

        items = doc.stages[0].items
        assert isinstance(items[0], SurahItem)
        assert isinstance(items[1], EventItem)
        assert items[1].linked_surahs == []

    def test_unknown_item_type(self):
        with pytest.raises(ValidationError):
            TimelineDocument.model_validate(document([{"type": "battle", "name": "Badr"}]))

    def test_duplicate_revelation_order(self):
        with pytest.raises(ValidationError, match="Duplicate surah revelation order 1"):
            TimelineDocument.model_validate(document([surah(1, 96), surah(1, 68)]))

    def test_duplicate_event(self):
        event = {"type": "event", "name": "Hijrah", "year_ce": 622, "location": "Madinah"}

        with pytest.raises(ValidationError, match="Duplicate event"):
            TimelineDocument.model_validate(document([event, dict(event)]))

    def test_empty_chapter_list(self):
        with pytest.raises(ValidationError):
            SurahItem.model_validate(surah(1, []))

    def test_chapter_list(self):
        item = SurahItem.model_validate(surah(10, [93, 94]))

        assert item.chapter_numbers == [93, 94]
        assert item.primary_chapter == 93

    def test_payload_omits_unset_fields(self):
        payload = TimelineDocument.model_validate(document([surah(1)])).to_payload()

        item = payload["stages"][0]["items"][0]
        assert "api_data" not in item
        assert "verses_range" not in item
        assert item["chapter_number"] == 1


class TestBundledData:

    def test_detailed_document(self):
        surahs = DETAILED_DOCUMENT.surahs()

        assert DETAILED_DOCUMENT.version == "1.0.2"
        assert len(DETAILED_DOCUMENT.stages) == 4
        assert sorted(s.revelation_order for s in surahs) == list(range(1, 18))
        assert [e.year_ce for e in DETAILED_DOCUMENT.events()] == [610, 613, 616, 620, 622]
        assert all(surah.api_data is None for surah in surahs)

    def test_summary_payload(self):
        assert SUMMARY_PAYLOAD.meccan.start_ah == -13
        assert SUMMARY_PAYLOAD.medinan.end_ah == 11
        assert len(SUMMARY_PAYLOAD.revelations) == 5


class TestChapterNumbers:

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("114", 114), (57, 57), (" 2 ", 2)])
    def test_valid(self, raw, expected):
        assert parse_chapter_number(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "115", "abc", "", "1.5", None, True, "1_0", "٣", "+", "1e1"])
    def test_invalid(self, raw):
        with pytest.raises(InvalidChapterError):
            parse_chapter_number(raw)

    def test_chapter_from_api_fills_gaps(self):
        chapter = ChapterInfo.from_api({"id": 9, "name_simple": "At-Tawbah", "verses_count": 129, "bismillah_pre": False})

        assert chapter.name_complex == "At-Tawbah"
        assert chapter.translated_name.name == "At-Tawbah"
        assert chapter.bismillah_pre is False
        assert chapter.pages == []
