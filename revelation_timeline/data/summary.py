"""Summary timeline (Hijri spans, milestones, revelations) for ``/api/timeline``."""

from __future__ import annotations

from revelation_timeline.models.summary import TimelinePayload

SUMMARY_TIMELINE = {
    "meccan": {"startAH": -13, "endAH": 0},
    "medinan": {"startAH": 1, "endAH": 11},
    "events": [
        {
            "id": "first-revelation",
            "title": "First Revelation in the Cave of Hira",
            "type": "revelation",
            "yearAH": -13,
            "month": "Ramadan",
            "location": "Cave of Hira",
            "summary": "Jibril brings the first verses of Al-‘Alaq.",
        },
        {
            "id": "public-call",
            "title": "The public call from Mount Safa",
            "type": "milestone",
            "yearAH": -10,
            "location": "Makkah",
            "summary": "Open preaching begins after the command to arise and warn.",
        },
        {
            "id": "boycott",
            "title": "Boycott of Banu Hashim",
            "type": "milestone",
            "yearAH": -7,
            "location": "Shi‘b Abi Talib",
            "summary": "Three years of social and economic isolation.",
        },
        {
            "id": "isra-miraj",
            "title": "Isra’ and Mi‘raj",
            "type": "milestone",
            "yearAH": -1,
            "location": "Makkah → Jerusalem",
            "summary": "The Night Journey and Ascension; the five prayers are prescribed.",
        },
        {
            "id": "hijrah",
            "title": "Hijrah to Madinah",
            "type": "migration",
            "yearAH": 1,
            "month": "Rabi‘ al-Awwal",
            "location": "Makkah → Madinah",
            "summary": "Migration to Yathrib and the start of the Islamic calendar.",
        },
        {
            "id": "badr",
            "title": "Battle of Badr",
            "type": "battle",
            "yearAH": 2,
            "month": "Ramadan",
            "location": "Badr",
            "summary": "First decisive encounter with the Quraysh.",
        },
        {
            "id": "hudaybiyyah",
            "title": "Treaty of Hudaybiyyah",
            "type": "treaty",
            "yearAH": 6,
            "month": "Dhu al-Qa‘dah",
            "location": "Hudaybiyyah",
            "summary": "A ten-year truce described in revelation as a clear victory.",
        },
    ],
    "revelations": [
        {
            "surahId": 96,
            "surahName": "Al-‘Alaq",
            "place": "meccan",
            "revelationOrder": 1,
            "approxYearAH": -13,
            "linkedEventIds": ["first-revelation"],
            "asbab": [
                {
                    "ayahRange": "96:1-5",
                    "summary": "The first words revealed: “Read in the name of your Lord.”",
                    "sources": ["Sahih al-Bukhari 3"],
                    "confidence": "supported",
                }
            ],
        },
        {
            "surahId": 74,
            "surahName": "Al-Muddaththir",
            "place": "meccan",
            "revelationOrder": 4,
            "approxYearAH": -10,
            "linkedEventIds": ["public-call"],
        },
        {
            "surahId": 17,
            "surahName": "Al-Isra’",
            "place": "meccan",
            "revelationOrder": 50,
            "approxYearAH": -1,
            "linkedEventIds": ["isra-miraj"],
        },
        {
            "surahId": 8,
            "surahName": "Al-Anfal",
            "place": "medinan",
            "revelationOrder": 88,
            "approxYearAH": 2,
            "linkedEventIds": ["badr"],
        },
        {
            "surahId": 48,
            "surahName": "Al-Fath",
            "place": "medinan",
            "revelationOrder": 111,
            "approxYearAH": 6,
            "linkedEventIds": ["hudaybiyyah"],
            "asbab": [
                {
                    "ayahRange": "48:1",
                    "summary": "Revealed on the return journey from Hudaybiyyah.",
                    "sources": ["Sahih al-Bukhari 4177"],
                    "confidence": "supported",
                }
            ],
        },
    ],
}

SUMMARY_PAYLOAD = TimelinePayload.model_validate(SUMMARY_TIMELINE)
