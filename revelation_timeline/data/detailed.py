"""Detailed revelation timeline compiled into the process."""

from __future__ import annotations

from revelation_timeline.models.timeline import TimelineDocument

DETAILED_TIMELINE = {
    "version": "1.0.2",
    "stages": [
        {
            "id": "stage-1",
            "name": "The Awakening — Private Revelation",
            "period": "Makkah",
            "timespan_ce": "610–613",
            "description": "Spiritual preparation before public preaching.",
            "items": [
                {
                    "type": "surah",
                    "revelation_order": 1,
                    "name_en": "Al-‘Alaq",
                    "name_ar": "العلق",
                    "chapter_number": 96,
                    "verses_range": "1–5 (initial)",
                    "location": "Cave of Hira, Makkah",
                    "themes": ["Knowledge", "Creation", "Faith"],
                    "notes": (
                        "The first revealed verses command the Prophet ﷺ to read in the name of his Lord "
                        "who created mankind from a clinging clot, introducing knowledge, the pen and "
                        "divine teaching."
                    ),
                },
                {
                    "type": "surah",
                    "revelation_order": 2,
                    "name_en": "Al-Qalam",
                    "name_ar": "القلم",
                    "chapter_number": 68,
                    "location": "Makkah",
                    "themes": ["Character", "Patience", "Consolation"],
                    "notes": (
                        "Opens with the oath by the pen, affirms the Prophet’s noble character and "
                        "answers the accusation of madness with the parable of the people of the garden."
                    ),
                },
                {
                    "type": "surah",
                    "revelation_order": 3,
                    "name_en": "Al-Muzzammil",
                    "name_ar": "المزمل",
                    "chapter_number": 73,
                    "location": "Makkah",
                    "themes": ["Night Prayer", "Discipline", "Preparation"],
                    "notes": (
                        "Commands the night prayer and calm recitation as training to bear the weight "
                        "of revelation, urging patience with the words of opponents."
                    ),
                },
                {
                    "type": "surah",
                    "revelation_order": 4,
                    "name_en": "Al-Muddaththir",
                    "name_ar": "المدثر",
                    "chapter_number": 74,
                    "location": "Makkah",
                    "themes": ["Warning", "Purification", "Patience"],
                    "notes": (
                        "“Arise and warn”: the transition from private preparation to the public call, "
                        "with the command to magnify the Lord and purify oneself."
                    ),
                },
                {
                    "type": "surah",
                    "revelation_order": 5,
                    "name_en": "Al-Fatihah",
                    "name_ar": "الفاتحة",
                    "chapter_number": 1,
                    "location": "Makkah",
                    "themes": ["Guidance", "Supplication", "Mercy"],
                    "notes": (
                        "The Opening, recited in every unit of prayer: praise of the Lord of the worlds "
                        "and the plea for guidance upon the straight path."
                    ),
                },
                {
                    "type": "event",
                    "name": "First Revelation",
                    "year_ce": 610,
                    "location": "Cave of Hira, Jabal al-Nour",
                    "linked_surahs": [96],
                    "notes": (
                        "In Ramadan, while meditating in the Cave of Hira, the Prophet ﷺ was commanded "
                        "by Jibril to read. Khadijah (RA) comforted him and Waraqah ibn Nawfal affirmed "
                        "his prophethood."
                    ),
                },
            ],
        },
        {
            "id": "stage-2",
            "name": "Early Public Call",
            "period": "Makkah",
            "timespan_ce": "613–616",
            "description": "Beginning of open preaching; emphasis on faith and morals.",
            "items": [
                {
                    "type": "surah",
                    "revelation_order": 6,
                    "name_en": "Al-Lahab",
                    "name_ar": "المسد",
                    "chapter_number": 111,
                    "location": "Makkah",
                    "themes": ["Opposition", "Accountability"],
                    "notes": (
                        "Revealed about Abu Lahab and his wife, leaders of the opposition; lineage and "
                        "status do not save anyone from divine justice."
                    ),
                },
                {
                    "type": "surah",
                    "revelation_order": 7,
                    "name_en": "At-Takwir",
                    "name_ar": "التكوير",
                    "chapter_number": 81,
                    "location": "Makkah",
                    "themes": ["Judgment Day", "Cosmic Signs"],
                    "notes": "The unravelling of the cosmos on the Day of Judgment and personal accountability.",
                },
                {
                    "type": "surah",
                    "revelation_order": 8,
                    "name_en": "Al-A‘la",
                    "name_ar": "الأعلى",
                    "chapter_number": 87,
                    "location": "Makkah",
                    "themes": ["Remembrance", "Purification", "Divine Order"],
                    "notes": "Glorify the name of the Most High, who creates, proportions and guides.",
                },
                {
                    "type": "surah",
                    "revelation_order": 9,
                    "name_en": "Al-Layl",
                    "name_ar": "الليل",
                    "chapter_number": 92,
                    "location": "Makkah",
                    "themes": ["Generosity vs. Miserliness", "Moral Choice"],
                    "notes": "Contrasts those who give and fear God with those who withhold and deny.",
                },
                {
                    "type": "surah",
                    "revelation_order": 10,
                    "name_en": "Ad-Duhaa & Ash-Sharh",
                    "name_ar": "الضحى • الشرح",
                    "chapter_number": [93, 94],
                    "location": "Makkah",
                    "themes": ["Consolation", "Hope", "Divine Care"],
                    "notes": "Twin consolations after a pause in revelation: with hardship comes ease.",
                },
                {
                    "type": "event",
                    "name": "Public Call Begins",
                    "year_ce": 613,
                    "location": "Makkah",
                    "linked_surahs": [74],
                    "notes": (
                        "The Prophet ﷺ ascended Mount Safa and called his people publicly to worship "
                        "Allah alone, meeting mockery and hostility from the Quraysh leaders."
                    ),
                },
            ],
        },
        {
            "id": "stage-3",
            "name": "Opposition & Perseverance",
            "period": "Makkah",
            "timespan_ce": "616–620",
            "description": "Persecution intensifies; revelation strengthens resolve.",
            "items": [
                {
                    "type": "surah",
                    "revelation_order": 11,
                    "name_en": "Al-An‘am",
                    "name_ar": "الأنعام",
                    "chapter_number": 6,
                    "location": "Makkah",
                    "themes": ["Monotheism", "Signs of God", "Refutation of Idolatry"],
                },
                {
                    "type": "surah",
                    "revelation_order": 12,
                    "name_en": "Al-Kahf",
                    "name_ar": "الكهف",
                    "chapter_number": 18,
                    "location": "Makkah",
                    "themes": ["Trials of Faith", "Patience", "Reliance on God"],
                },
                {
                    "type": "surah",
                    "revelation_order": 13,
                    "name_en": "Maryam",
                    "name_ar": "مريم",
                    "chapter_number": 19,
                    "location": "Makkah",
                    "themes": ["Prophetic Stories", "Mercy", "Resurrection"],
                },
                {
                    "type": "surah",
                    "revelation_order": 14,
                    "name_en": "Ta-Ha",
                    "name_ar": "طه",
                    "chapter_number": 20,
                    "location": "Makkah",
                    "themes": ["Story of Musa", "Consolation", "Steadfastness"],
                },
                {
                    "type": "event",
                    "name": "Social & Economic Boycott",
                    "year_ce": 616,
                    "location": "Makkah",
                    "linked_surahs": [6, 18, 19, 20],
                    "notes": (
                        "Quraysh boycotted Banu Hashim and Banu al-Muttalib, confining the Muslims in "
                        "Shi‘b Abi Talib for about three years."
                    ),
                },
            ],
        },
        {
            "id": "stage-4",
            "name": "Hope and Transition",
            "period": "Late Makkah → Pre-Hijrah",
            "timespan_ce": "620–622",
            "description": "Renewed hope; preparation for migration to Madinah.",
            "items": [
                {
                    "type": "surah",
                    "revelation_order": 15,
                    "name_en": "Al-Isra’ (Bani Isra’il)",
                    "name_ar": "الإسراء",
                    "chapter_number": 17,
                    "location": "Makkah",
                    "themes": ["Night Journey", "Ethics", "Discipline"],
                },
                {
                    "type": "surah",
                    "revelation_order": 16,
                    "name_en": "Ya-Sin",
                    "name_ar": "يس",
                    "chapter_number": 36,
                    "location": "Makkah",
                    "themes": ["Warning & Mercy", "Centrality of the Qur’an"],
                },
                {
                    "type": "surah",
                    "revelation_order": 17,
                    "name_en": "Az-Zumar",
                    "name_ar": "الزمر",
                    "chapter_number": 39,
                    "location": "Makkah",
                    "themes": ["Sincerity", "Tawhid", "Resurrection"],
                    "notes": (
                        "Worship done sincerely for Allah alone; despairing sinners are told not to "
                        "lose hope in His mercy."
                    ),
                },
                {
                    "type": "event",
                    "name": "Isra’ and Mi‘raj (Night Journey & Ascension)",
                    "year_ce": 620,
                    "location": "From Makkah to Jerusalem; then Heavens",
                    "linked_surahs": [17],
                    "notes": (
                        "In the Year of Sorrow the Prophet ﷺ journeyed by night to Jerusalem and "
                        "ascended through the heavens, where the five daily prayers were prescribed."
                    ),
                },
                {
                    "type": "event",
                    "name": "Hijrah (Migration to Madinah)",
                    "year_ce": 622,
                    "location": "Makkah → Madinah",
                    "linked_surahs": [],
                    "notes": (
                        "After the second Pledge of Aqabah the Prophet ﷺ and Abu Bakr left Makkah, hid "
                        "in the Cave of Thawr and reached Yathrib; the start of the Islamic calendar."
                    ),
                },
            ],
        },
    ],
    "metadata": {
        "generated_at": "2025-10-29T00:00:00Z",
        "notes": (
            "Sequence reflects commonly cited early-revelation ordering and themes; precise chronology "
            "among some Makkan surahs can vary by source."
        ),
    },
}

DETAILED_DOCUMENT = TimelineDocument.model_validate(DETAILED_TIMELINE)
