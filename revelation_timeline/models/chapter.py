"""Chapter and verse models mirroring the content API payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class TranslatedName(BaseModel):
    language_name: str = "english"
    name: str = ""


class ChapterInfo(BaseModel):
    """Chapter metadata as returned by ``/chapters``."""

    id: int
    revelation_place: str = ""
    revelation_order: int = 0
    bismillah_pre: bool = True
    name_simple: str
    name_complex: str = ""
    name_arabic: str = ""
    verses_count: int
    pages: List[int] = Field(default_factory=list)
    translated_name: TranslatedName = Field(default_factory=TranslatedName)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "ChapterInfo":
        translated = payload.get("translated_name") or {}
        return cls(
            id=payload["id"],
            revelation_place=payload.get("revelation_place") or "",
            revelation_order=payload.get("revelation_order") or 0,
            bismillah_pre=bool(payload.get("bismillah_pre", True)),
            name_simple=payload.get("name_simple") or "",
            name_complex=payload.get("name_complex") or payload.get("name_simple") or "",
            name_arabic=payload.get("name_arabic") or "",
            verses_count=payload.get("verses_count") or 0,
            pages=payload.get("pages") or [],
            translated_name=TranslatedName(
                language_name=translated.get("language_name") or "english",
                name=translated.get("name") or payload.get("name_simple") or "",
            ),
        )


class VerseWord(BaseModel):
    char_type_name: Optional[str] = None
    text: Optional[str] = None
    code_v1: Optional[str] = None


class VerseTranslation(BaseModel):
    text: str
    resource_name: Optional[str] = None
    resource_id: Optional[int] = None


class Verse(BaseModel):
    """A single verse with its attached translations."""

    id: int
    verse_number: int
    verse_key: str
    text_uthmani: Optional[str] = None
    text_imlaei_simple: Optional[str] = None
    translations: List[VerseTranslation] = Field(default_factory=list)
    words: List[VerseWord] = Field(default_factory=list)


class UpstreamPagination(BaseModel):
    per_page: int = 0
    current_page: int = 1
    next_page: Optional[int] = None
    total_pages: int = 1
    total_records: int = 0


class VersePage(BaseModel):
    verses: List[Verse] = Field(default_factory=list)
    pagination: UpstreamPagination = Field(default_factory=UpstreamPagination)
