"""Enrichment and verse shaping services."""

from .enrichment import ChapterCache, EnrichmentStatus, SurahEnrichmentService, apply_chapter_info
from .verses import (
    build_all_verses_response,
    build_paginated_response,
    clean_html,
    fetch_all_verses,
    format_verse,
)

__all__ = [
    "ChapterCache",
    "EnrichmentStatus",
    "SurahEnrichmentService",
    "apply_chapter_info",
    "build_all_verses_response",
    "build_paginated_response",
    "clean_html",
    "fetch_all_verses",
    "format_verse",
]
