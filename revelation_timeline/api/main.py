"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from revelation_timeline.client.quran_client import QuranContentClient
from revelation_timeline.config import settings
from revelation_timeline.data import DETAILED_DOCUMENT, SUMMARY_PAYLOAD
from revelation_timeline.errors import (
    ChapterNotFoundError,
    ClientNotConfiguredError,
    ContentClientError,
    InvalidChapterError,
    parse_chapter_number,
)
from revelation_timeline.models.api import (
    AllVersesResponse,
    FilterOptions,
    HealthResponse,
    PaginatedVersesResponse,
    SectionsResponse,
)
from revelation_timeline.models.sections import ALL, GroupingMode, TimelineFilters
from revelation_timeline.query.timeline_filter import filter_options, query_timeline
from revelation_timeline.services.enrichment import SurahEnrichmentService
from revelation_timeline.services.verses import build_paginated_response, fetch_all_verses

logger = logging.getLogger(__name__)

ENRICHMENT_STATUS_HEADER = "X-Enrichment-Status"

content_client = QuranContentClient()
enrichment_service = SurahEnrichmentService(content_client)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if not content_client.is_configured:
        logger.warning(
            "QURAN_CLIENT_ID/QURAN_CLIENT_SECRET not set; timeline enrichment and verse reading are disabled."
        )
    yield
    await content_client.aclose()


app = FastAPI(
    title="Revelation Timeline",
    description="Chronological timeline of Qur'anic revelation and the Sirah",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=[ENRICHMENT_STATUS_HEADER],
)


def get_content_client() -> QuranContentClient:
    return content_client


def get_enrichment_service() -> SurahEnrichmentService:
    return enrichment_service


def _chapter_or_400(raw: str) -> int:
    try:
        return parse_chapter_number(raw)
    except InvalidChapterError as exc:
        raise HTTPException(status_code=400, detail="Invalid chapter number") from exc


def _positive_int_or_400(raw: Optional[str], default: int, name: str) -> int:
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid {name}") from exc
    if value < 1:
        raise HTTPException(status_code=400, detail=f"Invalid {name}")
    return value


def _upstream_failure(exc: ContentClientError, chapter_number: int) -> HTTPException:
    if isinstance(exc, ClientNotConfiguredError):
        return HTTPException(status_code=503, detail="Content API credentials are not configured")
    if isinstance(exc, ChapterNotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    logger.error("Error fetching verses for chapter %s: %s", chapter_number, exc)
    return HTTPException(status_code=500, detail="Failed to fetch chapter verses")


@app.get("/api/health", response_model=HealthResponse)
def health(service: SurahEnrichmentService = Depends(get_enrichment_service)) -> HealthResponse:
    """Liveness check; also reports whether enrichment can run."""
    return HealthResponse(ok=True, enrichment="enabled" if service.enabled else "disabled")


@app.get("/api/timeline")
def timeline() -> dict:
    return SUMMARY_PAYLOAD.to_payload()


@app.get("/api/detailed-timeline")
def detailed_timeline() -> dict:
    return DETAILED_DOCUMENT.to_payload()


@app.get("/api/detailed-timeline-enriched")
async def detailed_timeline_enriched(
    service: SurahEnrichmentService = Depends(get_enrichment_service),
) -> JSONResponse:
    """Detailed timeline with live chapter metadata; the static document on failure."""
    try:
        document = await service.enrich_document(DETAILED_DOCUMENT)
        state = service.last_status.state if service.last_status else "failed"
    except Exception as exc:  # pragma: no cover - enrich_document already degrades
        logger.error("Error serving enriched timeline: %s", exc)
        document, state = DETAILED_DOCUMENT, "failed"
    return JSONResponse(content=document.to_payload(), headers={ENRICHMENT_STATUS_HEADER: state})


@app.get("/api/detailed-timeline/sections", response_model=SectionsResponse)
async def timeline_sections(
    period: str = ALL,
    theme: str = ALL,
    search: str = "",
    grouping: GroupingMode = "positional",
    enriched: bool = False,
    service: SurahEnrichmentService = Depends(get_enrichment_service),
) -> SectionsResponse:
    """Grouped and filtered timeline, ready for display."""
    document = DETAILED_DOCUMENT
    if enriched:
        document = await service.enrich_document(document)
    sections = query_timeline(
        document,
        TimelineFilters(period=period, theme=theme, search=search.strip()),
        mode=grouping,
    )
    return SectionsResponse(sections=sections, total_sections=len(sections))


@app.get("/api/detailed-timeline/filters", response_model=FilterOptions)
def timeline_filters() -> FilterOptions:
    return filter_options(DETAILED_DOCUMENT)


@app.get("/api/chapters/{chapter_number}/verses/all", response_model=AllVersesResponse)
async def chapter_verses_all(
    chapter_number: str,
    client: QuranContentClient = Depends(get_content_client),
) -> AllVersesResponse:
    """Every verse of a chapter in one response, for client-side paging."""
    number = _chapter_or_400(chapter_number)
    try:
        return await fetch_all_verses(client, number)
    except ContentClientError as exc:
        raise _upstream_failure(exc, number) from exc


@app.get("/api/chapters/{chapter_number}/verses", response_model=PaginatedVersesResponse)
async def chapter_verses(
    chapter_number: str,
    page: Optional[str] = Query(default=None),
    per_page: Optional[str] = Query(default=None, alias="perPage"),
    client: QuranContentClient = Depends(get_content_client),
) -> PaginatedVersesResponse:
    """Legacy paginated verses endpoint."""
    number = _chapter_or_400(chapter_number)
    page_number = _positive_int_or_400(page, 1, "page")
    page_size = min(
        _positive_int_or_400(per_page, settings.verses_per_page, "perPage"),
        settings.quran_max_per_page,
    )
    try:
        chapter = await client.get_chapter_info(number)
        verse_page = await client.get_chapter_verses(number, page=page_number, per_page=page_size)
    except ContentClientError as exc:
        raise _upstream_failure(exc, number) from exc
    return build_paginated_response(chapter, verse_page.verses, page_number, page_size)
