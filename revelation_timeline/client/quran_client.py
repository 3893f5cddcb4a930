"""Async client for the Quran Foundation content API (OAuth2 client credentials)."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import httpx
from pydantic import ValidationError

from revelation_timeline.config import settings
from revelation_timeline.errors import (
    ChapterNotFoundError,
    ClientNotConfiguredError,
    UpstreamAuthError,
    UpstreamContentError,
)
from revelation_timeline.models.chapter import ChapterInfo, UpstreamPagination, Verse, VersePage

logger = logging.getLogger(__name__)

VERSE_FIELDS = "text_uthmani,text_imlaei_simple"
# Raised while turning upstream JSON into models.
MALFORMED = (KeyError, TypeError, AttributeError, ValueError, ValidationError)


@dataclass
class AccessToken:
    value: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


class QuranContentClient:
    """Fetches chapter metadata and verses, handling token exchange transparently."""

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        oauth_url: Optional[str] = None,
        translation_id: Optional[int] = None,
        safety_margin: Optional[int] = None,
        max_per_page: Optional[int] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.client_id = client_id if client_id is not None else settings.quran_client_id
        self.client_secret = client_secret if client_secret is not None else settings.quran_client_secret
        self.base_url = (base_url or settings.quran_api_base_url).rstrip("/")
        self.oauth_url = oauth_url or settings.quran_oauth_url
        self.translation_id = translation_id or settings.quran_translation_id
        self.safety_margin = settings.quran_token_safety_margin if safety_margin is None else safety_margin
        self.max_per_page = max_per_page or settings.quran_max_per_page
        self.http = http_client or httpx.AsyncClient(timeout=settings.quran_http_timeout)
        self._clock = clock
        self._token: Optional[AccessToken] = None
        self._token_lock = asyncio.Lock()

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def _get_access_token(self) -> str:
        if not self.is_configured:
            raise ClientNotConfiguredError("QURAN_CLIENT_ID and QURAN_CLIENT_SECRET are not configured.")

        async with self._token_lock:
            if self._token and self._token.is_valid(self._clock()):
                return self._token.value

            try:
                response = await self.http.post(
                    self.oauth_url,
                    auth=(self.client_id, self.client_secret),
                    data={"grant_type": "client_credentials", "scope": "content"},
                )
            except httpx.HTTPError as exc:
                raise UpstreamAuthError(f"Token request failed: {exc}") from exc

            if response.status_code != 200:
                raise UpstreamAuthError(
                    f"Failed to get access token: {response.status_code} {response.reason_phrase} - {response.text}"
                )

            try:
                payload = response.json()
                token = payload.get("access_token")
                expires_in = int(payload.get("expires_in") or 0)
            except (ValueError, TypeError, AttributeError) as exc:
                raise UpstreamAuthError(f"Malformed token response: {exc}") from exc
            if not token:
                raise UpstreamAuthError("Token response did not include an access_token.")
            self._token = AccessToken(
                value=token,
                expires_at=self._clock() + expires_in - self.safety_margin,
            )
            logger.info("Acquired content API token valid for %ss", expires_in)
            return token

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        token = await self._get_access_token()
        try:
            return await self.http.get(
                f"{self.base_url}{path}",
                params=params,
                headers={
                    "x-auth-token": token,
                    "x-client-id": self.client_id,
                    "Accept": "application/json",
                },
            )
        except httpx.HTTPError as exc:
            raise UpstreamContentError(f"Request to {path} failed: {exc}") from exc

    @staticmethod
    def _check(response: httpx.Response, path: str) -> Dict[str, Any]:
        if response.status_code != 200:
            raise UpstreamContentError(
                f"API request to {path} failed: {response.status_code} {response.reason_phrase}"
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamContentError(f"API request to {path} returned invalid JSON") from exc
        if not isinstance(payload, dict):
            raise UpstreamContentError(f"API request to {path} returned an unexpected payload")
        return payload

    async def get_all_chapters(self) -> List[ChapterInfo]:
        path = "/chapters"
        payload = self._check(await self._get(path, {"language": "en"}), path)
        try:
            return [ChapterInfo.from_api(chapter) for chapter in payload.get("chapters", [])]
        except MALFORMED as exc:
            raise UpstreamContentError(f"Malformed chapter list: {exc}") from exc

    async def get_chapter_info(self, chapter_number: int) -> ChapterInfo:
        path = f"/chapters/{chapter_number}"
        response = await self._get(path, {"language": "en"})
        if response.status_code == 404:
            raise ChapterNotFoundError(chapter_number)
        chapter = self._check(response, path).get("chapter")
        if not chapter:
            raise ChapterNotFoundError(chapter_number)
        try:
            return ChapterInfo.from_api(chapter)
        except MALFORMED as exc:
            raise UpstreamContentError(f"Malformed chapter {chapter_number}: {exc}") from exc

    async def get_chapter_verses(self, chapter_number: int, page: int = 1, per_page: int = 10) -> VersePage:
        path = f"/verses/by_chapter/{chapter_number}"
        params = {
            "language": "en",
            "page": page,
            "per_page": per_page,
            "words": "true",
            "translations": self.translation_id,
            "fields": VERSE_FIELDS,
        }
        response = await self._get(path, params)
        if response.status_code == 404:
            raise ChapterNotFoundError(chapter_number)
        payload = self._check(response, path)
        try:
            return VersePage(
                verses=[Verse.model_validate(verse) for verse in payload.get("verses", [])],
                pagination=UpstreamPagination.model_validate(payload.get("pagination") or {}),
            )
        except MALFORMED as exc:
            raise UpstreamContentError(f"Malformed verses for chapter {chapter_number}: {exc}") from exc

    async def get_all_chapter_verses(self, chapter_number: int) -> List[Verse]:
        """Every verse of a chapter, following the upstream page cursor."""
        verses: List[Verse] = []
        page: Optional[int] = 1
        while page is not None:
            batch = await self.get_chapter_verses(chapter_number, page=page, per_page=self.max_per_page)
            verses.extend(batch.verses)
            next_page = batch.pagination.next_page
            if next_page is not None and next_page <= page:
                raise UpstreamContentError(f"Pagination for chapter {chapter_number} did not advance past {page}")
            page = next_page
        logger.debug("Fetched %s verses for chapter %s", len(verses), chapter_number)
        return verses
