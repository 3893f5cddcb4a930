"""Exceptions raised by the content client and the HTTP boundary."""

from __future__ import annotations

MIN_CHAPTER = 1
MAX_CHAPTER = 114


class ContentClientError(Exception):
    """Base class for failures talking to the content API."""


class ClientNotConfiguredError(ContentClientError):
    """Raised when the client id or secret is missing."""


class UpstreamAuthError(ContentClientError):
    """The token endpoint refused the credentials or answered with an error."""


class UpstreamContentError(ContentClientError):
    """A content request failed or returned an unexpected payload."""


class ChapterNotFoundError(UpstreamContentError):
    """The requested chapter does not exist upstream."""

    def __init__(self, chapter_number: int) -> None:
        super().__init__(f"Chapter {chapter_number} not found")
        self.chapter_number = chapter_number


class InvalidChapterError(ValueError):
    """A chapter number outside 1-114 or not an integer."""


def parse_chapter_number(raw: object) -> int:
    """Return ``raw`` as a chapter number or raise ``InvalidChapterError``."""
    if isinstance(raw, bool):
        raise InvalidChapterError(f"Invalid chapter number: {raw!r}")
    text = str(raw).strip()
    digits = text[1:] if text[:1] in "+-" else text
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidChapterError(f"Invalid chapter number: {raw!r}")
    number = int(text)
    if number < MIN_CHAPTER or number > MAX_CHAPTER:
        raise InvalidChapterError(f"Invalid chapter number: {number}")
    return number
