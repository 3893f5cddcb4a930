"""Content API integration."""

from .quran_client import AccessToken, QuranContentClient

__all__ = ["AccessToken", "QuranContentClient"]
