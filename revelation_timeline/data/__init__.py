"""Static timeline documents."""

from .detailed import DETAILED_DOCUMENT, DETAILED_TIMELINE
from .summary import SUMMARY_PAYLOAD, SUMMARY_TIMELINE

__all__ = ["DETAILED_DOCUMENT", "DETAILED_TIMELINE", "SUMMARY_PAYLOAD", "SUMMARY_TIMELINE"]
