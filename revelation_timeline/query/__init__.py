"""Timeline grouping and filtering."""

from .timeline_filter import (
    build_sections,
    filter_options,
    filter_sections,
    flatten,
    query_timeline,
)

__all__ = ["build_sections", "filter_options", "filter_sections", "flatten", "query_timeline"]
