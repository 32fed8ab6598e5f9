"""Analytics layer facade for the release timeline."""

from .summary import NO_RELEASES_LABEL, TimelineSummary, format_span, summarize_timeline

__all__ = [
    "NO_RELEASES_LABEL",
    "TimelineSummary",
    "format_span",
    "summarize_timeline",
]
