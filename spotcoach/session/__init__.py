"""Run summary persistence."""

from .summary import append_summary, format_summary

__all__ = [
    "append_summary",
    "format_summary",
]
