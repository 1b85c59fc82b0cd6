"""Query matching and output formatting."""

from mates.query.formatters import to_email_display, to_file_paths, to_mutt_lines
from mates.query.matcher import matches, search

__all__ = [
    "search",
    "matches",
    "to_mutt_lines",
    "to_file_paths",
    "to_email_display",
]
