"""Output shapes for query results.

Pure projections of the matcher's output; none of them read or write files.
"""

from typing import Iterable

from mates.models import ContactRecord


def to_mutt_lines(
    records: Iterable[ContactRecord], suppress_leading_blank: bool = False
) -> list[str]:
    """Lines for mutt's ``query_command``.

    mutt discards the first line of output as a status message, so a blank
    line is emitted first unless ``suppress_leading_blank`` is set.
    """
    lines = [] if suppress_leading_blank else [""]
    lines.extend(f"{r.email}\t{r.fullname}" for r in records)
    return lines


def to_file_paths(records: Iterable[ContactRecord]) -> list[str]:
    return [r.path for r in records]


def to_email_display(records: Iterable[ContactRecord]) -> list[str]:
    """``Name <email>`` lines, or ``<email>`` when the name is unknown."""
    return [f"{r.fullname} <{r.email}>" if r.fullname else f"<{r.email}>" for r in records]
