"""Substring matching of a query fragment against indexed contacts."""

from typing import Iterable

from mates.models import ContactRecord


def matches(record: ContactRecord, needle: str) -> bool:
    """Check a record against an already casefolded fragment."""
    return needle in record.email.casefold() or needle in record.fullname.casefold()


def search(index: Iterable[ContactRecord], fragment: str) -> list[ContactRecord]:
    """Find every record whose email or full name contains ``fragment``.

    Matching is case-insensitive and an empty fragment matches everything.
    Results keep the order of the index; there is no relevance ranking, so
    repeated identical queries always print identical output.

    Args:
        index: Loaded index records
        fragment: Free-text query

    Returns:
        Matching records in index order
    """
    needle = fragment.casefold()
    return [record for record in index if matches(record, needle)]
