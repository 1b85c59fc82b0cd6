"""Protocol for sources a full index rebuild reads contacts from."""

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from mates.models import ContactRecord


@runtime_checkable
class Ingester(Protocol):
    """A contact source, such as a vdir.

    ``ingest`` yields one record per well-formed contact and quietly drops
    malformed ones; only a source that cannot be listed at all is an error.
    """

    @property
    def source_type(self) -> str:
        """Short label used in rebuild messages (e.g. 'vdir')."""
        ...

    def can_handle(self, source: Path) -> bool:
        ...

    def ingest(self, source: Path) -> Iterator[ContactRecord]:
        """Yield contact records in listing order."""
        ...
