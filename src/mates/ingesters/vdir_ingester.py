"""Ingester for a vdir: one contact file per entry."""

import logging
import os
from pathlib import Path
from typing import Iterator

from mates.codecs import contact_file
from mates.errors import DirectoryUnreadable, MalformedContactFile
from mates.models import ContactRecord

logger = logging.getLogger(__name__)


class VdirIngester:
    """Ingester for a flat directory of contact files."""

    source_type = "vdir"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def ingest(self, source: Path) -> Iterator[ContactRecord]:
        """Yield a record for every well-formed contact file.

        Files are visited in directory-listing order. Malformed or unreadable
        files are skipped; a directory that cannot be listed is fatal.

        Args:
            source: Path to the vdir

        Yields:
            ContactRecord objects carrying the file's full path

        Raises:
            DirectoryUnreadable: If the directory cannot be listed
        """
        try:
            entries = list(os.scandir(source))
        except OSError as e:
            raise DirectoryUnreadable(f"Cannot list contact directory {source}: {e}") from e

        for entry in entries:
            if self._should_skip(entry):
                continue

            full_path = Path(source) / entry.name
            try:
                contents = full_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.debug(f"  skipping unreadable {full_path}: {e}")
                continue

            try:
                yield contact_file.decode(contents, str(full_path))
            except MalformedContactFile as e:
                logger.debug(f"  skipping malformed {e}")

    def _should_skip(self, entry: os.DirEntry) -> bool:
        """Check if a directory entry should be skipped.

        Skips hidden files (editor swap files, .git) and anything that is
        not a regular file.
        """
        if entry.name.startswith("."):
            return True

        try:
            return not entry.is_file()
        except OSError:
            return True
