"""Flat-file storage for the contact index."""

import logging
import os
import stat
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from mates.codecs import index_file
from mates.errors import DirectoryUnreadable, IndexUnwritable
from mates.ingesters import get_ingester
from mates.models import ContactRecord, Index

logger = logging.getLogger(__name__)


class IndexStore:
    """Owner of the index file.

    Only this class creates, replaces or appends to the index. Full rebuilds
    are atomic for readers; appends are not.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @contextmanager
    def replacing(self) -> Iterator[TextIO]:
        """Context manager writing a new index next to the old one.

        The temporary file is renamed over the index only if the block
        completes; otherwise it is removed and the old index stays in place.
        """
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
        except OSError as e:
            raise IndexUnwritable(f"Cannot write index file {self.path}: {e}") from e

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding=index_file.ENCODING, newline="\n") as fp:
                yield fp
                fp.flush()
                os.fsync(fp.fileno())
            os.chmod(tmp_path, self._file_mode())
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise IndexUnwritable(f"Cannot write index file {self.path}: {e}") from e
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def _file_mode(self) -> int:
        """Permissions for a rewritten index: the old file's, else 0666 minus umask."""
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def ensure_exists(self) -> None:
        """Fail unless there is an index to append to.

        Raises:
            IndexUnwritable: If the index file does not exist
        """
        if not self.path.is_file():
            raise IndexUnwritable(
                f"Index file {self.path} does not exist. Run `mates index` first."
            )

    def build_full(self, contact_dir: Path | str) -> Index:
        """Rebuild the whole index from a contact directory.

        Args:
            contact_dir: The vdir to scan

        Returns:
            The records written, in directory-listing order

        Raises:
            DirectoryUnreadable: If the directory cannot be listed
            IndexUnwritable: If the new index cannot be written
        """
        source = Path(contact_dir)
        ingester = get_ingester(source)
        if ingester is None:
            raise DirectoryUnreadable(f"Contact directory {source} does not exist")

        # Collect first so a listing failure never touches the old index
        records = list(ingester.ingest(source))

        with self.replacing() as fp:
            index_file.dump(records, fp)

        logger.info(f"Indexed {len(records)} contacts from {ingester.source_type} {source}")
        return records

    def append_one(self, record: ContactRecord) -> None:
        """Append a single record to an existing index.

        No check is made for an existing record with the same path or email.

        Raises:
            IndexUnwritable: If the index does not exist or cannot be opened
        """
        self.ensure_exists()
        try:
            with self.path.open("a", encoding=index_file.ENCODING, newline="\n") as fp:
                fp.write(index_file.encode_record(record))
        except OSError as e:
            raise IndexUnwritable(f"Cannot append to index file {self.path}: {e}") from e

    def load(self) -> Index:
        """Load every record of the index, in file order."""
        return index_file.load(self.path)


def build_full(contact_dir: Path | str, index_path: Path | str) -> Index:
    """Rebuild the index at ``index_path`` from ``contact_dir``."""
    return IndexStore(index_path).build_full(contact_dir)


def append_one(index_path: Path | str, record: ContactRecord) -> None:
    """Append ``record`` to the index at ``index_path``."""
    IndexStore(index_path).append_one(record)
