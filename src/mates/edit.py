"""Resolving and editing a single contact."""

import logging
import subprocess
from pathlib import Path
from typing import Iterable

from mates.config import Configuration
from mates.errors import AmbiguousQuery, EditorFailed, NoMatch
from mates.models import ContactRecord
from mates.query import search
from mates.storage import IndexStore

logger = logging.getLogger(__name__)


def resolve_edit_target(file_or_query: str, index: Iterable[ContactRecord]) -> str:
    """Turn a file path or a query into exactly one contact file path.

    An existing file is returned unchanged. Anything else is searched for in
    the index and must match exactly one contact.

    Raises:
        NoMatch: If no contact matches
        AmbiguousQuery: If more than one contact matches
    """
    if Path(file_or_query).is_file():
        return file_or_query

    results = search(index, file_or_query)
    if not results:
        raise NoMatch(f"No contact matches {file_or_query!r}")
    if len(results) > 1:
        raise AmbiguousQuery(
            f"{len(results)} contacts match {file_or_query!r}, be more specific"
        )
    return results[0].path


def run_editor(editor_cmd: str, path: str) -> None:
    """Open ``path`` in the editor and wait for it to exit.

    The command goes through ``sh -c`` so it may carry its own arguments
    (``MATES_EDITOR="vim -c 'set ft=vcard'"``).
    """
    try:
        returncode = subprocess.call(["sh", "-c", f'{editor_cmd} "$@"', editor_cmd, path])
    except OSError as e:
        raise EditorFailed(f"Cannot run editor {editor_cmd!r}: {e}") from e
    if returncode != 0:
        raise EditorFailed(f"Editor {editor_cmd!r} exited with status {returncode}")


def edit_contact(config: Configuration, file_or_query: str) -> str:
    """Edit one contact interactively, then rebuild the index.

    A contact file left empty by the user is deleted.

    Returns:
        The path of the edited contact
    """
    store = IndexStore(config.index_path)
    editor_cmd = config.require_editor()

    if Path(file_or_query).is_file():
        path = file_or_query
    else:
        path = resolve_edit_target(file_or_query, store.load())

    run_editor(editor_cmd, path)

    contact_path = Path(path)
    try:
        emptied = contact_path.is_file() and not contact_path.read_bytes().strip()
        if emptied:
            contact_path.unlink()
    except OSError as e:
        raise EditorFailed(f"Cannot inspect {path} after editing: {e}") from e
    if emptied:
        logger.info(f"Contact emptied, file removed: {path}")

    store.build_full(config.vdir_path)
    return path
