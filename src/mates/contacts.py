"""Creating new contact files in the vdir."""

import logging
import uuid
from pathlib import Path

from mates.codecs import contact_file
from mates.errors import ContactFileExists, DirectoryUnwritable
from mates.models import ContactRecord

logger = logging.getLogger(__name__)

CONTACT_SUFFIX = ".contact"


def generate(fullname: str | None, email: str, contact_dir: Path | str) -> ContactRecord:
    """Build a record for a new contact at a fresh path in ``contact_dir``.

    The file name comes from a random UUID, never from the email, so the
    same address can be added twice.

    Raises:
        InvalidEmail: If ``email`` is not a usable address
    """
    address = contact_file.validate_email(email)
    path = Path(contact_dir) / f"{uuid.uuid4().hex}{CONTACT_SUFFIX}"
    # One line in the contact file
    name = " ".join((fullname or "").split())
    return ContactRecord(path=str(path), email=address, fullname=name)


def write_create(record: ContactRecord) -> None:
    """Create the contact file for ``record``.

    Raises:
        ContactFileExists: If something already lives at ``record.path``
        DirectoryUnwritable: If the file cannot be created
    """
    contents = contact_file.render(record.email, record.fullname)
    try:
        with open(record.path, "x", encoding="utf-8") as fp:
            fp.write(contents)
    except FileExistsError as e:
        raise ContactFileExists(f"Contact file {record.path} already exists") from e
    except OSError as e:
        raise DirectoryUnwritable(f"Cannot create contact file {record.path}: {e}") from e

    logger.debug(f"Created {record.path}")


def add_contact_from_email(contact_dir: Path | str, raw_message: str) -> ContactRecord:
    """Create a contact for the sender of a raw email message."""
    email, fullname = contact_file.extract_sender(raw_message)
    record = generate(fullname, email, contact_dir)
    write_create(record)
    return record
