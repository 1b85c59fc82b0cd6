"""Codec for individual contact files.

A contact file holds the email address on its first line and, optionally,
the display name on its second. Anything after that is ignored. vCards
dropped into the vdir by other tools are read too, but only their EMAIL and
FN properties.
"""

from email.header import decode_header, make_header
from email.parser import HeaderParser
from email.utils import parseaddr

import vobject

from mates.errors import InvalidEmail, MalformedContactFile, NoSenderFound
from mates.models import ContactRecord

VCARD_BEGIN = "BEGIN:VCARD"


def _is_email_line(line: str) -> bool:
    return "@" in line and not any(ch.isspace() for ch in line)


def validate_email(email: str) -> str:
    """Return ``email`` stripped, or fail if it cannot be a contact's address.

    Raises:
        InvalidEmail: If the address is empty, has no ``@`` or contains
            whitespace
    """
    address = email.strip()
    if not _is_email_line(address):
        raise InvalidEmail(f"Not an email address: {email!r}")
    return address


def _decode_vcard(contents: str, path: str) -> ContactRecord:
    try:
        card = vobject.readOne(contents)
    except (vobject.base.VObjectError, ValueError, StopIteration) as e:
        raise MalformedContactFile(f"{path or 'vCard'}: {e}") from e

    email = ""
    if hasattr(card, "email_list"):
        email = str(card.email_list[0].value).strip()
    if not _is_email_line(email):
        raise MalformedContactFile(f"{path or 'vCard'}: no EMAIL property")

    fullname = str(card.fn.value).strip() if hasattr(card, "fn") else ""
    return ContactRecord(path=path, email=email, fullname=fullname)


def decode(contents: str, path: str = "") -> ContactRecord:
    """Parse contact file contents into a ContactRecord.

    Args:
        contents: Text of the contact file
        path: Path recorded on the returned record

    Returns:
        The decoded record

    Raises:
        MalformedContactFile: If the file has no parseable email line
    """
    stripped = contents.lstrip()
    if stripped.upper().startswith(VCARD_BEGIN):
        return _decode_vcard(stripped, path)

    lines = stripped.splitlines()
    if not lines:
        raise MalformedContactFile(f"{path or 'contact'}: file is empty")

    email = lines[0].strip()
    if not _is_email_line(email):
        raise MalformedContactFile(f"{path or 'contact'}: no email on first line")

    fullname = lines[1].strip() if len(lines) > 1 else ""
    return ContactRecord(path=path, email=email, fullname=fullname)


def render(email: str, fullname: str | None = None) -> str:
    """Render the text of a new contact file."""
    if fullname:
        return f"{email}\n{fullname}\n"
    return f"{email}\n"


def extract_sender(raw_message: str) -> tuple[str, str]:
    """Find the sender of a raw email message.

    Args:
        raw_message: The full message, headers first

    Returns:
        (email, fullname) of the From: header; fullname may be empty

    Raises:
        NoSenderFound: If there is no From: header with an address
    """
    headers = HeaderParser().parsestr(raw_message, headersonly=True)
    from_line = headers.get("From")
    if not from_line:
        raise NoSenderFound("No From: header found in message")

    fullname, email = parseaddr(str(from_line))
    if not _is_email_line(email):
        raise NoSenderFound(f"No sender address in From: header {from_line!r}")

    # RFC 2047 encoded words ("=?utf-8?q?...?=") in the display name
    if fullname:
        fullname = str(make_header(decode_header(fullname)))
    return email, fullname.strip()
