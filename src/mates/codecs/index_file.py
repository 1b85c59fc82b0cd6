"""Line-oriented text codec for the index file.

Each record is one line: ``<email>\\t<fullname>\\t<path>\\n``. There is no
header and no trailing metadata.
"""

from pathlib import Path
from typing import Iterable, Iterator, TextIO

from mates.errors import IndexCorrupt, IndexMissing, IndexUnreadable
from mates.models import ContactRecord, Index

SEPARATOR = "\t"
ENCODING = "utf-8"


def _clean(field: str) -> str:
    # A field must never split the line or shift the columns
    return " ".join(field.replace(SEPARATOR, " ").splitlines()) if field else ""


def encode_record(record: ContactRecord) -> str:
    """Encode one record as an index line, newline included."""
    fields = (_clean(record.email), _clean(record.fullname), _clean(record.path))
    return SEPARATOR.join(fields) + "\n"


def decode_line(line: str) -> ContactRecord:
    """Decode one index line.

    Raises:
        ValueError: If the line does not hold exactly three fields
            or the email field is empty
    """
    fields = line.rstrip("\n").split(SEPARATOR)
    if len(fields) != 3 or not fields[0]:
        raise ValueError(f"expected 3 tab-separated fields, got {len(fields)}")
    email, fullname, path = fields
    return ContactRecord(path=path, email=email, fullname=fullname)


def dump(records: Iterable[ContactRecord], fp: TextIO) -> int:
    """Write records to an open text file. Returns the number written."""
    count = 0
    for record in records:
        fp.write(encode_record(record))
        count += 1
    return count


def iter_records(fp: TextIO, source: Path | str = "<index>") -> Iterator[ContactRecord]:
    """Yield records from an open index file.

    Blank lines are ignored; any other undecodable line raises IndexCorrupt.
    """
    for lineno, line in enumerate(fp, start=1):
        if not line.strip():
            continue
        try:
            yield decode_line(line)
        except ValueError as e:
            raise IndexCorrupt(source, lineno, line.rstrip("\n")) from e


def load(path: Path | str) -> Index:
    """Load an index file.

    Raises:
        IndexMissing: If the file does not exist
        IndexCorrupt: If a line cannot be decoded
        IndexUnreadable: If the file exists but cannot be read
    """
    index_path = Path(path)
    try:
        with index_path.open("r", encoding=ENCODING, newline="\n") as fp:
            return list(iter_records(fp, index_path))
    except FileNotFoundError as e:
        raise IndexMissing(index_path) from e
    except UnicodeDecodeError as e:
        raise IndexCorrupt(index_path, 0, "<not valid UTF-8>") from e
    except OSError as e:
        raise IndexUnreadable(f"Cannot read index file {index_path}: {e}") from e
