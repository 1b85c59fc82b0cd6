"""Exceptions raised by mates.

Every error the CLI reports derives from MatesError, so ``main()`` can turn
any of them into a one-line message and a non-zero exit status.
"""


class MatesError(Exception):
    """Base class for all mates errors."""


class ConfigError(MatesError):
    """Required configuration is missing."""


class MalformedContactFile(MatesError):
    """A contact file has no parseable email line.

    Tolerated during a full rebuild: the file is skipped.
    """


class NoSenderFound(MatesError):
    """A raw email message has no usable From: header."""


class InvalidEmail(MatesError):
    """An address given for a new contact is empty or malformed."""


class DirectoryUnreadable(MatesError):
    """The contact directory cannot be listed."""


class DirectoryUnwritable(MatesError):
    """A new contact file cannot be created in the contact directory."""


class ContactFileExists(MatesError):
    """The generated contact path is already occupied."""


class IndexUnwritable(MatesError):
    """The index file cannot be written or appended to."""


class IndexMissing(MatesError):
    """The index file does not exist yet."""

    def __init__(self, path):
        super().__init__(f"Index file {path} does not exist. Run `mates index` first.")
        self.path = path


class IndexUnreadable(MatesError):
    """The index file exists but cannot be read."""


class IndexCorrupt(MatesError):
    """A line of the index file cannot be decoded."""

    def __init__(self, path, lineno: int, line: str):
        super().__init__(
            f"Index file {path} is corrupt at line {lineno}: {line!r}. "
            "Run `mates index` to rebuild it."
        )
        self.path = path
        self.lineno = lineno
        self.line = line


class NoMatch(MatesError):
    """A query matched no contact."""


class AmbiguousQuery(MatesError):
    """A query that must resolve to one contact matched several."""


class EditorFailed(MatesError):
    """The external editor exited with an error."""
