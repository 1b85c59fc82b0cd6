"""Core data model for indexed contacts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactRecord:
    """One contact file as seen by the index."""

    path: str
    email: str
    fullname: str = ""  # empty when unknown


# Insertion order from the last build or append
Index = list[ContactRecord]
