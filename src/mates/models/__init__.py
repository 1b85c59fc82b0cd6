"""Data models for mates."""

from mates.models.contact import ContactRecord, Index

__all__ = ["ContactRecord", "Index"]
