"""Index file storage."""

from mates.storage.store import IndexStore, append_one, build_full

__all__ = ["IndexStore", "build_full", "append_one"]
