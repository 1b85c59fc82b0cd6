"""Text codecs for contact files and the index file."""

from mates.codecs import contact_file, index_file

__all__ = ["contact_file", "index_file"]
