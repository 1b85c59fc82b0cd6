"""Protocol definitions for extensible components."""

from mates.protocols.ingester import Ingester

__all__ = ["Ingester"]
