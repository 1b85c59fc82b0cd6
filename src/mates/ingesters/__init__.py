"""Contact source handlers (ingesters) for mates."""

from pathlib import Path
from typing import Optional

from mates.ingesters.vdir_ingester import VdirIngester
from mates.protocols import Ingester

# Registry of available ingesters
_INGESTERS: list[Ingester] = [
    VdirIngester(),
]


def get_ingester(source: Path | str) -> Optional[Ingester]:
    """Find an ingester that can handle the given contact source.

    Args:
        source: Path to the contact source (a vdir)

    Returns:
        An Ingester instance that can handle the source, or None
    """
    source_path = Path(source)
    for ingester in _INGESTERS:
        if ingester.can_handle(source_path):
            return ingester
    return None


__all__ = ["get_ingester", "VdirIngester"]
