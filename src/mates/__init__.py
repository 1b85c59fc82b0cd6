"""mates - a fast contact index over a vdir of contact files."""

__version__ = "0.3.0"
