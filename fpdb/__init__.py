"""Read-only metadata search API for a Flashpoint game library database."""

from fpdb.version import __version__

__all__ = ["__version__"]
