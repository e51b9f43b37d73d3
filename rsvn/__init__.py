"""Terminal user interface for browsing and committing Subversion working copies."""

__version__ = "0.0.1"