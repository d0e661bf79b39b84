"""tagsort - reconcile music directory layout with embedded tags."""

__version__ = "0.1.0"
