"""In-memory task tracking HTTP service."""

__version__ = "1.0.0"
