"""Item service: item CRUD API with concurrent batch processing."""

__version__ = "1.0.0"
