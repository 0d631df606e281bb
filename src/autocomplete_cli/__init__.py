"""Autocomplete suggestions from public search endpoints."""

__version__ = "1.0.0"
