"""Typed-value parsing and profile-driven extraction for whisky pages."""

from extraction.extractor import MissingFieldError, extract_fields

__all__ = ["MissingFieldError", "extract_fields"]
