"""Shared utilities: sanitization."""

from app.shared.utils.sanitization import DisplaySanitizer, clean_display_text

__all__ = [
    "DisplaySanitizer",
    "clean_display_text",
]
