"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import DisplaySanitizer, clean_display_text

__all__ = [
    "DisplaySanitizer",
    "clean_display_text",
]
