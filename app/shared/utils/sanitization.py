"""Output sanitization for display strings leaving the API.

Parameterized queries are the primary defense against injection; these helpers
keep catalog display values free of markup delimiters and bounded in length.
"""

from typing import ClassVar


class DisplaySanitizer:
    """Strip markup delimiters from display text and cap its length."""

    STRIPPED_CHARACTERS: ClassVar[str] = "<>"
    MAX_LENGTH: ClassVar[int] = 255

    _TRANSLATION: ClassVar[dict[int, None]] = {ord(c): None for c in STRIPPED_CHARACTERS}

    @classmethod
    def clean(cls, value: str | None) -> str:
        """Return value without '<' or '>', trimmed, and truncated to MAX_LENGTH.

        Args:
            value: Raw display text (e.g. a catalog code or name). May be None.

        Returns:
            Empty string for None or blank input; otherwise the cleaned text.
        """
        if value is None or not value.strip():
            return ""
        cleaned = value.translate(cls._TRANSLATION).strip()
        # Truncation can expose trailing whitespace.
        return cleaned[: cls.MAX_LENGTH].rstrip()


def clean_display_text(value: str | None) -> str:
    """Sanitize a display string (see DisplaySanitizer.clean)."""
    return DisplaySanitizer.clean(value)
