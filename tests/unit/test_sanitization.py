"""Unit tests for display text sanitization."""

import pytest

from app.shared.utils.sanitization import DisplaySanitizer, clean_display_text


class TestCleanDisplayText:
    def test_none_is_empty(self) -> None:
        assert clean_display_text(None) == ""

    def test_blank_is_empty(self) -> None:
        assert clean_display_text("   \t ") == ""

    def test_angle_brackets_removed(self) -> None:
        assert clean_display_text("<script>alert(1)</script>") == "scriptalert(1)/script"

    def test_trimmed(self) -> None:
        assert clean_display_text("  NDA  ") == "NDA"

    def test_truncated_to_max_length(self) -> None:
        assert len(clean_display_text("x" * 1000)) == DisplaySanitizer.MAX_LENGTH

    def test_truncation_does_not_leave_trailing_space(self) -> None:
        value = "a" * 254 + " b"
        cleaned = clean_display_text(value)
        assert cleaned == "a" * 254
        assert clean_display_text(cleaned) == cleaned

    def test_accents_preserved(self) -> None:
        assert clean_display_text("Devis signé") == "Devis signé"

    @pytest.mark.parametrize(
        "value",
        [
            "<<>>",
            " <b> Contract </b> ",
            "plain",
            "é" * 300,
            "a" * 254 + " <" + "b" * 10,
            "",
        ],
    )
    def test_idempotent_and_bounded(self, value: str) -> None:
        once = clean_display_text(value)
        assert clean_display_text(once) == once
        assert "<" not in once and ">" not in once
        assert len(once) <= DisplaySanitizer.MAX_LENGTH
