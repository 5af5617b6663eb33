"""Unit tests for subtitle title matchers."""

import pytest

from track_cleanup.policy import CommentaryMatcher


class TestCommentaryMatcher:
    """Tests for CommentaryMatcher."""

    @pytest.mark.parametrize(
        "title",
        [
            "Commentary",
            "Director's commentary",
            "Audio Description",
            "English SDH",
            "eng (sdh)",
        ],
    )
    def test_matches(self, title):
        """Test that commentary, description and SDH titles match."""
        assert CommentaryMatcher().is_commentary(title)

    @pytest.mark.parametrize("title", [None, "", "English", "Forced", "Full"])
    def test_no_match(self, title):
        """Test that ordinary titles do not match."""
        assert not CommentaryMatcher().is_commentary(title)

    def test_match_returns_pattern(self):
        """Test that match reports which pattern hit."""
        assert CommentaryMatcher().match("English SDH") == "sdh"

    def test_invalid_pattern(self):
        """Test that invalid custom patterns are rejected."""
        with pytest.raises(ValueError, match="commentary_patterns\\[0\\]"):
            CommentaryMatcher(("(unclosed",))
