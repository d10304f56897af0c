"""
Tests for Fallback Selector

Tests for dreamcinema/video/fallback_selector.py
"""

import pytest

from dreamcinema.core.constants import EmotionalTone
from dreamcinema.video.fallback_selector import VIDEO_LIBRARY, FallbackSelector


@pytest.fixture
def selector():
    return FallbackSelector()


class TestSelect:
    """Tests for FallbackSelector.select."""

    def test_unknown_style_and_tone(self, selector):
        assert selector.select("foo", "bar") == selector.select("watercolor", "peaceful")

    def test_unknown_style(self, selector):
        assert selector.select("foo", "joyful") == VIDEO_LIBRARY["watercolor"]["joyful"]

    def test_unknown_tone(self, selector):
        assert selector.select("cyberpunk", "bar") == VIDEO_LIBRARY["cyberpunk"]["peaceful"]

    def test_known_pair(self, selector):
        assert selector.select("anime", "mysterious") == VIDEO_LIBRARY["anime"]["mysterious"]

    def test_accepts_enum(self, selector):
        assert selector.select("ghibli", EmotionalTone.JOYFUL) == VIDEO_LIBRARY["ghibli"]["joyful"]

    def test_every_cell_is_a_url(self, selector):
        for style, row in VIDEO_LIBRARY.items():
            for tone in EmotionalTone:
                assert selector.select(style, tone.value).startswith("https://")

    def test_library_must_have_default_cell(self):
        with pytest.raises(ValueError):
            FallbackSelector({"anime": {"joyful": "https://example.test/a.mp4"}})

    def test_empty_library_is_rejected(self):
        with pytest.raises(ValueError):
            FallbackSelector({})

    def test_custom_library_row_missing_default_tone(self):
        library = {
            "watercolor": {"peaceful": "https://example.test/calm.mp4"},
            "anime": {"joyful": "https://example.test/joy.mp4"},
        }
        selector = FallbackSelector(library)

        assert selector.select("anime", "dramatic") == "https://example.test/calm.mp4"
        assert len(selector.library_urls()) == 2
