"""
Tests for Text Analyzer

Tests for dreamcinema/analysis/text_analyzer.py
"""

import pytest

from dreamcinema.analysis.models import DreamAnalysis
from dreamcinema.analysis.text_analyzer import TextAnalyzer, analyze, count_hits, normalize_tags
from dreamcinema.core.constants import ElementType


@pytest.fixture
def analyzer():
    return TextAnalyzer()


def find(analysis: DreamAnalysis, element_type: ElementType, value: str):
    for element in analysis.elements:
        if element.type == element_type and element.value == value:
            return element
    return None


class TestHelpers:
    """Tests for tag normalization and hit counting."""

    def test_normalize_tags(self):
        assert normalize_tags([" Joy ", "", "FEAR", None, "  "]) == ["joy", "fear"]

    def test_normalize_none(self):
        assert normalize_tags(None) == []

    def test_count_hits(self):
        assert count_hits("the ocean and the sea", ("ocean", "sea", "coral")) == 2


class TestFlyingJoyDream:
    """The canonical happy dream."""

    def test_elements(self, analyzer, sample_dream_text):
        analysis = analyzer.analyze(sample_dream_text, ["joy"])

        assert find(analysis, ElementType.ACTIONS, "flying") is not None
        assert find(analysis, ElementType.EMOTIONS, "joy") is not None
        assert find(analysis, ElementType.ENVIRONMENT, "sky") is not None
        assert analysis.has_element("flying")
        assert not analysis.has_element("falling")

    def test_prominence(self, analyzer, sample_dream_text):
        analysis = analyzer.analyze(sample_dream_text, ["joy"])

        # "flying" and "clouds" both trigger sky
        assert find(analysis, ElementType.ENVIRONMENT, "sky").prominence == pytest.approx(0.6)
        assert find(analysis, ElementType.ACTIONS, "flying").prominence == pytest.approx(0.3)
        assert find(analysis, ElementType.EMOTIONS, "joy").prominence == pytest.approx(0.7)

    def test_mood_is_positive(self, analyzer, sample_dream_text):
        analysis = analyzer.analyze(sample_dream_text, ["joy"])

        assert analysis.mood_score > 0.5
        assert analysis.mood_score == pytest.approx(1.39 / 2.3)

    def test_freedom_theme(self, analyzer, sample_dream_text):
        analysis = analyzer.analyze(sample_dream_text, ["joy"])

        assert "freedom" in analysis.dominant_themes

    def test_palette(self, analyzer, sample_dream_text):
        analysis = analyzer.analyze(sample_dream_text, ["joy"])

        assert analysis.suggested_palette == [
            "#A8E6CF", "#DCEDC1", "#FFD3A5", "#FD9853", "#C7CEEA", "#87CEEB",
        ]


class TestDarkDream:
    """A frightening dream pushes the mood down."""

    def test_mood_clamped_low(self, analyzer):
        analysis = analyzer.analyze("I was falling in a dark and scary place", ["fear"])

        assert analysis.mood_score == pytest.approx(0.1)

    def test_dark_palette(self, analyzer):
        analysis = analyzer.analyze("I was falling in a dark and scary place", ["fear"])

        assert analysis.suggested_palette[0] == "#2C3E50"
        assert len(analysis.suggested_palette) == 6

    def test_substring_triggers(self, analyzer):
        """Test "scary" contains "car", so fear plus the car object scores pursuit."""
        analysis = analyzer.analyze("I was falling in a dark and scary place", ["fear"])

        assert analysis.has_element("car")
        assert analysis.dominant_themes == ["pursuit"]

    def test_emotional_default_theme(self, analyzer):
        analysis = analyzer.analyze("nothing recognisable here", ["sadness"])

        assert [e.value for e in analysis.elements] == ["sadness"]
        assert analysis.dominant_themes == ["emotional journey"]


class TestEdgeCases:
    """Analysis is total over any input."""

    def test_empty_text(self, analyzer):
        analysis = analyzer.analyze("", [])

        assert [e.value for e in analysis.elements] == [
            "surreal landscape", "mysterious objects", "wandering",
        ]
        assert analysis.mood_score == pytest.approx(0.5)
        assert analysis.dominant_themes == ["mystery", "exploration"]

    def test_none_text(self, analyzer):
        analysis = analyzer.analyze(None)
        assert analysis.elements

    @pytest.mark.parametrize("text,tags", [
        ("", []),
        ("xyz", None),
        ("ocean " * 50, ["terror", "fear", "anxiety"]),
        ("beautiful bright warm safe happy peaceful wonderful amazing", ["joy", "love", "happiness"]),
        ("the mountain the city the forest the sky the space the house the school", ["mystery"]),
    ])
    def test_properties(self, analyzer, text, tags):
        """Test ranges and caps hold for any input."""
        analysis = analyzer.analyze(text, tags)

        assert len(analysis.elements) > 0
        assert 0.1 <= analysis.mood_score <= 0.9
        assert 1 <= len(analysis.dominant_themes) <= 4
        assert 1 <= len(analysis.suggested_palette) <= 6
        assert len(set(analysis.suggested_palette)) == len(analysis.suggested_palette)

    def test_prominence_saturates(self, analyzer):
        analysis = analyzer.analyze("ocean sea underwater swimming diving fish coral")

        assert find(analysis, ElementType.ENVIRONMENT, "underwater").prominence == 1.0

    def test_deterministic(self, analyzer, sample_dream_text):
        first = analyzer.analyze(sample_dream_text, ["joy"])
        second = analyze(sample_dream_text, ["joy"])

        assert first.to_dict() == second.to_dict()

    def test_tags_are_normalized(self, analyzer, sample_dream_text):
        analysis = analyzer.analyze(sample_dream_text, [" JOY "])
        assert find(analysis, ElementType.EMOTIONS, "joy") is not None

    def test_case_insensitive(self, analyzer):
        analysis = analyzer.analyze("THE OCEAN WAS ENDLESS")
        assert find(analysis, ElementType.ENVIRONMENT, "underwater") is not None
