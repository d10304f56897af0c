"""
Text Analyzer - Dream Narration to Structured Analysis

Maps raw dream text plus user-picked emotion tags to a DreamAnalysis:
- Elements (environment, objects, actions, emotions) with saturating prominence
- Mood score clamped into [0.1, 0.9]
- Suggested colour palette (at most 6, deduplicated)
- Dominant themes (at most 4)

Pure heuristics over the tables in patterns.py. No I/O, no randomness, and
total over any input string.
"""

from typing import Iterable, List, Optional

from dreamcinema.core.constants import (
    ElementType,
    MAX_PALETTE_COLORS,
    MAX_THEMES,
    MOOD_MAX,
    MOOD_MIN,
    MOOD_NEUTRAL,
)
from dreamcinema.core.logging_config import get_logger

from .models import DreamAnalysis, DreamElement
from . import patterns

logger = get_logger("analysis.text_analyzer")


def normalize_tags(emotion_tags: Optional[Iterable[str]]) -> List[str]:
    """Lower-case and strip emotion tags, dropping blanks."""
    if not emotion_tags:
        return []
    normalized = []
    for tag in emotion_tags:
        if tag is None:
            continue
        tag = str(tag).strip().lower()
        if tag:
            normalized.append(tag)
    return normalized


def count_hits(content: str, triggers: Iterable[str]) -> int:
    """Number of triggers occurring as substrings of ``content``."""
    return sum(1 for trigger in triggers if trigger in content)


class TextAnalyzer:
    """Heuristic analyzer turning dream narration into a DreamAnalysis."""

    def analyze(self, text: str, emotion_tags: Optional[Iterable[str]] = None) -> DreamAnalysis:
        """
        Analyze dream text.

        Args:
            text: Raw dream narration (any string, may be empty)
            emotion_tags: Emotion labels picked by the user

        Returns:
            DreamAnalysis with non-empty elements
        """
        content = (text or "").lower()
        emotions = normalize_tags(emotion_tags)

        elements = self._extract_elements(content, emotions)
        mood_score = self._calculate_mood_score(content, emotions, elements)
        palette = self._generate_palette(mood_score, elements, emotions)
        themes = self._extract_themes(content, elements, emotions)

        logger.debug(
            f"Analyzed dream: {len(elements)} elements, mood {mood_score:.2f}, "
            f"themes {themes}"
        )

        return DreamAnalysis(
            elements=elements,
            dominant_themes=themes,
            suggested_palette=palette,
            mood_score=mood_score,
        )

    # -------------------------------------------------------------------------
    # Elements
    # -------------------------------------------------------------------------

    def _extract_elements(self, content: str, emotions: List[str]) -> List[DreamElement]:
        elements: List[DreamElement] = []

        for table in patterns.CATEGORY_TABLES:
            for pattern in table.patterns:
                hits = count_hits(content, pattern.triggers)
                if hits > 0:
                    prominence = min(hits * table.weight, table.cap)
                    elements.append(DreamElement(table.type, pattern.label, prominence))

        for emotion in emotions:
            elements.append(
                DreamElement(ElementType.EMOTIONS, emotion, patterns.EMOTION_TAG_PROMINENCE)
            )

        if not elements:
            elements = [
                DreamElement(element_type, value, prominence)
                for element_type, value, prominence in patterns.GENERIC_ELEMENTS
            ]

        return elements

    # -------------------------------------------------------------------------
    # Mood
    # -------------------------------------------------------------------------

    def _calculate_mood_score(
        self, content: str, emotions: List[str], elements: List[DreamElement]
    ) -> float:
        score = MOOD_NEUTRAL
        factors = 1.0

        for emotion in emotions:
            score += patterns.EMOTION_WEIGHTS.get(emotion, 0.0)
            factors += 1

        for word in patterns.POSITIVE_WORDS:
            if word in content:
                score += patterns.LEXICAL_MOOD_STEP
                factors += patterns.LEXICAL_MOOD_FACTOR

        for word in patterns.NEGATIVE_WORDS:
            if word in content:
                score -= patterns.LEXICAL_MOOD_STEP
                factors += patterns.LEXICAL_MOOD_FACTOR

        # Only elements with a mood entry count towards the divisor
        for element in elements:
            impact = patterns.ELEMENT_MOOD_IMPACT.get(element.value)
            if impact is not None:
                score += impact * element.prominence
                factors += patterns.ELEMENT_MOOD_FACTOR

        return max(MOOD_MIN, min(MOOD_MAX, score / factors))

    # -------------------------------------------------------------------------
    # Palette
    # -------------------------------------------------------------------------

    def _generate_palette(
        self, mood_score: float, elements: List[DreamElement], emotions: List[str]
    ) -> List[str]:
        palette: List[str] = []

        for band in patterns.MOOD_BANDS:
            if band.above is None or mood_score > band.above:
                palette.extend(band.colors)
                break

        environments = {e.value for e in elements if e.type == ElementType.ENVIRONMENT}
        for color_set in patterns.ENVIRONMENT_COLORS:
            if color_set.key in environments:
                palette.extend(color_set.colors)

        for emotion in emotions:
            for color_set in patterns.EMOTION_COLORS:
                if color_set.key == emotion:
                    palette.extend(color_set.colors)

        unique = list(dict.fromkeys(palette))
        return unique[:MAX_PALETTE_COLORS]

    # -------------------------------------------------------------------------
    # Themes
    # -------------------------------------------------------------------------

    def _extract_themes(
        self, content: str, elements: List[DreamElement], emotions: List[str]
    ) -> List[str]:
        element_values = {e.value for e in elements}
        themes: List[str] = []

        for theme in patterns.THEME_PATTERNS:
            score = count_hits(content, theme.keywords) * patterns.THEME_KEYWORD_SCORE
            score += sum(
                patterns.THEME_ELEMENT_SCORE for value in theme.elements if value in element_values
            )
            score += sum(
                patterns.THEME_EMOTION_SCORE for emotion in theme.emotions if emotion in emotions
            )
            if score >= patterns.THEME_THRESHOLD:
                themes.append(theme.name)

        if not themes:
            defaults = (
                patterns.DEFAULT_EMOTIONAL_THEMES if emotions else patterns.DEFAULT_NEUTRAL_THEMES
            )
            themes = list(defaults)

        return themes[:MAX_THEMES]


_default_analyzer = TextAnalyzer()


def analyze(text: str, emotion_tags: Optional[Iterable[str]] = None) -> DreamAnalysis:
    """Analyze dream text with the shared stateless analyzer."""
    return _default_analyzer.analyze(text, emotion_tags)
