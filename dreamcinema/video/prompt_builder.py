"""
Prompt Builder - DreamAnalysis to provider prompt.

Deterministic, pure string assembly. Clause order is fixed:
scene, emotions, themes, atmosphere, pacing, visual style.
"""

import re
from typing import List

from dreamcinema.analysis.models import DreamAnalysis
from dreamcinema.core.constants import ElementType
from dreamcinema.core.logging_config import get_logger

from .style_catalog import get_style

logger = get_logger("video.prompt_builder")

PROMPT_OPENING = "A cinematic dream sequence featuring"

BRIGHT_MOOD_ABOVE = 0.6
MYSTERIOUS_MOOD_BELOW = 0.4

FAST_PACING_MAX_SECONDS = 5
MEDIUM_PACING_MAX_SECONDS = 8

_WHITESPACE = re.compile(r"\s+")


def describe_atmosphere(mood_score: float) -> str:
    if mood_score > BRIGHT_MOOD_ABOVE:
        return "bright and uplifting atmosphere"
    if mood_score < MYSTERIOUS_MOOD_BELOW:
        return "mysterious and introspective atmosphere"
    return "balanced and contemplative atmosphere"


def describe_pacing(duration_seconds: int) -> str:
    if duration_seconds <= FAST_PACING_MAX_SECONDS:
        return "Fast-paced with dynamic transitions and energetic movement."
    if duration_seconds <= MEDIUM_PACING_MAX_SECONDS:
        return "Medium-paced with smooth transitions and balanced movement."
    return "Slow-paced with gentle transitions and contemplative movement."


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


class PromptBuilder:
    """Combines an analysis with style and duration into the provider prompt."""

    def build(self, analysis: DreamAnalysis, style: str, duration_seconds: int) -> str:
        """
        Build the natural-language prompt sent to the provider.

        Args:
            analysis: Dream analysis
            style: Style id; unknown ids use the default style fragment
            duration_seconds: Requested clip length, drives pacing

        Returns:
            Whitespace-normalized prompt
        """
        clauses: List[str] = [PROMPT_OPENING]

        environments = analysis.values_of(ElementType.ENVIRONMENT)
        if environments:
            suffix = "s" if len(environments) > 1 else ""
            clauses.append(f"{' and '.join(environments)} environment{suffix},")

        details = analysis.values_of(ElementType.OBJECTS) + analysis.values_of(ElementType.ACTIONS)
        if details:
            clauses.append(f"with {', '.join(details)},")

        emotions = analysis.values_of(ElementType.EMOTIONS)
        if emotions:
            clauses.append(f"conveying {' and '.join(emotions)} emotions,")

        if analysis.dominant_themes:
            clauses.append(f"exploring themes of {', '.join(analysis.dominant_themes)},")

        clauses.append(f"with {describe_atmosphere(analysis.mood_score)}.")
        clauses.append(describe_pacing(duration_seconds))
        clauses.append(f"Visual style: {get_style(style).prompt_fragment}.")

        prompt = normalize_whitespace(" ".join(clauses))
        logger.debug(f"Built prompt ({len(prompt)} chars): {prompt}")
        return prompt


def build_prompt(analysis: DreamAnalysis, style: str, duration_seconds: int) -> str:
    return PromptBuilder().build(analysis, style, duration_seconds)
