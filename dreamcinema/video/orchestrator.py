"""
Generation Orchestrator

Two-tier video generation:
1. Primary - HailuoAI through the provider client
2. Fallback - curated library keyed by style and emotional tone

Any provider-path failure falls through to the curated library, so a
well-formed request always yields a playable URL. Caller cancellation is
the one exception and propagates as GenerationCancelled.
"""

import asyncio
from typing import Any, Dict, Iterable, Optional

from dreamcinema.analysis.models import DreamAnalysis
from dreamcinema.core.constants import EmotionalTone, ResultSource
from dreamcinema.core.exceptions import GenerationCancelled, ProviderError
from dreamcinema.core.logging_config import get_logger

from .fallback_selector import FallbackSelector
from .models import GenerationResult
from .prompt_builder import PromptBuilder
from .provider_client import HailuoProviderClient, clamp_duration

logger = get_logger("video.orchestrator")


# Checked in order; the first tone with a matching theme or element wins
TONE_RULES = (
    (
        EmotionalTone.JOYFUL,
        ("joy", "happiness", "love", "celebration"),
        ("dancing", "flying", "light"),
    ),
    (
        EmotionalTone.DRAMATIC,
        ("fear", "anxiety", "terror", "horror", "conflict"),
        ("falling", "fighting", "storm"),
    ),
    (
        EmotionalTone.PEACEFUL,
        ("peace", "calm", "tranquil", "serene"),
        ("water", "floating", "garden"),
    ),
)


def _contains_any(needles: Iterable[str], haystack: Iterable[str]) -> bool:
    lowered = [h.lower() for h in haystack]
    return any(needle in value for needle in needles for value in lowered)


def determine_emotional_tone(analysis: DreamAnalysis) -> EmotionalTone:
    """Coarse tone of a dream, mysterious when nothing else matches."""
    themes = analysis.dominant_themes or []
    values = [e.value for e in analysis.elements or []]

    for tone, theme_words, element_words in TONE_RULES:
        if _contains_any(theme_words, themes) or _contains_any(element_words, values):
            return tone

    return EmotionalTone.MYSTERIOUS


class GenerationOrchestrator:
    """Entry point collaborators call to turn an analysis into a video."""

    def __init__(
        self,
        provider: HailuoProviderClient,
        prompt_builder: Optional[PromptBuilder] = None,
        fallback_selector: Optional[FallbackSelector] = None,
    ):
        self.provider = provider
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.fallback_selector = fallback_selector or FallbackSelector()

    async def _provider_available(self) -> bool:
        try:
            return await self.provider.is_available()
        except Exception as e:
            logger.warning(f"Provider availability probe failed: {e}")
            return False

    async def generate(
        self,
        analysis: DreamAnalysis,
        style: str,
        duration_seconds: int,
        aspect_ratio: str,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationResult:
        """
        Generate a video for an analysed dream.

        The duration is clamped into the provider range before the prompt
        is built, so the result reports the length actually requested.

        Returns:
            GenerationResult from the provider, or from the curated library
            when the provider is unavailable or fails

        Raises:
            GenerationCancelled: cancel_event was set by the caller
        """
        duration_seconds = clamp_duration(duration_seconds)

        logger.info(
            f"Starting video generation: style={style}, duration={duration_seconds}s, "
            f"aspect_ratio={aspect_ratio}"
        )

        if await self._provider_available():
            prompt = self.prompt_builder.build(analysis, style, duration_seconds)
            try:
                video_url = await self.provider.generate(
                    prompt, style, duration_seconds, aspect_ratio, cancel_event=cancel_event
                )
                logger.info(f"Provider video generated successfully: {video_url}")
                return GenerationResult(
                    video_url=video_url,
                    source=ResultSource.PROVIDER,
                    style=style,
                    duration_seconds=duration_seconds,
                    aspect_ratio=aspect_ratio,
                )
            except GenerationCancelled:
                raise
            except ProviderError as e:
                logger.error(f"Provider generation failed, falling back to curated library: {e}")
            except Exception as e:
                logger.exception(f"Unexpected provider error, falling back to curated library: {e}")
        else:
            logger.info("Provider not available, using curated library")

        tone = determine_emotional_tone(analysis)
        video_url = self.fallback_selector.select(style, tone.value)
        logger.info(f"Selected curated video: {video_url} ({style} style, {tone.value} tone)")

        return GenerationResult(
            video_url=video_url,
            source=ResultSource.FALLBACK,
            style=style,
            duration_seconds=duration_seconds,
            aspect_ratio=aspect_ratio,
            tone=tone.value,
        )

    async def service_status(self) -> Dict[str, Any]:
        """Availability of both tiers, for status displays."""
        available = await self._provider_available()
        return {
            "primary": {
                "name": self.provider.PROVIDER_NAME,
                "available": available,
                "estimated_time": "30-120 seconds",
                "description": "AI video generation with 20+ styles and custom duration",
            },
            "fallback": {
                "name": "Curated Videos",
                "available": True,
                "estimated_time": "Instant",
                "description": "Stock videos matched to dream mood and style",
            },
        }
