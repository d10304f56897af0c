"""
Tests for Generation Orchestrator

Tests for dreamcinema/video/orchestrator.py
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from dreamcinema.analysis.models import DreamAnalysis, DreamElement
from dreamcinema.analysis.text_analyzer import analyze
from dreamcinema.core.constants import ElementType, EmotionalTone, ResultSource
from dreamcinema.core.exceptions import (
    ConfigError,
    GenerationCancelled,
    GenerationFailed,
    ProtocolError,
    RemoteError,
    TimedOut,
)
from dreamcinema.video.fallback_selector import FallbackSelector
from dreamcinema.video.orchestrator import GenerationOrchestrator, determine_emotional_tone

PROVIDER_URL = "https://cdn.provider.test/video/generated.mp4"


class FakeProvider:
    """Provider double with scripted availability and outcome."""

    PROVIDER_NAME = "FakeProvider"

    def __init__(self, available=True, outcome=PROVIDER_URL):
        self.available = available
        self.outcome = outcome
        self.generate_calls = []

    async def is_available(self):
        if isinstance(self.available, Exception):
            raise self.available
        return self.available

    async def generate(self, prompt, style, duration_seconds, aspect_ratio, cancel_event=None):
        self.generate_calls.append((prompt, style, duration_seconds, aspect_ratio))
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome

    async def aclose(self):
        pass

    def service_info(self):
        return {"name": self.PROVIDER_NAME}


def analysis_with(values, themes=()):
    return DreamAnalysis(
        elements=[DreamElement(ElementType.ACTIONS, value, 0.3) for value in values],
        dominant_themes=list(themes),
        suggested_palette=[],
        mood_score=0.5,
    )


@pytest.fixture
def joyful_analysis(sample_dream_text):
    return analyze(sample_dream_text, ["joy"])


class TestDetermineEmotionalTone:
    """Tests for tone detection."""

    def test_joyful_from_element(self, joyful_analysis):
        assert determine_emotional_tone(joyful_analysis) == EmotionalTone.JOYFUL

    def test_dramatic(self):
        assert determine_emotional_tone(analysis_with(["falling"])) == EmotionalTone.DRAMATIC

    def test_peaceful(self):
        assert determine_emotional_tone(analysis_with(["water"])) == EmotionalTone.PEACEFUL

    def test_theme_match(self):
        analysis = analysis_with(["wandering"], themes=["fear of heights"])
        assert determine_emotional_tone(analysis) == EmotionalTone.DRAMATIC

    def test_joyful_wins_over_dramatic(self):
        assert determine_emotional_tone(analysis_with(["falling", "dancing"])) == EmotionalTone.JOYFUL

    def test_mysterious_default(self):
        assert determine_emotional_tone(analysis_with(["wandering"])) == EmotionalTone.MYSTERIOUS


class TestProviderPath:
    """Tests for the primary tier."""

    @pytest.mark.asyncio
    async def test_provider_success(self, joyful_analysis):
        provider = FakeProvider()
        orchestrator = GenerationOrchestrator(provider)

        result = await orchestrator.generate(joyful_analysis, "ghibli", 6, "16:9")

        assert result.source == ResultSource.PROVIDER
        assert result.video_url == PROVIDER_URL
        assert result.tone is None
        prompt, style, duration, aspect = provider.generate_calls[0]
        assert prompt.startswith("A cinematic dream sequence featuring sky environment")
        assert (style, duration, aspect) == ("ghibli", 6, "16:9")

    @pytest.mark.asyncio
    async def test_duration_clamped_before_generation(self, joyful_analysis):
        """Test the provider and the result both see the clamped duration."""
        provider = FakeProvider()
        orchestrator = GenerationOrchestrator(provider)

        result = await orchestrator.generate(joyful_analysis, "ghibli", 30, "16:9")

        prompt, _, duration, _ = provider.generate_calls[0]
        assert duration == 10
        assert result.duration_seconds == 10
        assert "Slow-paced" in prompt


class TestFallbackPath:
    """The orchestrator never fails for a well-formed request."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        ConfigError("HAILUOAI_API_KEY"),
        RemoteError(500, "server error"),
        ProtocolError("invalid api key", 1004),
        TimedOut("task-1", 40),
        GenerationFailed("task-1"),
        RuntimeError("unexpected"),
    ])
    async def test_provider_errors_fall_back(self, joyful_analysis, error):
        orchestrator = GenerationOrchestrator(FakeProvider(outcome=error))

        result = await orchestrator.generate(joyful_analysis, "anime", 6, "16:9")

        assert result.source == ResultSource.FALLBACK
        assert result.video_url == FallbackSelector().select("anime", "joyful")
        assert result.tone == "joyful"

    @pytest.mark.asyncio
    async def test_unavailable_provider_is_not_called(self, joyful_analysis):
        provider = FakeProvider(available=False)
        orchestrator = GenerationOrchestrator(provider)

        result = await orchestrator.generate(joyful_analysis, "watercolor", 6, "16:9")

        assert result.source == ResultSource.FALLBACK
        assert provider.generate_calls == []

    @pytest.mark.asyncio
    async def test_failing_probe_means_unavailable(self, joyful_analysis):
        provider = FakeProvider(available=ConnectionError("dns failure"))
        orchestrator = GenerationOrchestrator(provider)

        result = await orchestrator.generate(joyful_analysis, "watercolor", 6, "16:9")

        assert result.source == ResultSource.FALLBACK
        assert provider.generate_calls == []

    @pytest.mark.asyncio
    async def test_unknown_style_uses_watercolor_row(self):
        orchestrator = GenerationOrchestrator(FakeProvider(available=False))

        result = await orchestrator.generate(analysis_with(["wandering"]), "foo", 6, "16:9")

        assert result.video_url == FallbackSelector().select("watercolor", "mysterious")
        assert result.style == "foo"

    @pytest.mark.asyncio
    async def test_result_carries_request_fields(self, joyful_analysis):
        orchestrator = GenerationOrchestrator(FakeProvider(available=False))

        result = await orchestrator.generate(joyful_analysis, "cyberpunk", 8, "9:16")

        assert (result.style, result.duration_seconds, result.aspect_ratio) == ("cyberpunk", 8, "9:16")

    @pytest.mark.asyncio
    async def test_fallback_duration_clamped(self, joyful_analysis):
        orchestrator = GenerationOrchestrator(FakeProvider(available=False))

        result = await orchestrator.generate(joyful_analysis, "anime", 1, "16:9")

        assert result.duration_seconds == 3


class TestCancellation:
    """Cancellation is not converted into a fallback."""

    @pytest.mark.asyncio
    async def test_cancel_propagates(self, joyful_analysis):
        orchestrator = GenerationOrchestrator(FakeProvider(outcome=GenerationCancelled("task-1")))

        with pytest.raises(GenerationCancelled):
            await orchestrator.generate(
                joyful_analysis, "anime", 6, "16:9", cancel_event=asyncio.Event()
            )


class TestServiceStatus:
    """Tests for service_status."""

    @pytest.mark.asyncio
    async def test_status(self):
        status = await GenerationOrchestrator(FakeProvider(available=False)).service_status()

        assert status["primary"]["name"] == "FakeProvider"
        assert status["primary"]["available"] is False
        assert status["fallback"]["available"] is True


class TestWithMockProvider:
    """Same guarantees with a unittest.mock provider."""

    @pytest.mark.asyncio
    async def test_timeout_falls_back(self, joyful_analysis):
        provider = MagicMock()
        provider.is_available = AsyncMock(return_value=True)
        provider.generate = AsyncMock(side_effect=TimedOut("task-1", 40))

        result = await GenerationOrchestrator(provider).generate(joyful_analysis, "ghibli", 6, "16:9")

        assert result.source == ResultSource.FALLBACK
        provider.generate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_probe_is_awaited_once(self, joyful_analysis):
        provider = MagicMock()
        provider.is_available = AsyncMock(return_value=False)
        provider.generate = AsyncMock()

        await GenerationOrchestrator(provider).generate(joyful_analysis, "ghibli", 6, "16:9")

        provider.is_available.assert_awaited_once()
        provider.generate.assert_not_awaited()
