"""
Tests for Dream Video Service

Tests for dreamcinema/service.py
"""

import httpx
import pytest

from dreamcinema.core.constants import ResultSource
from dreamcinema.core.exceptions import ValidationError
from dreamcinema.service import DreamVideoService
from dreamcinema.video.fallback_selector import FallbackSelector
from dreamcinema.video.orchestrator import GenerationOrchestrator

VIDEO_URL = "https://cdn.provider.test/video/task-1.mp4"


@pytest.fixture
def happy_handler(provider_responses):
    """Provider that is available and finishes after one processing poll."""
    polls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/models"):
            return httpx.Response(200, json={"data": []})
        if request.method == "POST":
            return provider_responses.ok({"task_id": "task-1"})
        polls["count"] += 1
        if polls["count"] == 1:
            return provider_responses.ok({"task_id": "task-1", "status": "processing"})
        return provider_responses.ok(
            {"task_id": "task-1", "status": "success", "video_url": VIDEO_URL}
        )

    return handler


@pytest.fixture
def make_service(settings, make_provider):
    def make(handler, provider_settings=None):
        provider = make_provider(handler, provider_settings=provider_settings)
        return DreamVideoService(
            settings=provider_settings or settings,
            orchestrator=GenerationOrchestrator(provider),
        )
    return make


class TestValidation:
    """Bad input is rejected before any network activity."""

    @pytest.mark.asyncio
    async def test_short_text(self, make_service, happy_handler, recorded_requests):
        service = make_service(happy_handler)

        with pytest.raises(ValidationError):
            await service.generate("short", [], "watercolor", 6, "16:9")

        assert len(recorded_requests) == 0

    @pytest.mark.asyncio
    async def test_long_text(self, make_service, happy_handler, recorded_requests):
        service = make_service(happy_handler)

        with pytest.raises(ValidationError):
            await service.generate("x" * 501, [], "watercolor", 6, "16:9")

        assert len(recorded_requests) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("length", [10, 500])
    async def test_length_bounds_accepted(self, make_service, happy_handler, length):
        service = make_service(happy_handler)

        result = await service.generate("a" * length, [], "watercolor", 6, "16:9")

        assert result.source == ResultSource.PROVIDER

    @pytest.mark.asyncio
    async def test_padding_does_not_count(self, make_service, happy_handler, recorded_requests):
        service = make_service(happy_handler)

        with pytest.raises(ValidationError):
            await service.generate("   short   ", [], "watercolor", 6, "16:9")

        assert recorded_requests == []


class TestGenerate:
    """End-to-end generation through the mock provider."""

    @pytest.mark.asyncio
    async def test_provider_video(self, make_service, happy_handler, recorded_requests,
                                  sample_dream_text, provider_responses):
        service = make_service(happy_handler)

        result = await service.generate(sample_dream_text, ["joy"], "ghibli", 6, "16:9")

        assert result.source == ResultSource.PROVIDER
        assert result.video_url == VIDEO_URL
        submit = next(r for r in recorded_requests if r.method == "POST")
        payload = provider_responses.request_json(submit)
        assert payload["style"] == "ghibli"
        assert "Studio Ghibli style" in payload["prompt"]

    @pytest.mark.asyncio
    async def test_unconfigured_falls_back(self, make_service, happy_handler, recorded_requests,
                                           unconfigured_settings, sample_dream_text):
        service = make_service(happy_handler, provider_settings=unconfigured_settings)

        result = await service.generate(sample_dream_text, ["joy"], "anime", 6, "16:9")

        assert result.source == ResultSource.FALLBACK
        assert result.video_url == FallbackSelector().select("anime", "joyful")
        assert recorded_requests == []

    @pytest.mark.asyncio
    async def test_unknown_aspect_ratio(self, make_service, happy_handler, sample_dream_text,
                                        recorded_requests, provider_responses):
        service = make_service(happy_handler)

        result = await service.generate(sample_dream_text, [], "anime", 6, "2:1")

        assert result.aspect_ratio == "16:9"
        submit = next(r for r in recorded_requests if r.method == "POST")
        assert provider_responses.request_json(submit)["aspect_ratio"] == "16:9"

    @pytest.mark.asyncio
    async def test_result_reports_clamped_duration(self, make_service, happy_handler,
                                                   recorded_requests, sample_dream_text,
                                                   provider_responses):
        service = make_service(happy_handler)

        result = await service.generate(sample_dream_text, ["joy"], "anime", 30, "16:9")

        submit = next(r for r in recorded_requests if r.method == "POST")
        assert provider_responses.request_json(submit)["duration"] == 10
        assert result.source == ResultSource.PROVIDER
        assert result.duration_seconds == 10

    @pytest.mark.asyncio
    async def test_server_errors_fall_back(self, make_service, sample_dream_text):
        service = make_service(lambda request: httpx.Response(500, text="down"))

        result = await service.generate(sample_dream_text, ["joy"], "anime", 6, "16:9")

        assert result.source == ResultSource.FALLBACK


class TestOptions:
    """Tests for option listings and metadata."""

    def test_listings(self, make_service, happy_handler):
        service = make_service(happy_handler)

        assert "anime" in service.list_styles()
        assert len(service.list_durations()) == 5
        assert len(service.list_aspect_ratios()) == 5
        assert service.estimate_time(6, "ghibli") == 87000

    def test_describe(self, make_service, happy_handler, sample_dream_text):
        summary = make_service(happy_handler).describe(sample_dream_text, ["joy"])
        assert "freedom" in summary.analysis.dominant_themes

    def test_service_info(self, make_service, happy_handler):
        info = make_service(happy_handler).service_info()

        assert info["style_count"] == 21
        assert info["primary_provider"]["configured"] is True

    @pytest.mark.asyncio
    async def test_service_status(self, make_service, happy_handler):
        status = await make_service(happy_handler).service_status()
        assert status["primary"]["available"] is True
