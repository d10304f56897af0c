"""
Dream Video Service

Collaborator-facing facade: option listings, time estimates, dream analysis
and the single generate entry point. Screens and the HTTP API call this;
they never talk to the provider client directly.
"""

import asyncio
from typing import Any, Dict, Iterable, List, Optional

from dreamcinema.analysis.dream_summary import describe_dream
from dreamcinema.analysis.models import DreamAnalysis, DreamSummary
from dreamcinema.analysis.text_analyzer import TextAnalyzer
from dreamcinema.core.config import Settings, get_settings
from dreamcinema.core.constants import DEFAULT_ASPECT_RATIO
from dreamcinema.core.logging_config import get_logger
from dreamcinema.video import style_catalog
from dreamcinema.video.models import GenerationRequest, GenerationResult, validate_dream_text
from dreamcinema.video.orchestrator import GenerationOrchestrator
from dreamcinema.video.provider_client import HailuoProviderClient

logger = get_logger("service")


class DreamVideoService:
    """
    Composes analyzer, orchestrator and provider client.

    Usage:
        async with DreamVideoService() as service:
            result = await service.generate(text, ["joy"], "ghibli", 6, "16:9")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        orchestrator: Optional[GenerationOrchestrator] = None,
        analyzer: Optional[TextAnalyzer] = None,
    ):
        self.settings = settings or get_settings()
        self.analyzer = analyzer or TextAnalyzer()
        if orchestrator is None:
            orchestrator = GenerationOrchestrator(HailuoProviderClient(self.settings))
        self.orchestrator = orchestrator

    async def aclose(self) -> None:
        await self.orchestrator.provider.aclose()

    async def __aenter__(self) -> "DreamVideoService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # -------------------------------------------------------------------------
    # Options
    # -------------------------------------------------------------------------

    def list_styles(self) -> Dict[str, List[Dict[str, str]]]:
        return style_catalog.styles()

    def list_durations(self) -> List[Dict[str, object]]:
        return style_catalog.durations()

    def list_aspect_ratios(self) -> List[Dict[str, str]]:
        return style_catalog.aspect_ratios()

    def estimate_time(self, duration_seconds: int, style_id: str) -> int:
        """Estimated provider turnaround in milliseconds."""
        return style_catalog.estimated_generation_time_ms(duration_seconds, style_id)

    # -------------------------------------------------------------------------
    # Analysis
    # -------------------------------------------------------------------------

    def analyze(self, text: str, emotion_tags: Optional[Iterable[str]] = None) -> DreamAnalysis:
        return self.analyzer.analyze(text, emotion_tags)

    def describe(self, text: str, emotion_tags: Optional[Iterable[str]] = None) -> DreamSummary:
        """Analysis plus title, keywords and recurring flag."""
        return describe_dream(text, emotion_tags, analyzer=self.analyzer)

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    async def generate(
        self,
        text: str,
        emotion_tags: Optional[Iterable[str]],
        style_id: str,
        duration_seconds: int,
        aspect_ratio_id: str,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationResult:
        """
        Turn dream text into a playable video.

        Raises:
            ValidationError: text outside 10-500 characters, raised before any
                network activity
            GenerationCancelled: cancel_event was set
        """
        validate_dream_text(text)

        if not style_catalog.is_known_aspect_ratio(aspect_ratio_id):
            logger.warning(
                f"Unknown aspect ratio '{aspect_ratio_id}', using {DEFAULT_ASPECT_RATIO}"
            )
            aspect_ratio_id = DEFAULT_ASPECT_RATIO

        request = GenerationRequest(
            prompt=text,
            style=style_id,
            duration_seconds=duration_seconds,
            aspect_ratio=aspect_ratio_id,
        )
        tags = list(emotion_tags or [])
        analysis = self.analyzer.analyze(request.prompt, tags)

        return await self.orchestrator.generate(
            analysis,
            request.style,
            request.duration_seconds,
            request.aspect_ratio,
            cancel_event=cancel_event,
        )

    async def service_status(self) -> Dict[str, Any]:
        return await self.orchestrator.service_status()

    def service_info(self) -> Dict[str, Any]:
        return {
            "name": "Dream Cinema Video Service",
            "primary_provider": self.orchestrator.provider.service_info(),
            "fallback_provider": "Curated Video Library",
            "style_count": len(style_catalog.STYLES),
            "style_categories": len(style_catalog.STYLE_CATEGORIES),
            "aspect_ratios": len(style_catalog.ASPECT_RATIOS),
            "duration_range": "3-10 seconds",
        }
