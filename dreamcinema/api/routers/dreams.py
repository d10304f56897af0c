"""Dreams router: analysis, video generation and service status."""

import asyncio

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from dreamcinema.api.deps import get_service, limiter
from dreamcinema.api.schemas import (
    AnalyzeDreamInput,
    DreamSummaryOutput,
    GenerateVideoInput,
    GenerateVideoOutput,
)
from dreamcinema.core.config import get_settings
from dreamcinema.core.exceptions import GenerationCancelled
from dreamcinema.core.logging_config import get_logger
from dreamcinema.service import DreamVideoService

logger = get_logger("api.dreams")

router = APIRouter()

# Seconds between client-disconnect checks during a generation
DISCONNECT_CHECK_INTERVAL = 1.0

# nginx convention for "client closed request"
CLIENT_CLOSED_REQUEST = 499


async def _watch_disconnect(request: Request, cancel_event: asyncio.Event) -> None:
    """Set cancel_event once the client goes away."""
    while not cancel_event.is_set():
        await asyncio.sleep(DISCONNECT_CHECK_INTERVAL)
        if await request.is_disconnected():
            logger.info("Client disconnected, cancelling generation")
            cancel_event.set()


@router.post("/analyze", response_model=DreamSummaryOutput)
async def analyze_dream(
    body: AnalyzeDreamInput,
    service: DreamVideoService = Depends(get_service),
):
    """Analyse dream text without generating a video."""
    summary = service.describe(body.text, body.emotions)
    return summary.to_dict()


@router.post("/generate", response_model=GenerateVideoOutput)
@limiter.limit(get_settings().generate_rate_limit)
async def generate_video(
    request: Request,
    body: GenerateVideoInput,
    service: DreamVideoService = Depends(get_service),
):
    """
    Generate a video for a dream.

    Always answers with a playable URL unless the text is rejected (422) or
    the client disconnects mid-generation.
    """
    cancel_event = asyncio.Event()
    watcher = asyncio.create_task(_watch_disconnect(request, cancel_event))
    try:
        result = await service.generate(
            body.text,
            body.emotions,
            body.style,
            body.duration,
            body.aspect_ratio,
            cancel_event=cancel_event,
        )
    except GenerationCancelled as e:
        return JSONResponse(
            status_code=CLIENT_CLOSED_REQUEST,
            content={"error": e.message, "details": e.details},
        )
    finally:
        watcher.cancel()

    logger.info(f"Generated {result.source.value} video for style '{result.style}'")
    return result.to_dict()


@router.get("/status")
async def service_status(service: DreamVideoService = Depends(get_service)):
    """Provider availability plus static service info."""
    status = await service.service_status()
    return {"status": status, "info": service.service_info()}
