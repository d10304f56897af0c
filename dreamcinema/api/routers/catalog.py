"""Catalog router: style, duration and aspect-ratio options."""

from fastapi import APIRouter, Depends, Query

from dreamcinema.api.deps import get_service
from dreamcinema.api.schemas import EstimateOutput
from dreamcinema.core.constants import DEFAULT_DURATION_SECONDS, DEFAULT_STYLE
from dreamcinema.service import DreamVideoService

router = APIRouter()


@router.get("/styles")
async def list_styles(service: DreamVideoService = Depends(get_service)):
    """Styles grouped by category."""
    return {"styles": service.list_styles()}


@router.get("/durations")
async def list_durations(service: DreamVideoService = Depends(get_service)):
    return {"durations": service.list_durations()}


@router.get("/aspect-ratios")
async def list_aspect_ratios(service: DreamVideoService = Depends(get_service)):
    return {"aspect_ratios": service.list_aspect_ratios()}


@router.get("/estimate", response_model=EstimateOutput)
async def estimate_time(
    duration: int = Query(DEFAULT_DURATION_SECONDS, ge=1),
    style: str = Query(DEFAULT_STYLE),
    service: DreamVideoService = Depends(get_service),
):
    """Estimated generation time in milliseconds."""
    return EstimateOutput(
        duration=duration,
        style=style,
        estimated_ms=service.estimate_time(duration, style),
    )
