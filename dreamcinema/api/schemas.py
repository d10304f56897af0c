"""
API request and response models.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from dreamcinema.core.constants import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_DURATION_SECONDS,
    DEFAULT_STYLE,
)


class AnalyzeDreamInput(BaseModel):
    """Dream text to analyse."""
    text: str
    emotions: List[str] = Field(default_factory=list)


class DreamElementOutput(BaseModel):
    type: str
    value: str
    prominence: float


class DreamAnalysisOutput(BaseModel):
    elements: List[DreamElementOutput]
    dominant_themes: List[str]
    suggested_palette: List[str]
    mood_score: float


class DreamSummaryOutput(BaseModel):
    """Analysis plus presentation metadata."""
    title: str
    keywords: List[str]
    is_recurring: bool
    analysis: DreamAnalysisOutput


class GenerateVideoInput(BaseModel):
    """Input for dream video generation. Text length is checked by the service."""
    text: str
    emotions: List[str] = Field(default_factory=list)
    style: str = DEFAULT_STYLE
    duration: int = DEFAULT_DURATION_SECONDS
    aspect_ratio: str = DEFAULT_ASPECT_RATIO


class GenerateVideoOutput(BaseModel):
    video_url: str
    source: str  # provider, fallback
    style: str
    duration_seconds: int
    aspect_ratio: str
    tone: Optional[str] = None


class EstimateOutput(BaseModel):
    duration: int
    style: str
    estimated_ms: int

