"""
Video generation data model.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from dreamcinema.core.constants import (
    JobState,
    MAX_DREAM_TEXT_LENGTH,
    MIN_DREAM_TEXT_LENGTH,
    ProviderStatus,
    ResultSource,
)
from dreamcinema.core.exceptions import ValidationError


def validate_dream_text(text: str) -> str:
    """
    Check dream text length and return it stripped.

    Raises:
        ValidationError: if the stripped text is outside 10-500 characters
    """
    if not isinstance(text, str):
        raise ValidationError("Dream text must be a string", field="text")

    stripped = text.strip()
    if len(stripped) < MIN_DREAM_TEXT_LENGTH:
        raise ValidationError(
            f"Dream text must be at least {MIN_DREAM_TEXT_LENGTH} characters",
            field="text",
            value=len(stripped),
        )
    if len(stripped) > MAX_DREAM_TEXT_LENGTH:
        raise ValidationError(
            f"Dream text cannot exceed {MAX_DREAM_TEXT_LENGTH} characters",
            field="text",
            value=len(stripped),
        )
    return stripped


@dataclass(frozen=True)
class GenerationRequest:
    """One validated request for a dream video. Immutable once created."""
    prompt: str
    style: str
    duration_seconds: int
    aspect_ratio: str

    def __post_init__(self):
        object.__setattr__(self, "prompt", validate_dream_text(self.prompt))
        try:
            duration = int(self.duration_seconds)
        except (TypeError, ValueError):
            raise ValidationError(
                "Duration must be a whole number of seconds",
                field="duration_seconds",
                value=self.duration_seconds,
            )
        object.__setattr__(self, "duration_seconds", duration)


@dataclass(frozen=True)
class JobHandle:
    """Opaque identifier of one in-flight provider task."""
    task_id: str


@dataclass
class JobStatus:
    """One status report from the provider."""
    task_id: str
    status: ProviderStatus
    video_url: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == ProviderStatus.SUCCESS and bool(self.video_url)

    @property
    def is_failed(self) -> bool:
        return self.status == ProviderStatus.FAILED


@dataclass
class GenerationJob:
    """Lifecycle record of one provider job, discarded once terminal."""
    handle: JobHandle
    state: JobState = JobState.SUBMITTED
    poll_attempts: int = 0
    network_failures: int = 0
    video_url: Optional[str] = None

    def transition(self, state: JobState) -> None:
        if self.state.is_terminal:
            raise RuntimeError(f"Job {self.handle.task_id} already {self.state.value}")
        self.state = state


@dataclass
class GenerationResult:
    """What collaborators receive: a playable URL and how it was produced."""
    video_url: str
    source: ResultSource
    style: str
    duration_seconds: int
    aspect_ratio: str
    tone: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "video_url": self.video_url,
            "source": self.source.value,
            "style": self.style,
            "duration_seconds": self.duration_seconds,
            "aspect_ratio": self.aspect_ratio,
            "tone": self.tone,
        }
