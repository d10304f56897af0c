"""
Dream Cinema Constants

Enumerations and limits shared across the pipeline.
"""

from enum import Enum

# =============================================================================
# VERSION INFO
# =============================================================================
VERSION = "1.0.0"
PROJECT_NAME = "Dream Cinema"

# =============================================================================
# INPUT LIMITS
# =============================================================================
MIN_DREAM_TEXT_LENGTH = 10
MAX_DREAM_TEXT_LENGTH = 500

# Provider-supported clip length, in seconds
MIN_DURATION_SECONDS = 3
MAX_DURATION_SECONDS = 10
DEFAULT_DURATION_SECONDS = 6

DEFAULT_STYLE = "realistic"
DEFAULT_ASPECT_RATIO = "16:9"

# =============================================================================
# ANALYSIS
# =============================================================================

class ElementType(str, Enum):
    """Categories of detected dream elements."""
    ENVIRONMENT = "environment"
    OBJECTS = "objects"
    ACTIONS = "actions"
    EMOTIONS = "emotions"


MOOD_MIN = 0.1
MOOD_MAX = 0.9
MOOD_NEUTRAL = 0.5

MAX_THEMES = 4
MAX_PALETTE_COLORS = 6

# =============================================================================
# GENERATION
# =============================================================================

class EmotionalTone(str, Enum):
    """Coarse tone used to key the fallback library."""
    JOYFUL = "joyful"
    DRAMATIC = "dramatic"
    PEACEFUL = "peaceful"
    MYSTERIOUS = "mysterious"


class ResultSource(str, Enum):
    """Where a returned video came from."""
    PROVIDER = "provider"
    FALLBACK = "fallback"


class JobState(str, Enum):
    """Lifecycle of one remote generation job."""
    SUBMITTED = "submitted"
    POLLING = "polling"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self not in (JobState.SUBMITTED, JobState.POLLING)


class ProviderStatus(str, Enum):
    """Task status values reported by the provider."""
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"
