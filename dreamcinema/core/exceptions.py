"""
Dream Cinema Custom Exceptions

Exception classes for the dream-to-video pipeline.

Only ValidationError is meant to reach collaborators as a hard failure.
Every ProviderError is caught by the orchestrator and converted into a
fallback result.
"""

from typing import Optional


class DreamCinemaError(Exception):
    """Base exception for all Dream Cinema errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# INPUT ERRORS
# =============================================================================

class ValidationError(DreamCinemaError):
    """Raised when caller input is rejected. Never retried."""

    def __init__(self, message: str, field: str = None, value=None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field


# =============================================================================
# PROVIDER ERRORS
# =============================================================================

class ProviderError(DreamCinemaError):
    """Base exception for video-generation provider errors."""
    pass


class ConfigError(ProviderError):
    """Raised when the provider credential is missing."""

    def __init__(self, setting: str):
        message = f"Provider not configured: '{setting}' is not set"
        super().__init__(message, {"setting": setting})
        self.setting = setting


class RemoteError(ProviderError):
    """Raised when the provider answers with a non-2xx HTTP status."""

    def __init__(self, status_code: int, body: str):
        message = f"Provider HTTP error {status_code}"
        super().__init__(message, {"status_code": status_code, "body": body[:500]})
        self.status_code = status_code
        self.body = body


class ProtocolError(ProviderError):
    """Raised when a 2xx response carries a non-zero base_resp status code."""

    def __init__(self, status_msg: str, status_code: Optional[int] = None):
        message = f"Provider rejected request: {status_msg}"
        super().__init__(message, {"status_code": status_code, "status_msg": status_msg})
        self.status_code = status_code
        self.status_msg = status_msg


class GenerationFailed(ProviderError):
    """Raised when the provider reports a terminal 'failed' job status."""

    def __init__(self, task_id: str):
        message = f"Video generation failed on provider for task '{task_id}'"
        super().__init__(message, {"task_id": task_id})
        self.task_id = task_id


class TimedOut(ProviderError):
    """Raised when the polling budget or deadline is exhausted."""

    def __init__(self, task_id: str, attempts: int, reason: str = "attempt budget exhausted"):
        message = f"Video generation timed out for task '{task_id}': {reason}"
        super().__init__(message, {"task_id": task_id, "attempts": attempts, "reason": reason})
        self.task_id = task_id
        self.attempts = attempts


class GenerationCancelled(ProviderError):
    """Raised when the caller cancels an in-flight generation."""

    def __init__(self, task_id: Optional[str] = None):
        message = "Video generation cancelled by caller"
        super().__init__(message, {"task_id": task_id} if task_id else None)
        self.task_id = task_id
