"""
Startup validation and environment checks.

A missing provider key is only a warning: generation still works through
the curated fallback library.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .config import Settings, get_settings


@dataclass
class ValidationResult:
    """Result of environment validation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def validate_environment(settings: Optional[Settings] = None) -> ValidationResult:
    """
    Validate the environment configuration.

    Checks:
    - Provider API key is present (warning if missing)
    - Provider base URL is an http(s) URL
    - Polling policy values are usable

    Returns:
        ValidationResult with validation status and any errors/warnings
    """
    settings = settings or get_settings()
    errors = []
    warnings = []

    if not settings.has_provider_key:
        warnings.append(
            "HAILUOAI_API_KEY not set - videos will come from the curated fallback library"
        )

    if not settings.provider_base_url.startswith(("http://", "https://")):
        errors.append(f"provider_base_url must be an http(s) URL, got '{settings.provider_base_url}'")

    if settings.poll_max_attempts < 1:
        errors.append("poll_max_attempts must be at least 1")
    if settings.network_max_retries < 0:
        errors.append("network_max_retries cannot be negative")
    if settings.poll_growth < 1.0:
        warnings.append("poll_growth below 1.0 shrinks the wait between polls")

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings
    )
