"""
Backoff utilities for provider polling.

Bounded exponential backoff for "still processing" polls and a flat
backoff for failed status calls, plus a cancellable wait primitive.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from dreamcinema.core.logging_config import get_logger

logger = get_logger("core.retry")


@dataclass(frozen=True)
class BackoffPolicy:
    """Configuration for a bounded backoff."""
    max_attempts: int = 40
    base_delay: float = 3.0  # Delay before the second attempt, in seconds
    max_delay: float = 15.0  # Ceiling for any single wait
    exponential_base: float = 1.3  # Growth per attempt, 1.0 means flat


def calculate_delay(attempt: int, policy: BackoffPolicy) -> float:
    """
    Calculate the wait after a given attempt.

    Args:
        attempt: Attempt number that just finished (1-indexed)
        policy: Backoff policy

    Returns:
        min(base_delay * exponential_base ** (attempt - 1), max_delay) in seconds
    """
    exponent = max(attempt - 1, 0)
    delay = policy.base_delay * (policy.exponential_base ** exponent)

    return min(delay, policy.max_delay)


async def wait_or_cancel(delay: float, cancel_event: Optional[asyncio.Event] = None) -> bool:
    """
    Sleep for ``delay`` seconds unless ``cancel_event`` is set first.

    Returns:
        True if the wait was interrupted by cancellation, False otherwise
    """
    if cancel_event is None:
        await asyncio.sleep(max(delay, 0.0))
        return False

    if cancel_event.is_set():
        return True

    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=max(delay, 0.0))
    except asyncio.TimeoutError:
        return False

    logger.debug(f"Wait of {delay:.2f}s interrupted by cancellation")
    return True


# Provider defaults: 3s growing by 1.3x up to 15s, 40 polls
PROVIDER_POLL_POLICY = BackoffPolicy(
    max_attempts=40,
    base_delay=3.0,
    max_delay=15.0,
    exponential_base=1.3,
)

# Failed status calls: flat 5s, 40 retries
NETWORK_RETRY_POLICY = BackoffPolicy(
    max_attempts=40,
    base_delay=5.0,
    max_delay=5.0,
    exponential_base=1.0,
)
