"""
Hailuo Provider Client

Job-oriented async HTTP client for the MiniMax Hailuo video-generation API.
Queue-based: submit -> poll -> result.

Wire protocol:
- POST {base}/video_generation            -> {task_id, base_resp}
- GET  {base}/video_generation/{task_id}  -> {task_id, status, video_url?, base_resp}
- GET  {base}/models                      -> any 2xx means available

The provider reports domain errors inside 200 responses through
base_resp.status_code, which must be 0.

Polling budget: "still processing" polls and failed status calls are
counted separately, each against its own ceiling. Exhausting either one,
or the optional overall deadline, ends the job as TIMED_OUT.
"""

import asyncio
from typing import Any, Dict, Optional

import httpx

from dreamcinema.core.config import Settings, get_settings
from dreamcinema.core.constants import (
    JobState,
    MAX_DURATION_SECONDS,
    MIN_DURATION_SECONDS,
    ProviderStatus,
)
from dreamcinema.core.exceptions import (
    ConfigError,
    GenerationCancelled,
    GenerationFailed,
    ProtocolError,
    ProviderError,
    RemoteError,
    TimedOut,
)
from dreamcinema.core.logging_config import get_logger
from dreamcinema.core.retry import BackoffPolicy, calculate_delay, wait_or_cancel

from .models import GenerationJob, JobHandle, JobStatus

logger = get_logger("video.provider_client")

GENERATION_PATH = "video_generation"
MODELS_PATH = "models"


def clamp_duration(duration_seconds: int) -> int:
    """Clamp into the provider's supported range. Silent correction."""
    return min(max(int(duration_seconds), MIN_DURATION_SECONDS), MAX_DURATION_SECONDS)


class HailuoProviderClient:
    """
    Client for one external video-generation provider.

    The HTTP client is injected or created lazily and owned by this object;
    close it with ``aclose()`` or use the client as an async context manager.
    """

    PROVIDER_NAME = "HailuoAI"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        poll_policy: Optional[BackoffPolicy] = None,
        network_retry_policy: Optional[BackoffPolicy] = None,
    ):
        self.settings = settings or get_settings()
        self.poll_policy = poll_policy or self.settings.poll_policy
        self.network_retry_policy = network_retry_policy or self.settings.network_retry_policy
        self._client = http_client
        self._owns_client = http_client is None

        if not self.settings.has_provider_key:
            logger.warning(
                f"{self.PROVIDER_NAME} API key not found. Video generation will use fallback methods."
            )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def base_url(self) -> str:
        return self.settings.provider_base_url.rstrip("/")

    @property
    def is_configured(self) -> bool:
        return self.settings.has_provider_key

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.settings.request_timeout)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HailuoProviderClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def _headers(self) -> Dict[str, str]:
        if not self.is_configured:
            raise ConfigError("HAILUOAI_API_KEY")
        return {
            "Authorization": f"Bearer {self.settings.hailuo_api_key}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def _parse(response: httpx.Response) -> Dict[str, Any]:
        """Check HTTP status and base_resp, returning the JSON body."""
        if not response.is_success:
            raise RemoteError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError:
            raise ProtocolError("response body is not JSON")

        if not isinstance(data, dict):
            raise ProtocolError("response body is not a JSON object")

        base_resp = data.get("base_resp") or {}
        if not isinstance(base_resp, dict):
            raise ProtocolError("base_resp is not an object")

        status_code = base_resp.get("status_code", 0)
        if status_code != 0:
            raise ProtocolError(base_resp.get("status_msg") or "unknown error", status_code)

        return data

    # -------------------------------------------------------------------------
    # Single calls
    # -------------------------------------------------------------------------

    async def submit(
        self,
        prompt: str,
        style: str,
        duration_seconds: int,
        aspect_ratio: str,
    ) -> JobHandle:
        """
        Submit a generation request.

        Raises:
            ConfigError: no API key configured (no network call is made)
            RemoteError: non-2xx HTTP response
            ProtocolError: non-zero base_resp status code or missing task_id
        """
        headers = self._headers()
        payload = {
            "model": self.settings.provider_model,
            "prompt": prompt,
            "duration": clamp_duration(duration_seconds),
            "aspect_ratio": aspect_ratio,
            "style": style,
        }

        logger.info(
            f"Submitting {self.PROVIDER_NAME} request: style={style}, "
            f"duration={payload['duration']}s, aspect_ratio={aspect_ratio}"
        )

        response = await self._get_client().post(
            f"{self.base_url}/{GENERATION_PATH}",
            headers=headers,
            json=payload,
        )
        data = self._parse(response)

        task_id = data.get("task_id")
        if not task_id:
            raise ProtocolError("no task_id in response")

        logger.info(f"Video generation task submitted: {task_id}")
        return JobHandle(task_id=str(task_id))

    async def poll(self, handle: JobHandle) -> JobStatus:
        """
        Fetch the current status of a job.

        Raises:
            ConfigError, RemoteError, ProtocolError: as for submit
        """
        headers = self._headers()
        response = await self._get_client().get(
            f"{self.base_url}/{GENERATION_PATH}/{handle.task_id}",
            headers=headers,
        )
        data = self._parse(response)

        raw_status = data.get("status")
        try:
            status = ProviderStatus(raw_status)
        except ValueError:
            raise ProtocolError(f"unknown task status '{raw_status}'")

        return JobStatus(
            task_id=handle.task_id,
            status=status,
            video_url=data.get("video_url") or None,
        )

    async def is_available(self) -> bool:
        """Lightweight capability check. Any failure means unavailable."""
        if not self.is_configured:
            return False

        try:
            response = await self._get_client().get(
                f"{self.base_url}/{MODELS_PATH}",
                headers=self._headers(),
                timeout=self.settings.health_check_timeout,
            )
        except httpx.HTTPError as e:
            logger.warning(f"{self.PROVIDER_NAME} service check failed: {e}")
            return False

        return response.is_success

    # -------------------------------------------------------------------------
    # Drive to completion
    # -------------------------------------------------------------------------

    async def generate(
        self,
        prompt: str,
        style: str,
        duration_seconds: int,
        aspect_ratio: str,
        cancel_event: Optional[asyncio.Event] = None,
        deadline: Optional[float] = None,
    ) -> str:
        """
        Submit a job and poll it until it reaches a terminal state.

        Args:
            prompt: Provider prompt
            style: Style id forwarded to the provider
            duration_seconds: Requested length, clamped to 3-10s
            aspect_ratio: Aspect ratio id
            cancel_event: Set by the caller to abandon the generation
            deadline: Overall budget in seconds; defaults to settings, 0 disables

        Returns:
            URL of the generated video

        Raises:
            GenerationFailed: provider reported 'failed'
            TimedOut: poll ceiling, retry ceiling or deadline exhausted
            GenerationCancelled: cancel_event was set
            ConfigError, RemoteError, ProtocolError: submission failed
        """
        if cancel_event is not None and cancel_event.is_set():
            raise GenerationCancelled()

        if deadline is None:
            deadline = self.settings.generation_deadline

        loop = asyncio.get_running_loop()
        started = loop.time()

        job = GenerationJob(handle=await self.submit(prompt, style, duration_seconds, aspect_ratio))
        task_id = job.handle.task_id
        job.transition(JobState.POLLING)

        while True:
            if cancel_event is not None and cancel_event.is_set():
                job.transition(JobState.CANCELLED)
                logger.info(f"Generation {task_id} cancelled by caller")
                raise GenerationCancelled(task_id)

            elapsed = loop.time() - started
            if deadline and elapsed >= deadline:
                job.transition(JobState.TIMED_OUT)
                raise TimedOut(
                    task_id, job.poll_attempts + job.network_failures,
                    reason=f"deadline of {deadline:.0f}s exceeded",
                )

            try:
                status = await self.poll(job.handle)
            except (ProviderError, httpx.HTTPError) as e:
                job.network_failures += 1
                logger.warning(
                    f"Status check {job.network_failures}/{self.network_retry_policy.max_attempts} "
                    f"for {task_id} failed: {e}"
                )
                if job.network_failures >= self.network_retry_policy.max_attempts:
                    job.transition(JobState.TIMED_OUT)
                    raise TimedOut(
                        task_id, job.poll_attempts + job.network_failures,
                        reason=f"status check failed {job.network_failures} times",
                    ) from e
                delay = calculate_delay(job.network_failures, self.network_retry_policy)
            else:
                job.poll_attempts += 1
                logger.info(
                    f"Attempt {job.poll_attempts}/{self.poll_policy.max_attempts} - "
                    f"Status: {status.status.value}"
                )

                if status.is_success:
                    job.transition(JobState.SUCCEEDED)
                    job.video_url = status.video_url
                    logger.info(f"Video generation completed: {status.video_url}")
                    return status.video_url

                if status.is_failed:
                    job.transition(JobState.FAILED)
                    raise GenerationFailed(task_id)

                if job.poll_attempts >= self.poll_policy.max_attempts:
                    job.transition(JobState.TIMED_OUT)
                    raise TimedOut(task_id, job.poll_attempts)

                delay = calculate_delay(job.poll_attempts, self.poll_policy)

            if deadline:
                delay = min(delay, max(deadline - (loop.time() - started), 0.0))

            if await wait_or_cancel(delay, cancel_event):
                job.transition(JobState.CANCELLED)
                logger.info(f"Generation {task_id} cancelled by caller")
                raise GenerationCancelled(task_id)

    # -------------------------------------------------------------------------
    # Info
    # -------------------------------------------------------------------------

    def service_info(self) -> Dict[str, Any]:
        return {
            "name": "HailuoAI Video Generation",
            "provider": "MiniMax",
            "model": self.settings.provider_model,
            "min_duration": MIN_DURATION_SECONDS,
            "max_duration": MAX_DURATION_SECONDS,
            "configured": self.is_configured,
        }
