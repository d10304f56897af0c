"""
Pytest Configuration and Fixtures

Shared fixtures for all tests.
"""

import json
from typing import Callable, List

import httpx
import pytest

from dreamcinema.core.config import Settings
from dreamcinema.core.retry import BackoffPolicy
from dreamcinema.video.provider_client import HailuoProviderClient

TEST_BASE_URL = "https://provider.test/v1"


@pytest.fixture
def settings() -> Settings:
    """Settings with a provider key and no .env lookup."""
    return Settings(
        hailuo_api_key="test-key",
        provider_base_url=TEST_BASE_URL,
        _env_file=None,
    )


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings without a provider key."""
    return Settings(
        hailuo_api_key="",
        provider_base_url=TEST_BASE_URL,
        _env_file=None,
    )


@pytest.fixture
def instant_policy() -> Callable[[int], BackoffPolicy]:
    """Factory for zero-delay policies with a given attempt ceiling."""
    def make(max_attempts: int = 40) -> BackoffPolicy:
        return BackoffPolicy(
            max_attempts=max_attempts,
            base_delay=0.0,
            max_delay=0.0,
            exponential_base=1.0,
        )
    return make


@pytest.fixture
def sample_dream_text() -> str:
    return "I was flying through golden clouds, full of joy"


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_provider(settings, instant_policy, recorded_requests):
    """
    Build a HailuoProviderClient over an httpx.MockTransport.

    ``handler`` receives each httpx.Request and returns an httpx.Response.
    Every request is appended to ``recorded_requests``.
    """
    def make(handler, provider_settings=None, poll_attempts=40, network_retries=40):
        def recording_handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return HailuoProviderClient(
            provider_settings or settings,
            http_client=http_client,
            poll_policy=instant_policy(poll_attempts),
            network_retry_policy=instant_policy(network_retries),
        )
    return make


def ok(payload: dict) -> httpx.Response:
    """2xx provider response with a successful base_resp."""
    body = {"base_resp": {"status_code": 0, "status_msg": "success"}}
    body.update(payload)
    return httpx.Response(200, json=body)


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content.decode("utf-8"))


@pytest.fixture
def provider_responses():
    """Helpers for building provider responses in tests."""
    class Responses:
        ok = staticmethod(ok)
        request_json = staticmethod(request_json)
    return Responses
