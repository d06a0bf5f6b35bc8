"""Shared pytest fixtures for Profile Image Generator tests."""

import base64
import random
from collections.abc import Callable

import httpx
import pytest

from profilegen.core.config import ProfilegenConfig
from profilegen.core.controller import RequestController
from profilegen.core.retry import RetryPolicy
from profilegen.ui.models import UIState


class RecordingSleep:
    """Async stand-in for asyncio.sleep that records requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class ScriptedEndpoint:
    """Mock predict endpoint returning a scripted sequence of responses.

    Each script entry is either an ``httpx.Response`` or an exception instance
    that is raised as a transport error. The last entry repeats once the
    script runs out.
    """

    def __init__(self, script: list):
        self.script = script
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.script[min(len(self.requests), len(self.script)) - 1]
        if isinstance(step, Exception):
            raise step
        # Fresh response per request; scripted entries may repeat
        return httpx.Response(step.status_code, headers=step.headers, content=step.content)

    @property
    def attempts(self) -> int:
        return len(self.requests)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def success_response(image_bytes: bytes) -> httpx.Response:
    """Build a predict response carrying ``image_bytes``."""
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return httpx.Response(200, json={"predictions": [{"bytesBase64Encoded": encoded}]})


@pytest.fixture
def test_config(monkeypatch) -> ProfilegenConfig:
    """Create a test configuration independent of the environment.

    Returns:
        ProfilegenConfig instance for testing
    """
    for name in ("API_KEY", "API_BASE_URL", "MODEL", "MAX_ATTEMPTS", "FAILURE_MESSAGE"):
        monkeypatch.delenv(f"PROFILEGEN_{name}", raising=False)

    return ProfilegenConfig(
        api_base_url="https://images.example.test/v1beta",
        model="test-model",
        api_key="test-key",
        request_timeout=5.0,
        _env_file=None,
    )


@pytest.fixture
def png_bytes() -> bytes:
    """Bytes that look like a small PNG file."""
    return b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 4


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_controller(
    test_config: ProfilegenConfig, recording_sleep: RecordingSleep
) -> Callable[[ScriptedEndpoint], RequestController]:
    """Factory for controllers wired to a scripted endpoint.

    Backoff sleeps are recorded instead of awaited and jitter uses a seeded
    random source.
    """

    def _make(endpoint: ScriptedEndpoint, **kwargs) -> RequestController:
        kwargs.setdefault("retry_policy", RetryPolicy.from_config(test_config))
        return RequestController(
            test_config,
            transport=endpoint.transport,
            sleep=recording_sleep,
            rng=random.Random(1234),
            **kwargs,
        )

    return _make


@pytest.fixture
def ui_state(tmp_path) -> UIState:
    """Create idle UI state for testing.

    The session image directory lives under pytest's tmp_path, so tests
    never write into the system temp directory.
    """
    return UIState(image_dir=tmp_path / "session")


@pytest.fixture
def scripted_endpoint() -> Callable[[list], ScriptedEndpoint]:
    """Factory for mock predict endpoints."""
    return ScriptedEndpoint


@pytest.fixture
def make_success() -> Callable[[bytes], httpx.Response]:
    """Factory for successful predict responses."""
    return success_response
