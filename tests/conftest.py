"""Pytest fixtures and shared test configuration.

Fixtures:
    - async_client: HTTPX client for API testing
    - agent_config: AgentConfig with a fake key, independent of the environment
    - scripted_generator: Response generator whose replies are controlled by the test
"""

import asyncio
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from gemini_chatbox.agent.config import AgentConfig
from gemini_chatbox.api import app


class ScriptedGenerator:
    """Stand-in for the agent service.

    Replies with `reply`, or raises `error` if set. When `hold` is set the
    call blocks until `release()` is called, so tests can inspect a pending
    turn.
    """

    def __init__(
        self,
        reply: str = "",
        error: BaseException | None = None,
        hold: bool = False,
    ) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[str] = []
        self.started = asyncio.Event()
        self._released = asyncio.Event()
        if not hold:
            self._released.set()

    def release(self) -> None:
        self._released.set()

    async def get_response(self, message: str) -> str:
        self.calls.append(message)
        self.started.set()
        await self._released.wait()
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def scripted_generator() -> type[ScriptedGenerator]:
    """Return the ScriptedGenerator class for building per-test generators."""
    return ScriptedGenerator


@pytest.fixture
def agent_config() -> AgentConfig:
    """Config with explicit values so tests never read the real environment."""
    return AgentConfig(
        api_key="test-gemini-key",
        model_name="gemini-2.0-flash",
        temperature=1.0,
        request_timeout=5.0,
    )


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
