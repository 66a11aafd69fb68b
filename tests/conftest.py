"""Pytest configuration and fixtures."""

import asyncio
import os

import pytest


def pytest_configure(config):
    """Set up test environment variables before tests run."""
    os.environ.setdefault("GOOGLE_PROJECT_ID", "test-project")
    os.environ.setdefault("GOOGLE_LOCATION", "us-central1")
    os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret")


class StubTextGenerator:
    """Deterministic text generator that records every instruction."""

    def __init__(self, response: str = "", error: Exception | None = None, state=None):
        self.response = response
        self.error = error
        self.state = state
        self.calls: list[tuple[str, str | None]] = []
        self.phase_during_call = None

    async def agenerate(self, instruction: str, model: str | None = None) -> str:
        self.calls.append((instruction, model))
        if self.state is not None:
            self.phase_during_call = self.state.phase
        if self.error is not None:
            raise self.error
        return self.response


class BlockingTextGenerator:
    """Text generator that waits until released.

    Create it inside a running event loop so the Event binds to that loop.
    """

    def __init__(self, response: str = ""):
        self.response = response
        self.calls: list[str] = []
        self.release = asyncio.Event()

    async def agenerate(self, instruction: str, model: str | None = None) -> str:
        self.calls.append(instruction)
        await self.release.wait()
        return self.response


SAMPLE_RESPONSE = "Luna Boutique\n\nStarlight Goods\nCozy Corner  \n"


@pytest.fixture
def stub_generator():
    """Provide a stub generator returning three names."""
    return StubTextGenerator(SAMPLE_RESPONSE)


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from src.config import Settings

    return Settings(
        google_project_id="test-project",
        google_location="us-central1",
        session_secret_key="test-session-secret",
    )


@pytest.fixture
def stub_factory():
    """Provide the StubTextGenerator class for custom responses."""
    return StubTextGenerator


@pytest.fixture
def blocking_factory():
    """Provide the BlockingTextGenerator class."""
    return BlockingTextGenerator
