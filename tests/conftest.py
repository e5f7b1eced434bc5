"""Shared fixtures for emiterator tests."""

import pytest

from emiterator.emitter import Emitter


@pytest.fixture(params=["asyncio", "trio"])
def anyio_backend(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture
def emitter() -> Emitter:
    return Emitter()
