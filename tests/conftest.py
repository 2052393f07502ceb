"""Pytest fixtures for tests."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from app import create_app
from app.config import TestingConfig


@pytest.fixture
def app():
    """Flask app built from the testing configuration."""
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


class ScriptedBytes:
    """Byte source that replays fixed values and records each request size."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.requests: list[int] = []

    def __call__(self, n: int) -> bytes:
        self.requests.append(n)
        value = self._values.pop(0)
        return value.to_bytes(n, "big")


@pytest.fixture
def scripted_bytes():
    """Factory for a replaying byte source."""
    return ScriptedBytes
