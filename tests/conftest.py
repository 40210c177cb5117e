"""Shared pytest fixtures for the full rot13action test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from loguru import logger

from rot13action.core import MemoryCore


@pytest.fixture
def make_memory_core() -> Callable[..., MemoryCore]:
    """Provide a factory for in-memory action cores seeded with inputs."""

    def _factory(**inputs: object) -> MemoryCore:
        """Build a core whose inputs are the given keyword arguments."""

        return MemoryCore(inputs=dict(inputs))

    return _factory


@pytest.fixture(autouse=True)
def _reset_loguru_handlers() -> Iterator[None]:
    """Drop loguru sinks bound to per-test capture streams after each test."""

    yield
    logger.remove()
