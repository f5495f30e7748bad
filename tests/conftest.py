"""Shared pytest fixtures for the full storeopts test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _silence_library_logging() -> Iterator[None]:
    """Restore the disabled-by-default loguru state after each test."""

    yield
    logger.remove()
    logger.disable("storeopts")
