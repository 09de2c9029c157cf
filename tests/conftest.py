"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_qchess_logger() -> Iterator[None]:
    """`debug on` changes the package logger level; undo it between tests."""
    logger = logging.getLogger("qchess")
    level = logger.level
    yield
    logger.setLevel(level)
