"""Pytest configuration and fixtures for appcontext tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from appcontext import context
from appcontext.config import HolderConfig
from appcontext.logger import reset_logger


@pytest.fixture(autouse=True)
def clean_default_holder() -> Iterator[None]:
    """Reset the process-wide holder and logger before and after each test for isolation."""
    context.configure(HolderConfig())
    context.reset()
    reset_logger()
    yield
    context.configure(HolderConfig())
    context.reset()
    reset_logger()


class FakeApplication:
    """Stand-in for a host application object."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"FakeApplication({self.name!r})"
