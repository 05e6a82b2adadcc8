"""
Shared test fixtures and helpers for the chaining test suite.

Provides a fresh context, a call-recording action factory, and a structlog
reset so configuration made by one test never leaks into another.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

import pytest
import structlog

from chaining import Context, new_context


@dataclass
class RecordingAction:
    """
    Canonical-shape action that remembers every value injected into it.

    Returns a fixed (result, error) pair, so tests can prove whether and
    with what the dispatcher invoked it.
    """

    result: Any = None
    error: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, value: Any) -> tuple[Any, Any]:
        self.calls.append(value)
        return self.result, self.error

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture()
def ctx() -> Context:
    """Return a freshly constructed context bound to the canonical dispatcher."""
    return new_context()


@pytest.fixture()
def recording_action() -> Callable[..., RecordingAction]:
    """Factory for RecordingAction instances returning the given result and error."""

    def _make(result: Any = None, error: Any = None) -> RecordingAction:
        return RecordingAction(result=result, error=error)

    return _make


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() a test performed."""
    yield
    structlog.reset_defaults()
