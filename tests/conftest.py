"""Pytest configuration and fixtures for lazy-audit tests."""

import io

import pytest
from rich.console import Console

from lazy_audit.actions.combinator import LazyAction
from lazy_audit.actions.errors import BusinessLogicError
from lazy_audit.actions.trace import ActionTracer


class RecordingAction:
    """Action stub that records every dry-run flag it was called with."""

    def __init__(self, value=None, error: Exception | None = None, name: str = "recorded") -> None:
        self.value = value
        self.error = error
        self.calls: list[bool] = []
        self.__name__ = name

    async def __call__(self, dry_run: bool):
        self.calls.append(dry_run)
        if self.error is not None:
            raise self.error
        return self.value


@pytest.fixture
def recorder():
    """Factory for RecordingAction-backed LazyActions."""

    def make(value=None, error: Exception | None = None, name: str = "recorded"):
        stub = RecordingAction(value=value, error=error, name=name)
        return stub, LazyAction(stub)

    return make


@pytest.fixture
def ok(recorder):
    return recorder(value="done", name="ok")


@pytest.fixture
def bad(recorder):
    return recorder(error=BusinessLogicError("not found"), name="bad")


@pytest.fixture
def boom(recorder):
    return recorder(error=RuntimeError("disk on fire"), name="boom")


@pytest.fixture
def trace_buffer():
    return io.StringIO()


@pytest.fixture
def tracer(trace_buffer):
    """Tracer writing into an in-memory buffer."""
    return ActionTracer(Console(file=trace_buffer, highlight=False, markup=False, soft_wrap=True))
