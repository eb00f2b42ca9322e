"""Shared test fixtures for the logproxy test suite."""

import io

import pytest

from logproxy import LoggingManager
from logproxy import manager as _manager_mod
from logproxy.context import container as _container_mod
from logproxy.context import install_contextvar_provider


# ---------------------------------------------------------------------------
# Test appenders
# ---------------------------------------------------------------------------
class RecordingAppender:
    """Appender that keeps every record it receives."""

    def __init__(self, name="recording"):
        self.name = name
        self.records = []

    def append(self, record):
        self.records.append(record)

    @property
    def messages(self):
        return [r.message for r in self.records]

    def __repr__(self):
        return f"RecordingAppender({self.name!r})"


class FailingAppender:
    """Appender whose append() always raises."""

    def __init__(self, error=None):
        self.error = error or RuntimeError("disk full")
        self.calls = 0

    def append(self, record):
        self.calls += 1
        raise self.error

    def __repr__(self):
        return "FailingAppender()"


# ---------------------------------------------------------------------------
# Global state resets
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_globals():
    """Reset the manager singleton and context provider between tests."""
    old_manager = _manager_mod._manager
    old_provider = _container_mod._provider
    _manager_mod._manager = None
    _container_mod.set_provider(None)
    yield
    _manager_mod._manager = old_manager
    _container_mod._provider = old_provider


# ---------------------------------------------------------------------------
# Manager fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def diagnostics():
    """A StringIO buffer capturing the manager's diagnostic output."""
    return io.StringIO()


@pytest.fixture
def appender():
    return RecordingAppender("global")


@pytest.fixture
def manager(appender, diagnostics):
    """A fresh LoggingManager with one recording appender (root level info)."""
    mgr = LoggingManager(file=diagnostics)
    mgr.set_appenders(appender)
    return mgr


@pytest.fixture
def provider():
    """Install the contextvars provider for the duration of a test."""
    return install_contextvar_provider()
