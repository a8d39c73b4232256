"""
Shared test fixtures for quotable tests.
"""

import io

import pytest
import structlog

from quotable.core import config


class FailingSink:
    """Text sink that accepts `limit` writes, then raises OSError."""

    def __init__(self, limit: int = 0):
        self.limit = limit
        self.written: list[str] = []

    def write(self, s: str) -> int:
        if len(self.written) >= self.limit:
            raise OSError("No space left on device")
        self.written.append(s)
        return len(s)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the real user config and $QUOTABLE_CONFIG out of tests."""
    monkeypatch.setattr(config, "USER_CONFIG", tmp_path / "home" / ".quotable" / "config")
    monkeypatch.delenv(config.ENV_CONFIG, raising=False)
    yield
    config.configure_logging(config.Config())
    structlog.reset_defaults()


@pytest.fixture
def failing_sink():
    """Factory for sinks that fail after a number of writes."""

    def _make(limit: int = 0) -> FailingSink:
        return FailingSink(limit)

    return _make


@pytest.fixture
def render_to():
    """Render a formatter through write_to() and return the text."""

    def _render(obj) -> str:
        sink = io.StringIO()
        obj.write_to(sink)
        return sink.getvalue()

    return _render
