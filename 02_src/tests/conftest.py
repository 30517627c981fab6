"""Pytest configuration and fixtures."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def event_log():
    """Create an independent EventLog for each test."""
    from netlog.event_log import EventLog

    return EventLog()


@pytest.fixture
def make_event():
    """Factory for pending events."""
    from netlog.models import Event, Request

    def _make(uri: str = "https://api.example.com/items", method: str = "GET", **kwargs):
        return Event(request=Request(method=method, uri=uri), **kwargs)

    return _make


@pytest.fixture
def recorder():
    """Callback that records every notice it receives."""

    class Recorder:
        def __init__(self):
            self.notices = []

        def __call__(self, notice):
            self.notices.append(notice)

        @property
        def kinds(self):
            return [n.kind for n in self.notices]

    return Recorder()


@pytest.fixture
def frozen_now():
    """A fixed UTC instant used as 'now'."""
    return datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def ago(frozen_now):
    """Timestamp helper relative to frozen_now."""

    def _ago(**kwargs):
        return frozen_now - timedelta(**kwargs)

    return _ago


@pytest_asyncio.fixture
async def application(event_log):
    """Create and start an Application over an independent log."""
    from netlog.app import Application

    app = Application(event_log=event_log)
    await app.start()
    yield app
    await app.stop()


@pytest_asyncio.fixture
async def client(application):
    """HTTP client wired to the FastAPI app in-process."""
    from netlog.api import create_fastapi_app

    fastapi_app = create_fastapi_app(application)
    transport = httpx.ASGITransport(app=fastapi_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
