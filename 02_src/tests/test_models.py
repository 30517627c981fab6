"""Tests for data models."""

from datetime import datetime, timezone

import pytest

from netlog.errors import AlreadyTerminal
from netlog.models import (
    ChangeKind,
    ChangeNotice,
    Event,
    EventStatus,
    Request,
    Response,
)


class TestRequest:
    """Tests for Request model."""

    def test_create_request(self):
        """Test creating a Request with defaults."""
        req = Request(method="GET", uri="https://example.com/a")
        assert req.method == "GET"
        assert req.uri == "https://example.com/a"
        assert req.headers == {}
        assert req.body is None

    def test_headers_keep_order(self):
        """Test that headers preserve insertion order."""
        req = Request(
            method="POST",
            uri="https://example.com",
            headers={"b": "2", "a": "1", "c": "3"},
            body={"key": ["value"]},
        )
        assert list(req.headers) == ["b", "a", "c"]
        assert req.body == {"key": ["value"]}


class TestEvent:
    """Tests for Event model."""

    def test_create_pending_event(self):
        """Test that a new event is pending with id and timestamp."""
        before = datetime.now(timezone.utc)
        event = Event(request=Request(method="GET", uri="https://example.com"))
        after = datetime.now(timezone.utc)

        assert event.id
        assert before <= event.timestamp <= after
        assert event.response is None
        assert event.error is None
        assert event.status is EventStatus.PENDING
        assert not event.is_terminal

    def test_ids_are_unique(self):
        """Test that every event gets its own identity."""
        ids = {Event().id for _ in range(100)}
        assert len(ids) == 100

    def test_with_response(self):
        """Test the pending -> completed transition."""
        event = Event(request=Request(method="GET", uri="https://example.com"))
        done = event.with_response(Response(status_code=200, status_message="OK"))

        assert done.id == event.id
        assert done.timestamp == event.timestamp
        assert done.request == event.request
        assert done.status is EventStatus.COMPLETED
        assert done.is_terminal
        # Original value untouched
        assert event.status is EventStatus.PENDING

    def test_with_error(self):
        """Test the pending -> failed transition."""
        event = Event(request=Request(method="GET", uri="https://example.com"))
        failed = event.with_error(ConnectionError("refused"))

        assert failed.id == event.id
        assert failed.status is EventStatus.FAILED
        assert isinstance(failed.error, ConnectionError)

    def test_terminal_event_cannot_transition_again(self):
        """Test that a terminal event rejects a second outcome."""
        done = Event().with_response(Response(status_code=204))

        with pytest.raises(AlreadyTerminal):
            done.with_response(Response(status_code=500))
        with pytest.raises(AlreadyTerminal):
            done.with_error("timeout")

    def test_failed_event_cannot_complete(self):
        """Test that a failed event rejects a response."""
        failed = Event().with_error("timeout")

        with pytest.raises(AlreadyTerminal):
            failed.with_response(Response(status_code=200))

    def test_response_and_error_are_exclusive(self):
        """Test that an event cannot carry both outcomes."""
        with pytest.raises(ValueError):
            Event(response=Response(status_code=200), error="boom")

    def test_with_error_requires_value(self):
        """Test that None is not a valid error."""
        with pytest.raises(ValueError):
            Event().with_error(None)


class TestChangeNotice:
    """Tests for ChangeNotice model."""

    def test_clear_notice_has_no_event(self):
        """Test creating a CLEARED notice."""
        notice = ChangeNotice(ChangeKind.CLEARED)
        assert notice.kind is ChangeKind.CLEARED
        assert notice.event is None

    def test_kind_values(self):
        """Test ChangeKind string values."""
        assert ChangeKind.APPENDED.value == "appended"
        assert ChangeKind.UPDATED.value == "updated"
        assert ChangeKind.CLEARED.value == "cleared"
        assert ChangeKind.TOUCHED.value == "touched"
