"""Tests for Application."""

import pytest

from netlog.app import Application
from netlog.event_log import EventLog, get_default_log


class TestApplicationStart:
    """Tests for Application.start()."""

    @pytest.mark.asyncio
    async def test_start_initializes_components(self):
        """Test that start initializes all components."""
        log = EventLog()
        app = Application(event_log=log)
        await app.start()

        assert app.event_log is log
        assert app.viewer.running
        assert log.channel.subscriber_count == 1

        await app.stop()

    @pytest.mark.asyncio
    async def test_start_uses_default_log(self):
        """Test that the default log is used when none is given."""
        app = Application()
        await app.start()

        assert app.event_log is get_default_log()

        await app.stop()

    @pytest.mark.asyncio
    async def test_start_twice_keeps_one_viewer(self):
        """Test that start is idempotent."""
        log = EventLog()
        app = Application(event_log=log)
        await app.start()
        viewer = app.viewer
        await app.start()

        assert app.viewer is viewer
        assert log.channel.subscriber_count == 1

        await app.stop()

    def test_properties_before_start(self):
        """Test that components are unavailable before start."""
        app = Application()

        with pytest.raises(RuntimeError, match="Application not started"):
            app.event_log
        with pytest.raises(RuntimeError, match="Application not started"):
            app.viewer

    def test_interval_from_env(self, monkeypatch):
        """Test timer intervals read from the environment."""
        monkeypatch.setenv("BLINK_PERIOD", "0.25")
        app = Application(event_log=EventLog())
        assert app._blink_period == 0.25

    def test_invalid_interval_from_env(self, monkeypatch):
        """Test that a bad interval fails fast."""
        monkeypatch.setenv("ELAPSED_TICK", "soon")
        with pytest.raises(ValueError):
            Application(event_log=EventLog())


class TestApplicationStop:
    """Tests for Application.stop()."""

    @pytest.mark.asyncio
    async def test_stop_unsubscribes(self):
        """Test that stop leaves no subscribers behind."""
        log = EventLog()
        app = Application(event_log=log)
        await app.start()
        await app.stop()

        assert log.channel.subscriber_count == 0

    @pytest.mark.asyncio
    async def test_stop_before_start(self):
        """Test that stop without start is a no-op."""
        app = Application(event_log=EventLog())
        await app.stop()


class TestApplicationReset:
    """Tests for Application.reset()."""

    @pytest.mark.asyncio
    async def test_reset_clears_log(self, application, make_event):
        """Test that reset drops all events."""
        application.event_log.append(make_event())

        await application.reset()

        assert application.event_log.current_events() == []
        assert application.viewer.snapshot.total_count == 0
