"""
Tests for the debug manager.
"""

import logging

import pytest

from connectfour.debug import DebugManager, DebugLevel


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


@pytest.fixture
def manager():
    manager = DebugManager(name="connectfour.test")
    handler = ListHandler()
    logging.getLogger("connectfour.test").addHandler(handler)
    manager.messages = handler.messages
    yield manager
    logging.getLogger("connectfour.test").removeHandler(handler)


class TestDebugManager:

    def test_default_level_hides_info(self, manager):
        manager.info("hidden")
        manager.warning("shown")
        assert manager.messages == ["shown"]

    def test_component_prefix(self, manager):
        manager.configure(level=DebugLevel.DEBUG)
        manager.debug("dropped", "board")
        assert manager.messages == ["[board] dropped"]

    def test_trace_prefix(self, manager):
        manager.configure(level=DebugLevel.TRACE)
        manager.trace("scan", "board")
        assert manager.messages == ["TRACE: [board] scan"]

    def test_component_filter(self, manager):
        manager.configure(level=DebugLevel.INFO, components=["match"])
        manager.info("kept", "match")
        manager.info("dropped", "board")
        assert manager.messages == ["[match] kept"]

    def test_none_silences_everything(self, manager):
        manager.configure(level=DebugLevel.NONE)
        manager.error("quiet")
        assert manager.messages == []

    def test_disabled(self, manager):
        manager.configure(enabled=False)
        manager.error("quiet")
        assert manager.messages == []

    def test_timer(self, manager):
        manager.start_timer("round")
        elapsed = manager.end_timer("round")
        assert elapsed is not None and elapsed >= 0
        assert manager.end_timer("round") is None

    def test_set_from_string(self, manager):
        manager.set_from_string("debug")
        assert manager.level == DebugLevel.DEBUG
        manager.set_from_string("loud")
        assert manager.level == DebugLevel.DEBUG
        assert "Unknown debug level: loud" in manager.messages
