"""
Pytest configuration and shared fixtures for penbot tests.

Provides robot fixtures, a recording observer for asserting robot transitions,
and the custom markers used across the test suite.
"""

import logging
import os
import sys

import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from penbot.robot import Robot, RobotObserver

logger = logging.getLogger(__name__)


class RecordingObserver(RobotObserver):
    """Collects robot transitions as (event, *payload) tuples."""

    def __init__(self):
        self.events = []

    def on_move(self, x, y):
        self.events.append(("move", x, y))

    def on_draw(self, x, y):
        self.events.append(("draw", x, y))

    def on_turn(self, side, direction):
        self.events.append(("turn", side, direction))

    def on_pen(self, drawing):
        self.events.append(("pen", drawing))

    def of_kind(self, kind):
        return [event for event in self.events if event[0] == kind]


# ============================================================================
# ROBOT FIXTURES
# ============================================================================

@pytest.fixture
def robot() -> Robot:
    """Fresh robot at (0, 0) facing up with the pen raised."""
    return Robot()


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def observed_robot(recorder) -> Robot:
    """Fresh robot reporting to the ``recorder`` fixture."""
    return Robot(observer=recorder)


# ============================================================================
# PYTEST CONFIGURATION HOOKS
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components in isolation"
    )
    config.addinivalue_line(
        "markers", "language: Tests for command-language scanning and interpretation"
    )
