"""Pytest configuration and fixtures for Block Invaders tests."""

import os

# pygame must not try to open a real window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tests.fakes.scheduler import ManualScheduler, RecordingRestartControl
from tests.fakes.surface import RecordingSurface


@pytest.fixture
def settings():
    """Default game settings (800x600 surface)."""
    from block_invaders.settings import GameSettings

    return GameSettings()


@pytest.fixture
def session(settings):
    """A fresh game session on the default surface."""
    from block_invaders.session import GameSession

    return GameSession(settings)


@pytest.fixture
def surface(settings):
    width, height = settings.surface_size
    return RecordingSurface(width=width, height=height)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def restart_control():
    return RecordingRestartControl()
