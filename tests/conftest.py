"""
Shared pytest fixtures for all tests.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tabdeck.core.settings import SettingsManager
from tabdeck.core.tabs import TabManager


class FakeNavigator:
    """Records navigate(path, replace) calls instead of moving anywhere."""

    def __init__(self):
        self.calls = []

    def __call__(self, path, replace=False):
        self.calls.append((path, replace))

    @property
    def last(self):
        return self.calls[-1] if self.calls else None


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now=1000):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms=1):
        self.now += ms


@pytest.fixture
def navigator():
    return FakeNavigator()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def tab_manager(qapp, navigator, clock):
    return TabManager(navigator, clock=clock)


@pytest.fixture
def settings_manager(tmp_path):
    return SettingsManager(
        settings_path=tmp_path / "settings.json",
        log_dir=tmp_path / "logs",
    )
