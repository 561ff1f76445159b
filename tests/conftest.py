"""Shared pytest fixtures for the x3test suite."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def frame_times(windows: int, frames_per_window: int, start: float = 0.0):
    """Timestamps for a clock that lands exactly on each window boundary."""
    times = []
    for window in range(windows):
        base = start + window * 1000
        for i in range(1, frames_per_window + 1):
            times.append(base + (i * 1000) / frames_per_window)
    return times


def probe_payload(windows: int, frames_per_window: int, diag=None, origin: float = 0.0):
    frames = []
    for t in frame_times(windows, frames_per_window, origin):
        frame = {"t": t}
        if (t - origin) % 1000 == 0:
            frame["diag"] = diag if diag is not None else {"ok": True, "value": None}
        frames.append(frame)
    return {"origin": origin, "frames": frames}


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "browser: runs against a real headless Chromium (pytest -m browser)"
    )


@pytest.fixture
def fake_page():
    """A Playwright page stand-in recording the calls the driver makes."""
    page = MagicMock()
    page.goto = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.click = AsyncMock()
    page.wait_for_timeout = AsyncMock()
    page.evaluate = AsyncMock(return_value=probe_payload(3, 60))
    return page
