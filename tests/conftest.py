import logging

import numpy as np
import pytest


class FakeMotor:
    """Records every motor command; run results can be scripted per call."""

    def __init__(self, initialized=True, run_results=None, stop_result=True):
        self.initialized = initialized
        self.run_results = list(run_results or [])
        self.stop_result = stop_result
        self.run_calls = []
        self.stop_calls = 0
        self.closed = False

    def is_initialized(self):
        return self.initialized

    def run(self, speed, ramp, duration_ms):
        self.run_calls.append((speed, ramp, duration_ms))
        if self.run_results:
            return self.run_results.pop(0)
        return True

    def stop(self):
        self.stop_calls += 1
        return self.stop_result

    def close(self):
        self.closed = True


@pytest.fixture
def make_motor():
    """Factory for fake motors."""
    return FakeMotor


@pytest.fixture
def no_wait():
    """Step wait that records requested seconds and returns immediately."""
    waits = []

    def _wait(seconds):
        waits.append(seconds)
        return False

    _wait.calls = waits
    return _wait


@pytest.fixture
def feeder_log(caplog):
    """Injected logger whose records land in caplog."""
    caplog.set_level(logging.DEBUG)
    return logging.getLogger("tests.feeder")


@pytest.fixture
def frame():
    """Small BGR test image."""
    image = np.zeros((48, 64, 3), dtype=np.uint8)
    image[10:30, 20:40] = (0, 128, 255)
    return image


def error_records(caplog):
    return [r for r in caplog.records if r.levelno == logging.ERROR]


def warning_records(caplog):
    return [r for r in caplog.records if r.levelno == logging.WARNING]


@pytest.fixture
def errors(caplog):
    return lambda: error_records(caplog)


@pytest.fixture
def warnings_logged(caplog):
    return lambda: warning_records(caplog)
