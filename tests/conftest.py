"""Shared fixtures for the pricing report tests."""

import threading

import pytest

from classifier import new_report


@pytest.fixture
def report():
    """A fresh, zeroed report."""
    return new_report()


class SilentStream:
    """Stdin stand-in that never produces a line until released."""

    def __init__(self):
        self.released = threading.Event()

    def isatty(self):
        return False

    def __iter__(self):
        self.released.wait(timeout=5)
        return iter(())


@pytest.fixture
def silent_stdin():
    stream = SilentStream()
    yield stream
    stream.released.set()
