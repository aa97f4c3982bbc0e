"""Pytest configuration and fixtures for cliutil tests."""

import pytest

from cliutil.progress import ProgressConfig, ProgressEngine


class FakeClock:
    """Monotonic clock stand-in; tests move time explicitly."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class RecordingConsole:
    """Console sink double that records write/erase calls instead of printing."""

    name = "console"

    def __init__(self):
        self.calls = []

    def write(self, text):
        self.calls.append(("write", text))

    def erase(self, text):
        self.calls.append(("erase", text))

    @property
    def writes(self):
        return [text for kind, text in self.calls if kind == "write"]

    @property
    def erases(self):
        return [text for kind, text in self.calls if kind == "erase"]


class RecordingFile:
    name = "progress file"

    def __init__(self):
        self.writes = []

    def write(self, text):
        self.writes.append(text)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def file_sink():
    return RecordingFile()


@pytest.fixture
def make_engine(clock, console, file_sink):
    """Factory: ProgressEngine wired to the recording sinks, already reset with the given config."""
    def _make(**cfg):
        engine = ProgressEngine(console_sink=console, file_sink=file_sink, clock=clock)
        engine.reset_progress(ProgressConfig(**cfg))
        return engine
    return _make
