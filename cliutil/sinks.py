# cliutil/sinks.py
import os
import sys

from .errors import SinkWriteError
from .utils import display_width, vprint

CR = "\x0d"


class ConsoleSink:
    """Writes a single progress line in place, erasing with CR + spaces + CR."""

    name = "console"

    def __init__(self, stream=None):
        self._stream = stream

    @property
    def stream(self):
        # resolved lazily so redirected/captured stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text):
        self._emit(text)

    def erase(self, text):
        self._emit(CR + " " * display_width(text) + CR)

    def _emit(self, data):
        try:
            self.stream.write(data)
            self.stream.flush()
        except (OSError, ValueError) as e:
            raise SinkWriteError(self.name, str(e)) from e


class FileSink:
    """Overwrites the progress file with the latest rendered text."""

    name = "progress file"

    def __init__(self, path):
        self.path = path

    def write(self, text):
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise SinkWriteError(self.name, f"failed opening progress file '{self.path}': {e}") from e
        vprint("Progress file updated:", os.path.abspath(self.path))
