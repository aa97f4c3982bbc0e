# cliutil/messages.py
import os
import time

from . import config
from .timefmt import format_date
from .utils import get_logger, vprint

logger = get_logger()


class Flags:
    """
    Verbosity / logging flag string, e.g. "sep" or "seio".
    "-" (or an empty string) turns everything off.
    """
    def __init__(self, spec=""):
        self.spec = spec or ""
        self._flags = frozenset(self.spec) - {config.FLAG_NONE}

    def __contains__(self, flag):
        return flag in self._flags

    def __repr__(self):
        return f"Flags({self.spec!r})"


class MessageLog:
    """
    Message log file, opened on the first message.

    Lines look like "[+1.234s] message", time counted from opening. Appending to
    a non-empty file first writes a "---" separator.
    """
    def __init__(self, path, overwrite=False, clock=time.monotonic):
        self.path = path
        self.overwrite = overwrite
        self._clock = clock
        self._fp = None
        self._started = None
        self._failed = False

    @property
    def is_open(self):
        return self._fp is not None

    def _elapsed(self):
        return self._clock() - self._started

    def open(self):
        if self._fp is not None or self._failed:
            return
        has_content = os.path.exists(self.path) and os.path.getsize(self.path) > 0
        try:
            self._fp = open(self.path, "w" if self.overwrite else "a", encoding="utf-8")
        except OSError as e:
            # one warning only, messages are still shown on the console
            self._failed = True
            logger.warning("Failed to open log file '%s' for writing: %s", self.path, e)
            return
        self._started = self._clock()
        if not self.overwrite and has_content:
            self._fp.write("\n---\n\n")
        self._fp.write(f"[Log started at {format_date()}]\n")
        self._fp.flush()
        vprint("Message log opened:", os.path.abspath(self.path))

    def write(self, message):
        self.open()
        if self._fp is None:
            return
        try:
            self._fp.write(f"[+{self._elapsed():.3f}s] {message}\n")
            self._fp.flush()
        except OSError as e:
            logger.warning("Failed writing to log file '%s': %s", self.path, e)

    def close(self):
        if self._fp is None:
            return
        try:
            self._fp.write(f"[Log finished at {format_date()} (+ {self._elapsed():.3f}s)]\n")
        except OSError as e:
            logger.warning("Failed writing log footer to '%s': %s", self.path, e)
        finally:
            self._fp.close()
            self._fp = None
