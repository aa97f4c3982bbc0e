# cliutil/errors.py
"""
Exception types raised by cliutil.

Configuration and parameter problems propagate to the caller. SinkWriteError is
raised by the output sinks and caught by the progress engine, which only logs it.
"""


class CLIUtilError(Exception):
    pass


class ConfigurationError(CLIUtilError, ValueError):
    """Invalid progress session or toolkit option values."""


class ParameterError(CLIUtilError, ValueError):
    """Undeclared script parameter or a value that does not fit its type."""


class SinkWriteError(CLIUtilError, OSError):
    """A console or progress-file write failed."""

    def __init__(self, sink, message):
        super().__init__(f"{sink}: {message}")
        self.sink = sink
