# cliutil/options.py
import os
import sys
from dataclasses import dataclass, fields, replace
from typing import Optional, Tuple

from . import config
from .errors import ConfigurationError


def _script_basename():
    return os.path.splitext(os.path.basename(sys.argv[0] or "script"))[0] or "script"


@dataclass(frozen=True)
class CliOptions:
    """
    Toolkit options. Defaults come from cliutil.config; log_file and progress_file
    default to <script name>.log / <script name>.progress in the working directory.
    """

    script_name: str = ""
    script_version: str = ""
    script_description: str = ""
    max_output_width: int = config.MAX_OUTPUT_WIDTH
    logging_default: str = config.LOGGING_DEFAULT
    verbosity_default: str = config.VERBOSITY_DEFAULT
    log_file: Optional[str] = None
    progress_file: Optional[str] = None
    progress_console_format: str = config.PROGRESS_CONSOLE_FORMAT
    progress_file_format: str = config.PROGRESS_FILE_FORMAT
    progress_percent_precision: int = config.PROGRESS_PERCENT_PRECISION
    progress_speed_precision: int = config.PROGRESS_SPEED_PRECISION
    progress_time_precision: int = config.PROGRESS_TIME_PRECISION
    progress_console_refresh_interval: float = config.PROGRESS_CONSOLE_REFRESH_INTERVAL
    progress_file_refresh_interval: float = config.PROGRESS_FILE_REFRESH_INTERVAL
    progress_items_total: int = 0
    progress_rotator_sequence: Tuple[str, ...] = config.PROGRESS_ROTATOR_SEQUENCE
    progress_operation_title: Optional[str] = None  # None -> script_name
    status_start_message: str = config.STATUS_START_MESSAGE
    status_end_message: str = config.STATUS_END_MESSAGE
    status_time_format: Optional[str] = config.STATUS_TIME_FORMAT
    status_time_precision: int = config.STATUS_TIME_PRECISION

    def __post_init__(self):
        object.__setattr__(self, "progress_rotator_sequence", tuple(self.progress_rotator_sequence))
        if self.max_output_width <= 0:
            raise ConfigurationError(f"max_output_width must be > 0, got {self.max_output_width}")
        if self.log_file is None:
            object.__setattr__(self, "log_file", _script_basename() + config.LOG_FILE_SUFFIX)
        if self.progress_file is None:
            object.__setattr__(self, "progress_file", _script_basename() + config.PROGRESS_FILE_SUFFIX)

    @classmethod
    def names(cls):
        return [f.name for f in fields(cls)]

    def replace(self, **changes):
        unknown = sorted(set(changes) - set(self.names()))
        if unknown:
            raise ConfigurationError(f"Unknown option(s): {', '.join(unknown)}")
        return replace(self, **changes)

    @property
    def operation_title(self):
        if self.progress_operation_title is None:
            return self.script_name
        return self.progress_operation_title
