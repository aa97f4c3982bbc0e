# cliutil/core.py
"""
CliUtil: the object a script creates first. Ties together script parameters,
help output, status/info/error messages (console + message log) and the
progress engine.

    cli = CliUtil(script_name="Import", script_version="1.0")
    if cli.get_parameter("help"):
        cli.display_help()
        sys.exit(0)
    cli.set_options(progress_items_total=len(rows))
    with cli:
        for i, row in enumerate(rows, 1):
            handle(row)
            cli.update_progress(i)
"""
import atexit
import sys
import time

from . import config
from .messages import Flags, MessageLog
from .options import CliOptions
from .params import ParameterSet, ParamType
from .progress import ProgressConfig, ProgressEngine
from .sinks import ConsoleSink
from .text import TextAlign, text_align, text_indent
from .timefmt import format_date, format_time
from .utils import get_logger

logger = get_logger()


class CliUtil:
    def __init__(self, options=None, argv=None, stream=None, clock=time.monotonic, **overrides):
        self._clock = clock
        # overwritten by start()
        self.time_started = clock()
        self.time_total = 0.0
        self.started = False
        self.ended = False

        options = options if options is not None else CliOptions()
        self.options = options.replace(**overrides) if overrides else options

        self._argv = argv
        self._stream = stream
        self.verbosity = Flags("")
        self.logging = Flags("")
        self._message_log = None
        self.progress = ProgressEngine(console_sink=ConsoleSink(stream), clock=clock)

        # standard parameters
        self.parameters = ParameterSet()
        self.declare_parameter("help", "?", False, ParamType.BOOLEAN, "Display help")
        self.declare_parameter("logging", "l", self.options.logging_default,
                               ParamType.STRING, "Logging options")
        self.declare_parameter("verbosity", "v", self.options.verbosity_default,
                               ParamType.STRING, "Verbosity options")

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    # ---------- options / parameters ----------

    def set_options(self, **changes):
        self.options = self.options.replace(**changes)

    def declare_parameter(self, name, alias, default, param_type, description=""):
        self.parameters.declare(name, alias, default, param_type, description)

    def read_parameters(self):
        values = self.parameters.read(self._argv)
        self.verbosity = Flags(values["verbosity"])
        self.logging = Flags(values["logging"])
        # re-reads only refresh the flags, the message log is created once
        if self._message_log is None:
            self._message_log = MessageLog(self.options.log_file,
                                           overwrite=config.FLAG_OVERWRITE_LOG in self.logging,
                                           clock=self._clock)
        return values

    def _ensure_parameters(self):
        if not self.parameters.read_done:
            self.read_parameters()

    def get_parameter(self, name):
        self._ensure_parameters()
        return self.parameters.get(name)

    def get_parameters(self):
        self._ensure_parameters()
        return self.parameters.as_dict()

    # ---------- lifecycle ----------

    def start(self):
        """Call before any work is started."""
        self._ensure_parameters()
        self.time_started = self._clock()
        self.reset_progress()
        self.ended = False
        if self.options.status_start_message:
            self.status(self.options.status_start_message.replace(
                "%time_current%", format_date(self.options.status_time_format)))
        self.started = True
        atexit.register(self.close)
        logger.info("%s started (verbosity=%r, logging=%r)", self.options.script_name or "script",
                    self.verbosity.spec, self.logging.spec)

    def end(self):
        """Call after all work is done. The message log stays open until close()."""
        if self.ended:
            return
        self.time_total = self._clock() - self.time_started
        self.progress.end_session()
        if self.options.status_end_message:
            self.status(self.options.status_end_message
                        .replace("%time_current%", format_date(self.options.status_time_format))
                        .replace("%time_passed%", self.get_time_passed(True)))
        self.ended = True
        logger.info("%s finished in %.3fs", self.options.script_name or "script", self.time_total)

    def close(self):
        atexit.unregister(self.close)
        if self.started and not self.ended:
            self.end()
        if self._message_log is not None:
            self._message_log.close()

    def get_time_passed(self, as_string=False):
        if not self.ended:
            self.time_total = self._clock() - self.time_started
        if as_string:
            return format_time(self.time_total, self.options.status_time_precision, True, 1, True)
        return self.time_total

    # ---------- progress ----------

    def progress_config(self, options=None):
        o = options if options is not None else self.options
        console_on = config.FLAG_PROGRESS in self.verbosity
        file_on = config.FLAG_PROGRESS in self.logging
        return ProgressConfig(
            total_items=o.progress_items_total,
            console_refresh_interval=o.progress_console_refresh_interval if console_on else None,
            file_refresh_interval=o.progress_file_refresh_interval if file_on else None,
            console_format=o.progress_console_format,
            file_format=o.progress_file_format,
            max_output_width=o.max_output_width,
            rotator_sequence=o.progress_rotator_sequence,
            percent_precision=o.progress_percent_precision,
            speed_precision=o.progress_speed_precision,
            time_precision=o.progress_time_precision,
            operation_title=o.operation_title,
            progress_file=o.progress_file,
        )

    def reset_progress(self, **option_changes):
        """
        (Re)start progress tracking, optionally changing options first
        (e.g. progress_items_total, progress_operation_title).
        """
        self._ensure_parameters()
        options = self.options.replace(**option_changes) if option_changes else self.options
        self.progress.reset_progress(self.progress_config(options))
        self.options = options

    def update_progress(self, current_item):
        self.progress.update_progress(current_item)

    # ---------- messages ----------

    def status(self, message):
        self.out(config.MESSAGE_STATUS, message)

    def info(self, message):
        self.out(config.MESSAGE_INFORMATION, message)

    def error(self, message):
        self.out(config.MESSAGE_ERROR, message)

    def out(self, message_type, message):
        """Print to the console and/or the message log, as verbosity and logging flags allow."""
        self._ensure_parameters()
        if message_type in self.verbosity:
            self.progress.erase_console()
            print(message, file=self.stream, flush=True)
        if message_type in self.logging:
            self._message_log.write(message)

    # ---------- help ----------

    def format_help(self):
        o = self.options
        width = o.max_output_width
        title = f"{o.script_name} v. {o.script_version}"
        rule = "-" * len(title)
        blocks = [f"{rule}\n{title}\n{rule}"]

        if o.script_description:
            text = text_align(o.script_description, TextAlign.LEFT, width - 2)
            blocks.append(text_indent(text, "  ", 1))

        declared = self.parameters.declared
        if declared:
            heading = "Parameters"
            blocks.append(f"{heading}\n{'-' * len(heading)}")
            for p in declared:
                usage = f"* {p.name} ({p.alias}) [{p.type.value}]; default: {p.default_text()}"
                block = text_indent(text_align(usage, TextAlign.LEFT, width - 2), "  ", 1)
                if p.description:
                    desc = text_align(p.description, TextAlign.LEFT, width - 4)
                    block += "\n\n" + text_indent(desc, "  ", 2)
                blocks.append(block)
        return "\n\n".join(blocks)

    def display_help(self):
        print(self.format_help(), file=self.stream)
