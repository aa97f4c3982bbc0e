# cliutil/progress.py
"""
Progress tracking engine.

A ProgressEngine turns "current item / total items" calls into throttled progress
output on two sinks: a console line redrawn in place and a progress file that is
overwritten. Each sink has its own refresh interval; average/current speed and
ETA are estimated from the item and time deltas between processed calls.

The engine is driven synchronously by the caller's loop: no threads, no sleeps.
It is not thread-safe; calling update_progress() from several threads at once is
a misuse and is not guarded.
"""
import enum
import re
import time
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

from . import config
from .errors import ConfigurationError, SinkWriteError
from .scheduler import FIRST_CALL_DELTA, RefreshScheduler
from .sinks import ConsoleSink, FileSink
from .timefmt import format_time
from .utils import display_width, get_logger, pad_right, round_half_up, vprint

logger = get_logger()

UNKNOWN = "?"
BAR_FILL = "#"
BAR_TRACK = "-"


class Tag(enum.Enum):
    TOTAL = "%total%"
    PERCENT = "%percent%"
    ETA = "%eta%"
    TIME_PASSED = "%time_passed%"
    ITEM = "%item%"
    SPEED_AVG = "%speed_avg%"
    SPEED_CUR = "%speed_cur%"
    ROTATOR = "%rotator%"
    TITLE = "%title%"
    BAR = "%bar%"  # sized to the output width, substituted last


_TAGS_BY_PLACEHOLDER = {t.value: t for t in Tag if t is not Tag.BAR}
# only known placeholders are matched, so a stray "%" never swallows a following tag
_PLACEHOLDER_RE = re.compile("|".join(re.escape(p) for p in _TAGS_BY_PLACEHOLDER))


class SessionState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    RESET = "reset"
    ACTIVE = "active"
    ENDED = "ended"


@dataclass(frozen=True)
class ProgressConfig:
    """Settings of one progress session. A refresh interval of None disables that sink."""

    total_items: int = 0
    console_refresh_interval: Optional[float] = config.PROGRESS_CONSOLE_REFRESH_INTERVAL
    file_refresh_interval: Optional[float] = None
    console_format: str = config.PROGRESS_CONSOLE_FORMAT
    file_format: str = config.PROGRESS_FILE_FORMAT
    max_output_width: int = config.MAX_OUTPUT_WIDTH
    rotator_sequence: Tuple[str, ...] = config.PROGRESS_ROTATOR_SEQUENCE
    percent_precision: int = config.PROGRESS_PERCENT_PRECISION
    speed_precision: int = config.PROGRESS_SPEED_PRECISION
    time_precision: int = config.PROGRESS_TIME_PRECISION
    operation_title: str = ""
    progress_file: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "rotator_sequence", tuple(self.rotator_sequence))
        if self.total_items < 0:
            raise ConfigurationError(f"total_items must be >= 0, got {self.total_items}")
        for name in ("console_refresh_interval", "file_refresh_interval"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ConfigurationError(f"{name} must be >= 0, got {value}")
        if not self.rotator_sequence:
            raise ConfigurationError("rotator_sequence must not be empty")
        if self.max_output_width <= 0:
            raise ConfigurationError(f"max_output_width must be > 0, got {self.max_output_width}")
        for name in ("percent_precision", "speed_precision", "time_precision"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be >= 0, got {getattr(self, name)}")

    def with_changes(self, **changes):
        try:
            return replace(self, **changes)
        except TypeError as e:
            raise ConfigurationError(str(e)) from e


@dataclass
class ProgressState:
    last_item: int = 0
    last_update_time: Optional[float] = None
    start_time: Optional[float] = None
    rotator_index: int = 0
    tag_values: Dict[Tag, str] = field(default_factory=dict)
    last_console_text: Optional[str] = None
    last_file_text: str = ""


@dataclass(frozen=True)
class Tick:
    current_item: int
    now: float
    delta_items: int
    delta_time: float
    is_first_call: bool
    is_last_item: bool


@dataclass(frozen=True)
class Estimate:
    # None -> unknown
    time_passed: Optional[float] = None
    avg_speed: Optional[float] = None
    cur_speed: Optional[float] = None
    eta: Optional[float] = None


def _div(a, b):
    if not b:
        return None
    return a / b


def estimate(tick, start_time, total_items):
    """Speeds (items/s) and ETA (s) for a processed tick; everything unknown on the first one."""
    if tick.is_first_call:
        return Estimate()
    time_passed = tick.now - start_time
    avg_speed = _div(tick.current_item, time_passed)
    cur_speed = _div(tick.delta_items, tick.delta_time)
    eta = _div(total_items - tick.current_item, avg_speed)
    return Estimate(time_passed, avg_speed, cur_speed, eta)


def done_part(current_item, total_items):
    return _div(current_item, total_items)


def _format_duration(seconds, precision):
    if seconds is None:
        return UNKNOWN
    return format_time(seconds, precision, True, 1, True)


def _format_speed(speed, precision):
    if speed is None:
        return UNKNOWN
    return f"{speed:.{precision}f}/s"


def compute_tag_values(tick, est, cfg, rotator_glyph):
    done = done_part(tick.current_item, cfg.total_items)
    return {
        Tag.TOTAL: str(cfg.total_items),
        Tag.TITLE: cfg.operation_title,
        Tag.ITEM: str(tick.current_item),
        Tag.PERCENT: UNKNOWN if done is None else f"{done * 100:.{cfg.percent_precision}f}%",
        Tag.ETA: _format_duration(est.eta, cfg.time_precision),
        Tag.TIME_PASSED: _format_duration(est.time_passed, cfg.time_precision),
        Tag.SPEED_AVG: _format_speed(est.avg_speed, cfg.speed_precision),
        Tag.SPEED_CUR: _format_speed(est.cur_speed, cfg.speed_precision),
        Tag.ROTATOR: rotator_glyph,
    }


def expand_tags(template, tag_values):
    """Substitute known tags (except %bar%); unknown %placeholders% are left as they are."""
    def _sub(m):
        tag = _TAGS_BY_PLACEHOLDER[m.group(0)]
        if tag not in tag_values:
            return m.group(0)
        return tag_values[tag]
    return _PLACEHOLDER_RE.sub(_sub, template)


def make_bar(done, length):
    if length <= 0:
        return ""
    filled = 0 if done is None else round_half_up(done * length)
    # overshoot (done > 1) fills the bar, it never grows past its length
    filled = min(max(filled, 0), length)
    return BAR_FILL * filled + BAR_TRACK * (length - filled)


def render(template, tag_values, max_width, done, console=False):
    """
    Expand a progress template.

    %bar% takes whatever is left of max_width:
        max_width - width(measured text incl. the placeholder) - len("%bar%")
    The console line is measured as a whole; the progress file by the line
    holding %bar%. Without a bar, console text is right-padded to max_width so a
    shorter line fully covers the previous one.
    """
    text = expand_tags(template, tag_values)
    placeholder = Tag.BAR.value
    if placeholder in text:
        measured = text if console else next(l for l in text.split("\n") if placeholder in l)
        bar_length = max_width - display_width(measured) - len(placeholder)
        text = text.replace(placeholder, make_bar(done, bar_length))
    elif console:
        text = pad_right(text, max_width)
    return text


class ProgressEngine:
    """
    One progress session handle.

        engine = ProgressEngine()
        engine.reset_progress(ProgressConfig(total_items=len(items)))
        for i, item in enumerate(items, 1):
            work(item)
            engine.update_progress(i)
        engine.end_session()
    """

    def __init__(self, console_sink=None, file_sink=None, clock=time.monotonic):
        self._console = console_sink if console_sink is not None else ConsoleSink()
        self._file_sink_override = file_sink
        self._file = None
        self._clock = clock
        self._scheduler = RefreshScheduler()
        self.config = None
        self.state = ProgressState()
        self.session = SessionState.UNINITIALIZED

    @property
    def active(self):
        return self.session in (SessionState.RESET, SessionState.ACTIVE) and self._scheduler.enabled

    @property
    def refresh_interval(self):
        return self._scheduler.effective_interval

    def reset_progress(self, cfg):
        """(Re)start a session. Raises ConfigurationError and keeps the current session on bad input."""
        if not isinstance(cfg, ProgressConfig):
            raise ConfigurationError(f"expected ProgressConfig, got {type(cfg).__name__}")
        file_sink = self._file_sink_override
        if cfg.file_refresh_interval is not None and file_sink is None:
            if not cfg.progress_file:
                raise ConfigurationError("file progress enabled but no progress_file configured")
            file_sink = FileSink(cfg.progress_file)

        # a line left by the previous session would otherwise never be erased
        self.erase_console()
        self.config = cfg
        self._scheduler = RefreshScheduler(cfg.console_refresh_interval, cfg.file_refresh_interval)
        self._file = file_sink
        self.state = ProgressState(tag_values={
            Tag.TOTAL: str(cfg.total_items),
            Tag.TITLE: cfg.operation_title,
        })
        self.session = SessionState.RESET
        vprint("Progress reset: total=%s interval=%s" % (cfg.total_items, self._scheduler.effective_interval))

    def update_progress(self, current_item):
        if not self.active:
            return
        tick = self._make_tick(current_item, self._clock())
        if not self._scheduler.should_process(tick.delta_time, tick.is_last_item):
            return

        est = estimate(tick, self.state.start_time, self.config.total_items)
        self._record(tick)

        sequence = self.config.rotator_sequence
        glyph = sequence[self.state.rotator_index]
        self.state.rotator_index = (self.state.rotator_index + 1) % len(sequence)
        self.state.tag_values = compute_tag_values(tick, est, self.config, glyph)
        self.session = SessionState.ACTIVE

        done = done_part(tick.current_item, self.config.total_items)
        if self._scheduler.console_due(est.time_passed):
            self._draw_console(done)
        if self._scheduler.file_due(est.time_passed):
            self._write_file(done)

    def erase_console(self):
        last = self.state.last_console_text
        if last is None:
            return
        self.state.last_console_text = None
        try:
            self._console.erase(last)
        except SinkWriteError as e:
            logger.warning("Progress erase failed: %s", e)

    def end_session(self):
        if self.session is SessionState.ENDED:
            return
        self.erase_console()
        self.session = SessionState.ENDED

    def _make_tick(self, current_item, now):
        st = self.state
        first = st.last_update_time is None
        return Tick(
            current_item=current_item,
            now=now,
            delta_items=0 if first else current_item - st.last_item,
            delta_time=FIRST_CALL_DELTA if first else now - st.last_update_time,
            is_first_call=first,
            is_last_item=current_item >= self.config.total_items,
        )

    def _record(self, tick):
        if tick.is_first_call:
            self.state.start_time = tick.now
        self.state.last_update_time = tick.now
        self.state.last_item = tick.current_item

    def _draw_console(self, done):
        cfg = self.config
        text = render(cfg.console_format, self.state.tag_values, cfg.max_output_width, done, console=True)
        if text == self.state.last_console_text:
            return
        self.erase_console()
        try:
            self._console.write(text)
        except SinkWriteError as e:
            logger.warning("Progress display failed: %s", e)
            return
        self.state.last_console_text = text

    def _write_file(self, done):
        cfg = self.config
        text = render(cfg.file_format, self.state.tag_values, cfg.max_output_width, done)
        try:
            self._file.write(text)
        except SinkWriteError as e:
            # next qualifying tick tries again
            logger.warning("Progress file not written: %s", e)
            return
        self.state.last_file_text = text
