# cliutil/timefmt.py
"""
Duration formatting: seconds -> "1h 02m 03s" style strings, and parsing of
"#s/m/h/d/w" time values used by TIME_SEC script parameters.
"""
import math
import re
from datetime import datetime
from email.utils import formatdate

from .errors import ParameterError
from .utils import round_half_up

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY

TIME_UNITS_IN_SECONDS = {"": 1, "s": 1, "m": MINUTE, "h": HOUR, "d": DAY, "w": WEEK}

# units naming level -> singular/plural unit suffixes
# level 0 renders hours/minutes/seconds as a colon clock, so only d/w are named
UNIT_NAMES = {
    0: {"d": "d", "dd": "d", "w": "w", "ww": "w"},
    1: {"s": "s", "ss": "s", "m": "m", "mm": "m", "h": "h", "hh": "h",
        "d": "d", "dd": "d", "w": "w", "ww": "w"},
    2: {"s": " sec", "ss": " sec", "m": " min", "mm": " min", "h": " hr", "hh": " hr",
        "d": " dy", "dd": " dy", "w": " wk", "ww": " wk"},
    3: {"s": " second", "ss": " seconds", "m": " minute", "mm": " minutes",
        "h": " hour", "hh": " hours", "d": " day", "dd": " days", "w": " week", "ww": " weeks"},
}

_TIME_SEC_RE = re.compile(r"^\s*([+-]?\d+)\s*(\S*)\s*$")


def _unit(names, key, value):
    # anything not ending in digit 1 is plural (so 11 and 21 come out wrong, kept as is)
    if int(math.fmod(value, 10)) != 1:
        return names[key + key]
    return names[key]


def format_time(seconds, precision=0, strip_empty_units=True, units_naming_level=3, two_digit_hms=False):
    """
    Convert a duration in seconds to a human readable string.

    units_naming_level: 0 -> "1d 02:03:04", 1 -> "1d 2h 3m 4s",
    2 -> "1 dy 2 hr 3 min 4 sec", 3 -> "1 day 2 hours 3 minutes 4 seconds".
    strip_empty_units=False renders every unit from weeks down even when zero.
    two_digit_hms zero-pads hours/minutes/seconds when a higher unit is shown.
    """
    if units_naming_level not in UNIT_NAMES:
        raise ValueError(f"units_naming_level must be 0..3, got {units_naming_level!r}")
    names = UNIT_NAMES[units_naming_level]
    named = units_naming_level > 0
    seconds = round_half_up(seconds, precision)

    show_minutes = seconds >= MINUTE or not strip_empty_units
    show_hours = seconds >= HOUR or not strip_empty_units
    show_days = seconds >= DAY or not strip_empty_units
    show_weeks = seconds >= WEEK or not strip_empty_units

    # seconds
    fraction = math.fmod(seconds, 60)
    result = f"{fraction:.{precision}f}"
    if named:
        if two_digit_hms and 0 <= fraction < 10 and show_minutes:
            result = "0" + result
        if precision > 0:
            result += names["ss"]
        else:
            result += _unit(names, "s", math.floor(fraction))
    elif 0 <= fraction < 10 and show_minutes:
        result = "0" + result

    if show_minutes:
        minutes = int(seconds // MINUTE) % 60
        if named:
            text = f"{minutes:02d}" if two_digit_hms and show_hours else str(minutes)
            result = text + _unit(names, "m", minutes) + " " + result
        else:
            result = f"{minutes:02d}:" + result

    if show_hours:
        hours = int(seconds // HOUR) % 24
        if named:
            text = f"{hours:02d}" if two_digit_hms and show_days else str(hours)
            result = text + _unit(names, "h", hours) + " " + result
        else:
            result = f"{hours:02d}:" + result

    if show_days:
        days = int(seconds // DAY) % 7
        result = f"{days}{_unit(names, 'd', days)} " + result

    if show_weeks:
        weeks = int(seconds // WEEK)
        result = f"{weeks}{_unit(names, 'w', weeks)} " + result

    return result


def parse_time_sec(value):
    """'90' -> 90, '5m' -> 300, '2h' -> 7200 ... (units s, m, h, d, w)."""
    m = _TIME_SEC_RE.match(str(value))
    if not m:
        raise ParameterError(f"Bad time value {value!r}; expected <number>[s|m|h|d|w]")
    unit = m.group(2).lower()
    if unit not in TIME_UNITS_IN_SECONDS:
        raise ParameterError(f"Unknown time unit {m.group(2)!r} in {value!r}")
    return int(m.group(1)) * TIME_UNITS_IN_SECONDS[unit]


def format_date(time_format=None):
    """Current local time; RFC 2822 ("Thu, 15 Oct 2026 19:40:00 +0200") when no strftime format is given."""
    if time_format is None:
        return formatdate(localtime=True)
    return datetime.now().strftime(time_format)
