import pytest

from cliutil.errors import ParameterError
from cliutil.timefmt import format_date, format_time, parse_time_sec


@pytest.mark.parametrize("seconds, expected", [
    (0, "0 seconds"),
    (1, "1 second"),
    (2, "2 seconds"),
    (61, "1 minute 1 second"),
    (3600, "1 hour 0 minutes 0 seconds"),
    # anything not ending in 1 is plural, 11 included
    (11, "11 second"),
])
def test_long_unit_names(seconds, expected):
    assert format_time(seconds) == expected


def test_short_unit_names():
    assert format_time(3725, 0, True, 1) == "1h 2m 5s"
    assert format_time(694861, 0, True, 1) == "1w 1d 1h 1m 1s"


def test_abbreviated_unit_names():
    assert format_time(125, 0, True, 2) == "2 min 5 sec"


def test_two_digit_padding_only_below_a_shown_unit():
    assert format_time(5, 0, True, 1, True) == "5s"
    assert format_time(65, 0, True, 1, True) == "1m 05s"
    assert format_time(3725, 0, True, 1, True) == "1h 02m 05s"
    assert format_time(3600, 0, True, 1, True) == "1h 00m 00s"


def test_clock_style():
    assert format_time(5, 0, True, 0) == "5"
    assert format_time(65, 0, True, 0) == "01:05"
    assert format_time(90061, 0, True, 0) == "1d 01:01:01"


def test_precision_rounds_half_up():
    assert format_time(2.5, 0, True, 1) == "3s"
    assert format_time(1.5, 2, True, 1) == "1.50s"
    assert format_time(2.0, 3, True, 1, True) == "2.000s"


def test_empty_units_kept_when_not_stripping():
    assert format_time(5, 0, False, 1) == "0w 0d 0h 0m 5s"
    assert format_time(5, 0, False, 1, True) == "0w 0d 00h 00m 05s"


def test_negative_durations_do_not_raise():
    assert format_time(-5, 0, True, 1) == "-5s"


def test_unknown_naming_level():
    with pytest.raises(ValueError):
        format_time(5, 0, True, 4)


@pytest.mark.parametrize("value, expected", [
    ("90", 90),
    ("5s", 5),
    ("5m", 300),
    ("2H", 7200),
    (" 1d ", 86400),
    ("1w", 604800),
    ("-2m", -120),
])
def test_parse_time_sec(value, expected):
    assert parse_time_sec(value) == expected


@pytest.mark.parametrize("value", ["", "m", "1.5m", "5y", "5 m x"])
def test_parse_time_sec_rejects_bad_values(value):
    with pytest.raises(ParameterError):
        parse_time_sec(value)


def test_format_date_with_strftime_format():
    assert len(format_date("%Y")) == 4
    assert "," in format_date()
