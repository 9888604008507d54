from datetime import datetime, timedelta, timezone

import pytest

from codectxgen.timeutils import format_duration, format_file_size, parse_time


@pytest.mark.parametrize(
    "duration, expected",
    [
        (timedelta(milliseconds=500), "0.5s"),
        (timedelta(milliseconds=1500), "1.5s"),
        (timedelta(seconds=30), "30.0s"),
        (timedelta(seconds=90), "1.5m"),
        (timedelta(minutes=2), "2.0m"),
        (timedelta(minutes=90), "1.5h"),
        (timedelta(hours=3), "3.0h"),
    ],
)
def test_format_duration(duration, expected):
    assert format_duration(duration) == expected


@pytest.mark.parametrize(
    "text",
    [
        "2023-01-01T12:00:00Z",
        "2023-01-01 12:00:00",
        "2023-01-01",
        "12:00:00",
        "2023/01/01",
    ],
)
def test_parse_time_valid(text):
    result = parse_time(text)
    assert result > datetime.min.replace(tzinfo=timezone.utc)


@pytest.mark.parametrize("text", ["invalid", "2023-13-01"])
def test_parse_time_invalid(text):
    with pytest.raises(ValueError):
        parse_time(text)


def test_parse_time_rfc3339_value():
    assert parse_time("2023-01-01T12:00:00Z") == datetime(
        2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc
    )


def test_parse_time_rfc3339_offset_and_fraction():
    result = parse_time("2023-06-15T08:30:00.25+02:00")
    assert result == datetime(2023, 6, 15, 6, 30, 0, 250000, tzinfo=timezone.utc)


def test_parse_time_plain_date_value():
    assert parse_time("2023/01/02") == datetime(2023, 1, 2, tzinfo=timezone.utc)


def test_parse_time_clock_only():
    result = parse_time("12:34:56")
    assert (result.hour, result.minute, result.second) == (12, 34, 56)


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (512, "512 B"),
        (1024, "1.0 KB"),
        (1536, "1.5 KB"),
        (1048576, "1.0 MB"),
        (1073741824, "1.0 GB"),
        (1099511627776, "1.0 TB"),
    ],
)
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected