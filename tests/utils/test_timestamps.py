"""Tests for duration parsing and until-instant computation."""

from datetime import datetime, timedelta, timezone

import pytest

from podfilter.errors import TimestampError
from podfilter.utils.timestamps import compute_until_instant, parse_duration

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestParseDuration:
    """Tests for Go-style duration parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("10m", timedelta(minutes=10)),
            ("1h30m", timedelta(hours=1, minutes=30)),
            ("1.5h", timedelta(hours=1, minutes=30)),
            ("300ms", timedelta(milliseconds=300)),
            ("2us", timedelta(microseconds=2)),
            ("2µs", timedelta(microseconds=2)),
            (".5s", timedelta(milliseconds=500)),
            ("-5s", timedelta(seconds=-5)),
            ("+5s", timedelta(seconds=5)),
            ("0", timedelta(0)),
            ("1h1m1s", timedelta(hours=1, minutes=1, seconds=1)),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "10", "h", "1d", "1h 30m", "5 s", "-", "1.5"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_duration(value)

    def test_overflowing_duration_is_invalid(self):
        with pytest.raises(ValueError, match="invalid duration"):
            parse_duration("1" * 400 + "h")


class TestComputeUntilInstant:
    """Tests for compute_until_instant."""

    def test_duration_is_relative_to_now(self):
        assert compute_until_instant(["90m"], now=NOW) == NOW - timedelta(minutes=90)

    def test_negative_duration_is_in_the_future(self):
        assert compute_until_instant(["-1h"], now=NOW) == NOW + timedelta(hours=1)

    def test_bare_zero_is_the_epoch(self):
        assert compute_until_instant(["0"], now=NOW) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_unix_seconds(self):
        assert compute_until_instant(["1714564800"], now=NOW) == NOW

    def test_unix_fraction(self):
        result = compute_until_instant(["1714564800.25"], now=NOW)

        assert result == NOW + timedelta(milliseconds=250)

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-05-01", datetime(2024, 5, 1, tzinfo=timezone.utc)),
            ("2024-05-01T15", datetime(2024, 5, 1, 15, tzinfo=timezone.utc)),
            ("2024-05-01T15:04", datetime(2024, 5, 1, 15, 4, tzinfo=timezone.utc)),
            ("2024-05-01T15:04:05Z", datetime(2024, 5, 1, 15, 4, 5, tzinfo=timezone.utc)),
            (
                "2024-05-01T15:04:05.5+02:00",
                datetime(2024, 5, 1, 13, 4, 5, 500000, tzinfo=timezone.utc),
            ),
        ],
    )
    def test_rfc3339_like(self, value, expected):
        assert compute_until_instant([value], now=NOW) == expected

    def test_zoneless_timestamp_takes_zone_of_now(self):
        plus_two = timezone(timedelta(hours=2))
        now = NOW.astimezone(plus_two)

        result = compute_until_instant(["2024-05-01T10:00"], now=now)

        assert result == datetime(2024, 5, 1, 8, tzinfo=timezone.utc)

    def test_result_is_timezone_aware(self):
        assert compute_until_instant(["2024-05-01"], now=NOW).tzinfo is not None

    def test_defaults_to_current_time(self):
        before = datetime.now(timezone.utc)
        result = compute_until_instant(["0s"])

        assert result >= before

    @pytest.mark.parametrize("values", [[], ["1h", "2h"]])
    def test_exactly_one_value_required(self, values):
        with pytest.raises(TimestampError, match="exactly one"):
            compute_until_instant(values, now=NOW)

    @pytest.mark.parametrize("value", ["yesterday", "2024-13-01", "2024-05-01Tnoon", "12:30", ""])
    def test_unparsable(self, value):
        with pytest.raises(TimestampError):
            compute_until_instant([value], now=NOW)

    @pytest.mark.parametrize("value", ["100000000h", "-100000000h", "1" * 400 + "h"])
    def test_out_of_range_duration(self, value):
        with pytest.raises(TimestampError):
            compute_until_instant([value], now=NOW)
