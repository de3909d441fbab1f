"""Tests for HH:MM arithmetic and weekday resolution."""

import pytest

from trainerbook.scheduling.errors import InvalidMinutes, MalformedDate, MalformedTime
from trainerbook.scheduling.timeutils import (
    day_of_week_of,
    minutes_to_time,
    parse_date,
    time_to_minutes,
)


class TestTimeToMinutes:
    def test_midnight(self) -> None:
        assert time_to_minutes("00:00") == 0

    def test_regular_time(self) -> None:
        assert time_to_minutes("09:30") == 570

    def test_last_minute_of_day(self) -> None:
        assert time_to_minutes("23:59") == 1439

    def test_single_digit_hour(self) -> None:
        assert time_to_minutes("9:05") == 545

    @pytest.mark.parametrize(
        "value", ["", "0900", "9", "aa:bb", "09:3", "09:30:00", " 09:30", "09:30\n"]
    )
    def test_unparseable(self, value: str) -> None:
        with pytest.raises(MalformedTime):
            time_to_minutes(value)

    @pytest.mark.parametrize("value", ["24:00", "12:60", "99:99"])
    def test_out_of_range(self, value: str) -> None:
        with pytest.raises(MalformedTime):
            time_to_minutes(value)

    def test_malformed_time_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            time_to_minutes("noon")


class TestMinutesToTime:
    def test_zero_pads(self) -> None:
        assert minutes_to_time(5) == "00:05"
        assert minutes_to_time(545) == "09:05"

    def test_end_of_day(self) -> None:
        assert minutes_to_time(1439) == "23:59"

    def test_negative(self) -> None:
        with pytest.raises(InvalidMinutes):
            minutes_to_time(-1)

    def test_round_trip_whole_day(self) -> None:
        for m in range(0, 1440):
            assert time_to_minutes(minutes_to_time(m)) == m


class TestDayOfWeek:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2025-08-18", "monday"),
            ("2025-08-19", "tuesday"),
            ("2025-08-20", "wednesday"),
            ("2025-08-24", "sunday"),
            ("2024-02-29", "thursday"),
            ("2000-01-01", "saturday"),
            ("1900-03-01", "thursday"),
        ],
    )
    def test_known_dates(self, value: str, expected: str) -> None:
        assert day_of_week_of(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["2025-8-18", "18/08/2025", "20250818", "2025-08-18T10:00", "2025-08-18\n"],
    )
    def test_malformed(self, value: str) -> None:
        with pytest.raises(MalformedDate):
            day_of_week_of(value)

    @pytest.mark.parametrize("value", ["2025-02-29", "2025-13-01", "2025-04-31"])
    def test_impossible_calendar_date(self, value: str) -> None:
        with pytest.raises(MalformedDate):
            parse_date(value)
