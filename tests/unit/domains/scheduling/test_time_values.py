# ============================================================================
# Tests for scheduling time value objects
# ============================================================================
"""Unit tests for TimeOfDay, TimeInterval and date helpers."""

from datetime import date, time

import pytest

from clinic_booking.core.domain import ValidationException
from clinic_booking.domains.scheduling.domain.value_objects import (
    TimeInterval,
    TimeOfDay,
    day_of_week,
    parse_date,
)


class TestTimeOfDayParsing:
    """Tests for TimeOfDay.parse."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,minutes",
        [
            ("00:00", 0),
            ("09:00", 540),
            ("9:05", 545),
            ("12:30", 750),
            ("23:59", 1439),
            ("08:15:00", 495),
        ],
    )
    def test_parses_valid_times(self, text: str, minutes: int) -> None:
        """Should convert HH:MM to minutes since midnight."""
        assert TimeOfDay.parse(text).minutes == minutes

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["24:00", "9:60", "abc", "", "0900", "12:3", "-1:00"])
    def test_rejects_malformed_times(self, text: str) -> None:
        """Should raise InvalidInput for text that is not a clock time."""
        with pytest.raises(ValidationException) as exc_info:
            TimeOfDay.parse(text)
        assert exc_info.value.code == "INVALID_INPUT"

    @pytest.mark.unit
    def test_rejects_non_string(self) -> None:
        with pytest.raises(ValidationException):
            TimeOfDay.parse(540)  # type: ignore[arg-type]

    @pytest.mark.unit
    @pytest.mark.parametrize("minutes", [-1, 1440, 2000])
    def test_rejects_out_of_range_minutes(self, minutes: int) -> None:
        with pytest.raises(ValidationException):
            TimeOfDay(minutes)


class TestTimeOfDayBehaviour:
    """Tests for formatting, ordering and arithmetic."""

    @pytest.mark.unit
    def test_formats_zero_padded(self) -> None:
        assert str(TimeOfDay(5)) == "00:05"
        assert str(TimeOfDay.parse("9:05")) == "09:05"

    @pytest.mark.unit
    def test_orders_numerically(self) -> None:
        """Should compare by minutes, not by text."""
        assert TimeOfDay.parse("9:30") < TimeOfDay.parse("10:00")
        assert sorted([TimeOfDay(600), TimeOfDay(30), TimeOfDay(540)]) == [
            TimeOfDay(30),
            TimeOfDay(540),
            TimeOfDay(600),
        ]

    @pytest.mark.unit
    def test_plus_minutes(self) -> None:
        assert str(TimeOfDay.parse("09:45").plus_minutes(30)) == "10:15"

    @pytest.mark.unit
    @pytest.mark.parametrize("start", ["23:30", "23:45", "23:59"])
    def test_plus_minutes_past_midnight_is_rejected(self, start: str) -> None:
        """Should never wrap around midnight."""
        with pytest.raises(ValidationException) as exc_info:
            TimeOfDay.parse(start).plus_minutes(30)
        assert exc_info.value.field == "start_time"

    @pytest.mark.unit
    def test_coerce_accepts_time_and_string(self) -> None:
        assert TimeOfDay.coerce(time(9, 30)) == TimeOfDay(570)
        assert TimeOfDay.coerce("09:30") == TimeOfDay(570)
        value = TimeOfDay(570)
        assert TimeOfDay.coerce(value) is value

    @pytest.mark.unit
    def test_to_time(self) -> None:
        assert TimeOfDay.parse("14:05").to_time() == time(14, 5)


class TestTimeInterval:
    """Tests for half-open interval overlap."""

    @pytest.mark.unit
    def test_adjacent_intervals_do_not_overlap(self) -> None:
        """09:00-09:30 and 09:30-10:00 share only an endpoint."""
        first = TimeInterval.parse("09:00", "09:30")
        second = TimeInterval.parse("09:30", "10:00")
        assert first.overlaps(second) is False
        assert second.overlaps(first) is False

    @pytest.mark.unit
    def test_partial_overlap(self) -> None:
        assert TimeInterval.parse("09:00", "09:30").overlaps(TimeInterval.parse("09:15", "09:45"))

    @pytest.mark.unit
    def test_containment_overlaps(self) -> None:
        outer = TimeInterval.parse("09:00", "12:00")
        inner = TimeInterval.parse("10:00", "10:30")
        assert outer.overlaps(inner)
        assert inner.overlaps(outer)

    @pytest.mark.unit
    def test_rejects_empty_or_reversed_interval(self) -> None:
        with pytest.raises(ValidationException):
            TimeInterval.parse("10:00", "10:00")
        with pytest.raises(ValidationException):
            TimeInterval.parse("11:00", "10:00")

    @pytest.mark.unit
    def test_duration(self) -> None:
        assert TimeInterval.parse("09:00", "09:30").duration_minutes == 30


class TestDateHelpers:
    """Tests for parse_date and day_of_week."""

    @pytest.mark.unit
    def test_parse_date_accepts_iso_string(self) -> None:
        assert parse_date("2025-03-10") == date(2025, 3, 10)

    @pytest.mark.unit
    def test_parse_date_passes_dates_through(self) -> None:
        value = date(2025, 3, 10)
        assert parse_date(value) is value

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["2025-13-01", "10/03/2025", "", None])
    def test_parse_date_rejects_invalid(self, value) -> None:
        with pytest.raises(ValidationException):
            parse_date(value)

    @pytest.mark.unit
    def test_day_of_week_starts_on_sunday(self) -> None:
        assert day_of_week(date(2025, 3, 9)) == 0  # Sunday
        assert day_of_week(date(2025, 3, 10)) == 1  # Monday
        assert day_of_week(date(2025, 3, 15)) == 6  # Saturday
