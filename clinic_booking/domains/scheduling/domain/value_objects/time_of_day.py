"""
Time Value Objects

Clock times are kept as integral minutes since midnight so that ordering and
overlap checks are plain integer comparisons. Text forms ("HH:MM") only exist
at the edges.
"""

import re
from dataclasses import dataclass
from datetime import date, time
from typing import Self

from clinic_booking.core.domain import ValidationException, ValueObject

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9])(?::[0-5][0-9])?$")


@dataclass(frozen=True, order=True)
class TimeOfDay(ValueObject):
    """
    A clock time within a single day, 00:00 to 23:59.

    Example:
        ```python
        start = TimeOfDay.parse("09:30")
        start.minutes  # 570
        str(start.plus_minutes(30))  # "10:00"
        ```
    """

    minutes: int

    def _validate(self) -> None:
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, int):
            raise ValidationException(f"Time must be an integer number of minutes, got {self.minutes!r}", field="time")
        if not 0 <= self.minutes < MINUTES_PER_DAY:
            raise ValidationException(f"Time {self.minutes} is outside of a day", field="time")

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse "HH:MM" (seconds, if present, are ignored)."""
        if not isinstance(value, str):
            raise ValidationException(f"Invalid time format: {value!r}", field="time")
        match = _TIME_PATTERN.match(value.strip())
        if match is None:
            raise ValidationException(f"Invalid time format: {value!r}, expected HH:MM", field="time")
        hours, minutes = int(match.group(1)), int(match.group(2))
        return cls(hours * 60 + minutes)

    @classmethod
    def from_time(cls, value: time) -> Self:
        return cls(value.hour * 60 + value.minute)

    @classmethod
    def coerce(cls, value: "TimeOfDay | time | str") -> "TimeOfDay":
        """Accept a TimeOfDay, a datetime.time or an "HH:MM" string."""
        if isinstance(value, TimeOfDay):
            return value
        if isinstance(value, time):
            return cls.from_time(value)
        return cls.parse(value)

    def plus_minutes(self, minutes: int) -> "TimeOfDay":
        """
        Shift forward by ``minutes``.

        Raises:
            ValidationException: If the result reaches or passes midnight.
        """
        total = self.minutes + minutes
        if total >= MINUTES_PER_DAY:
            raise ValidationException(
                f"{self} plus {minutes} minutes runs past the end of the day",
                field="start_time",
                details={"start_time": str(self), "duration_minutes": minutes},
            )
        return TimeOfDay(total)

    def to_time(self) -> time:
        return time(self.minutes // 60, self.minutes % 60)

    def __str__(self) -> str:
        return f"{self.minutes // 60:02d}:{self.minutes % 60:02d}"


@dataclass(frozen=True)
class TimeInterval(ValueObject):
    """
    Half-open interval [start, end) within a day.

    Two intervals overlap only when they share some minute; touching
    endpoints (09:00-09:30 and 09:30-10:00) do not overlap.
    """

    start: TimeOfDay
    end: TimeOfDay

    def _validate(self) -> None:
        if self.start >= self.end:
            raise ValidationException(
                f"Interval start {self.start} must be before end {self.end}",
                details={"start": str(self.start), "end": str(self.end)},
            )

    @classmethod
    def from_minutes(cls, start: int, end: int) -> Self:
        return cls(TimeOfDay(start), TimeOfDay(end))

    @classmethod
    def parse(cls, start: str, end: str) -> Self:
        return cls(TimeOfDay.parse(start), TimeOfDay.parse(end))

    @property
    def duration_minutes(self) -> int:
        return self.end.minutes - self.start.minutes

    def overlaps(self, other: "TimeInterval") -> bool:
        """Strict overlap: a.start < b.end and a.end > b.start."""
        return self.start < other.end and self.end > other.start

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


def parse_date(value: date | str, field: str = "date") -> date:
    """Accept a date or an ISO "YYYY-MM-DD" string."""
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as e:
        raise ValidationException(f"Invalid date: {value!r}, expected YYYY-MM-DD", field=field) from e


def day_of_week(value: date) -> int:
    """Weekday index with 0 = Sunday through 6 = Saturday."""
    return value.isoweekday() % 7
