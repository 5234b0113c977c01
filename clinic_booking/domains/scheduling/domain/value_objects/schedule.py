"""
Schedule Value Objects

Weekly working hours of a doctor and the bookable slots derived from them.
"""

from dataclasses import dataclass
from typing import Any

from clinic_booking.core.domain import ValidationException, ValueObject

from .time_of_day import TimeInterval, TimeOfDay


@dataclass(frozen=True)
class WeeklyScheduleEntry(ValueObject):
    """
    Working hours of one doctor on one weekday.

    ``day_of_week`` uses 0 = Sunday through 6 = Saturday. The break is only
    honoured when both of its ends are present.
    """

    doctor_id: int
    day_of_week: int
    start: TimeOfDay
    end: TimeOfDay
    break_start: TimeOfDay | None = None
    break_end: TimeOfDay | None = None
    is_available: bool = True

    def _validate(self) -> None:
        if not 0 <= self.day_of_week <= 6:
            raise ValidationException(f"Invalid day_of_week: {self.day_of_week}", field="day_of_week")
        if self.start >= self.end:
            raise ValidationException(
                f"Schedule start {self.start} must be before end {self.end}",
                details={"doctor_id": self.doctor_id, "day_of_week": self.day_of_week},
            )

    @property
    def working_hours(self) -> TimeInterval:
        return TimeInterval(self.start, self.end)

    @property
    def break_window(self) -> TimeInterval | None:
        if self.break_start is None or self.break_end is None:
            return None
        if self.break_start >= self.break_end:
            return None
        return TimeInterval(self.break_start, self.break_end)


@dataclass(frozen=True)
class Slot(ValueObject):
    """A bookable interval returned by availability queries."""

    start: TimeOfDay
    end: TimeOfDay
    available: bool = True

    @classmethod
    def from_interval(cls, interval: TimeInterval) -> "Slot":
        return cls(start=interval.start, end=interval.end)

    @property
    def interval(self) -> TimeInterval:
        return TimeInterval(self.start, self.end)

    def to_dict(self) -> dict[str, Any]:
        return {
            "start_time": str(self.start),
            "end_time": str(self.end),
            "available": self.available,
        }
