"""
Availability Calculator

Derives bookable slots for one doctor on one day from the weekly schedule
entry and that day's active appointments.
"""

import logging
from collections.abc import Iterator, Sequence

from clinic_booking.core.domain import ValidationException

from ..entities.appointment import DEFAULT_DURATION_MINUTES
from ..value_objects.schedule import Slot, WeeklyScheduleEntry
from ..value_objects.time_of_day import TimeInterval, TimeOfDay
from .conflict_detector import ConflictDetector

logger = logging.getLogger(__name__)


class AvailabilityCalculator:
    """
    Tiles working hours into fixed-length slots and removes blocked ones.

    A slot is blocked when it overlaps the break window or any active
    appointment. A trailing remainder shorter than the slot length is never
    offered.

    Example:
        ```python
        calculator = AvailabilityCalculator(slot_duration_minutes=30)
        slots = calculator.compute(entry, active_appointments=[])
        [str(s.start) for s in slots]  # ["09:00", "09:30", ...]
        ```
    """

    def __init__(
        self,
        slot_duration_minutes: int = DEFAULT_DURATION_MINUTES,
        conflict_detector: ConflictDetector | None = None,
    ):
        if slot_duration_minutes <= 0:
            raise ValidationException(
                f"Slot duration must be positive, got {slot_duration_minutes}",
                field="slot_duration_minutes",
            )
        self.slot_duration_minutes = slot_duration_minutes
        self._conflict_detector = conflict_detector or ConflictDetector()

    def tile(self, working_hours: TimeInterval) -> Iterator[TimeInterval]:
        """Yield consecutive slot intervals that fit entirely inside working_hours."""
        current = working_hours.start.minutes
        while current + self.slot_duration_minutes <= working_hours.end.minutes:
            yield TimeInterval(TimeOfDay(current), TimeOfDay(current + self.slot_duration_minutes))
            current += self.slot_duration_minutes

    def compute(
        self,
        entry: WeeklyScheduleEntry | None,
        active_appointments: Sequence[TimeInterval],
    ) -> list[Slot]:
        """
        Compute the free slots for a day, in ascending start order.

        Args:
            entry: Schedule for the weekday, or None when the doctor has none
            active_appointments: Intervals of non-cancelled, non-completed bookings

        Returns:
            Available slots; empty when the doctor does not work that day
        """
        if entry is None or not entry.is_available:
            return []

        blocked = list(active_appointments)
        break_window = entry.break_window
        if break_window is not None:
            blocked.append(break_window)

        slots = [
            Slot.from_interval(interval)
            for interval in self.tile(entry.working_hours)
            if not self._conflict_detector.has_conflict(interval, blocked)
        ]

        logger.debug(
            f"Doctor {entry.doctor_id} day {entry.day_of_week}: "
            f"{len(slots)} free slots, {len(active_appointments)} active appointments"
        )
        return slots
