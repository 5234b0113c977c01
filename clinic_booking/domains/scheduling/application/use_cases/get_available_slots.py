"""
Get Available Slots Use Case

Lists the free slots of a doctor for a day or a range of days.
"""

import logging
from datetime import date, timedelta

from clinic_booking.core.domain import ValidationException
from clinic_booking.domains.scheduling.application.ports import IScheduleRepository
from clinic_booking.domains.scheduling.domain.services import AvailabilityCalculator
from clinic_booking.domains.scheduling.domain.value_objects import Slot, day_of_week, parse_date

logger = logging.getLogger(__name__)

DEFAULT_MAX_RANGE_DAYS = 31


class GetAvailableSlotsUseCase:
    """
    Use case for availability queries.

    Read-only; it takes no booking lock, so the answer may be stale by the
    time a booking is attempted. Booking re-checks conflicts itself.
    """

    def __init__(
        self,
        repository: IScheduleRepository,
        calculator: AvailabilityCalculator,
        max_range_days: int = DEFAULT_MAX_RANGE_DAYS,
    ):
        self.repository = repository
        self.calculator = calculator
        self.max_range_days = max_range_days

    async def execute(self, doctor_id: int, appointment_date: date | str) -> list[Slot]:
        """
        Get free slots for one day.

        Args:
            doctor_id: Doctor ID
            appointment_date: Date or "YYYY-MM-DD"

        Returns:
            Slots in ascending order; empty if the doctor does not work that day
        """
        target = parse_date(appointment_date)
        async with self.repository.transaction():
            return await self._slots_for(doctor_id, target)

    async def execute_range(
        self,
        doctor_id: int,
        start_date: date | str,
        end_date: date | str,
    ) -> dict[date, list[Slot]]:
        """
        Get free slots for every day in an inclusive date range.

        Days without any free slot are omitted.

        Raises:
            ValidationException: If the range is reversed or too long
        """
        first = parse_date(start_date, field="start_date")
        last = parse_date(end_date, field="end_date")
        if last < first:
            raise ValidationException(
                f"end_date {last} is before start_date {first}",
                field="end_date",
            )
        span = (last - first).days + 1
        if span > self.max_range_days:
            raise ValidationException(
                f"Date range of {span} days exceeds the maximum of {self.max_range_days}",
                field="end_date",
                details={"max_range_days": self.max_range_days},
            )

        availability: dict[date, list[Slot]] = {}
        async with self.repository.transaction():
            for offset in range(span):
                current = first + timedelta(days=offset)
                slots = await self._slots_for(doctor_id, current)
                if slots:
                    availability[current] = slots

        logger.debug(f"Doctor {doctor_id}: {len(availability)} days with availability between {first} and {last}")
        return availability

    async def _slots_for(self, doctor_id: int, target: date) -> list[Slot]:
        entry = await self.repository.load_weekly_schedule(doctor_id, day_of_week(target))
        if entry is None or not entry.is_available:
            return []
        active = await self.repository.load_active_appointments(doctor_id, target)
        return self.calculator.compute(entry, active)
