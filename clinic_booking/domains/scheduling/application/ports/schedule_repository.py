"""
Schedule Repository Port

Interface for the scheduling data the core reads and writes.
"""

from contextlib import AbstractAsyncContextManager
from datetime import date
from typing import Protocol, runtime_checkable

from clinic_booking.domains.scheduling.domain.entities import Appointment, Doctor
from clinic_booking.domains.scheduling.domain.value_objects import (
    AppointmentStatus,
    AppointmentType,
    TimeInterval,
    WeeklyScheduleEntry,
)


@runtime_checkable
class IScheduleRepository(Protocol):
    """
    Schedule repository interface.

    Implementations translate storage errors into ``PersistenceException``.

    Example:
        ```python
        async with repository.transaction():
            await repository.lock_doctor_day(doctor_id, appointment_date)
            busy = await repository.load_active_appointments(doctor_id, appointment_date)
            ...
            await repository.insert_appointment(appointment)
        ```
    """

    def transaction(self) -> AbstractAsyncContextManager[None]:
        """
        Unit of work: commits when the block exits normally and rolls back
        on any exception, cancellation included.
        """
        ...

    async def find_doctor(self, doctor_id: int) -> Doctor | None: ...

    async def load_weekly_schedule(self, doctor_id: int, day_of_week: int) -> WeeklyScheduleEntry | None:
        """
        Load the schedule entry for a weekday.

        Args:
            doctor_id: Doctor ID
            day_of_week: 0 = Sunday through 6 = Saturday

        Returns:
            The entry, or None if the doctor has no hours that day
        """
        ...

    async def load_active_appointments(self, doctor_id: int, appointment_date: date) -> list[TimeInterval]:
        """
        Intervals of the doctor's appointments on a date whose status is
        neither cancelled nor completed, ordered by start time.
        """
        ...

    async def lock_doctor_day(self, doctor_id: int, appointment_date: date) -> None:
        """
        Take a storage-level exclusive lock that serializes bookings for the
        doctor across processes. Must be called inside ``transaction()``.
        """
        ...

    async def insert_appointment(self, appointment: Appointment) -> Appointment:
        """
        Persist a new appointment.

        Returns:
            The appointment with its assigned ID
        """
        ...

    async def find_appointment(self, appointment_id: int) -> Appointment | None: ...

    async def update_appointment_status(
        self,
        appointment_id: int,
        status: AppointmentStatus,
        notes: str | None,
    ) -> None:
        """
        Overwrite status and notes of an existing appointment.

        Raises:
            AppointmentNotFoundException: If no appointment has that ID
        """
        ...

    async def find_appointments(
        self,
        patient_id: int | None = None,
        doctor_id: int | None = None,
        status: AppointmentStatus | None = None,
        appointment_date: date | None = None,
        appointment_type: AppointmentType | None = None,
    ) -> list[Appointment]:
        """
        Filtered appointment list, newest date first, then latest start first.
        """
        ...
