"""
Appointment Entity for Scheduling Domain

A booked consultation between a patient and a doctor. Appointments are never
deleted; cancelling or completing one only changes its status.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from clinic_booking.core.domain import AggregateRoot, ValidationException

from ..value_objects.appointment_status import AppointmentStatus, AppointmentType
from ..value_objects.time_of_day import TimeInterval, TimeOfDay

DEFAULT_DURATION_MINUTES = 30


@dataclass
class Appointment(AggregateRoot[int]):
    """
    Appointment aggregate root.

    Example:
        ```python
        appointment = Appointment.schedule(
            patient_id=7,
            doctor_id=3,
            appointment_date=date(2025, 3, 10),
            start=TimeOfDay.parse("09:00"),
        )
        appointment.end  # TimeOfDay 09:30
        appointment.change_status(AppointmentStatus.CONFIRMED)
        ```
    """

    patient_id: int = 0
    doctor_id: int = 0

    appointment_date: date | None = None
    start: TimeOfDay | None = None
    end: TimeOfDay | None = None

    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    appointment_type: AppointmentType = AppointmentType.IN_PERSON

    reason: str | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        if self.start is not None and self.end is not None and self.start >= self.end:
            raise ValidationException(
                f"Appointment start {self.start} must be before end {self.end}",
                details={"start_time": str(self.start), "end_time": str(self.end)},
            )

    @classmethod
    def schedule(
        cls,
        patient_id: int,
        doctor_id: int,
        appointment_date: date,
        start: TimeOfDay,
        duration_minutes: int = DEFAULT_DURATION_MINUTES,
        appointment_type: AppointmentType = AppointmentType.IN_PERSON,
        reason: str | None = None,
    ) -> "Appointment":
        """
        Create a new appointment in the scheduled state.

        Raises:
            ValidationException: If the appointment would run past midnight.
        """
        return cls(
            patient_id=patient_id,
            doctor_id=doctor_id,
            appointment_date=appointment_date,
            start=start,
            end=start.plus_minutes(duration_minutes),
            status=AppointmentStatus.SCHEDULED,
            appointment_type=appointment_type,
            reason=reason,
        )

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def interval(self) -> TimeInterval:
        if self.start is None or self.end is None:
            raise ValidationException("Appointment has no time assigned")
        return TimeInterval(self.start, self.end)

    @property
    def is_active(self) -> bool:
        return self.status.is_active()

    def belongs_to_patient(self, patient_id: int | None) -> bool:
        return patient_id is not None and self.patient_id == patient_id

    def belongs_to_doctor(self, doctor_id: int | None) -> bool:
        return doctor_id is not None and self.doctor_id == doctor_id

    # =========================================================================
    # State changes
    # =========================================================================

    def change_status(self, new_status: AppointmentStatus, notes: str | None = None) -> None:
        """
        Move to ``new_status``.

        Empty or missing notes keep the notes already on the appointment.
        Permission checks are the caller's responsibility.
        """
        self.status = new_status
        if notes:
            self.notes = notes
        self.increment_version()
        self.touch()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "id": self.id,
            "patient_id": self.patient_id,
            "doctor_id": self.doctor_id,
            "appointment_date": self.appointment_date.isoformat() if self.appointment_date else None,
            "start_time": str(self.start) if self.start else None,
            "end_time": str(self.end) if self.end else None,
            "status": self.status.value,
            "type": self.appointment_type.value,
            "reason": self.reason,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
