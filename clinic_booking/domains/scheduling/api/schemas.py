"""
Scheduling API Schemas

Pydantic models for scheduling API requests and responses. Times are
exchanged as "HH:MM" strings and parsed by the domain, so malformed values
come back as INVALID_INPUT rather than schema errors.
"""

from datetime import date, datetime
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from clinic_booking.domains.scheduling.domain.entities import Appointment
from clinic_booking.domains.scheduling.domain.value_objects import Slot


class SlotResponse(BaseModel):
    """A free slot."""

    start_time: str
    end_time: str
    available: bool = True

    @classmethod
    def from_slot(cls, slot: Slot) -> "SlotResponse":
        return cls(**slot.to_dict())


class AvailableSlotsResponse(BaseModel):
    """Free slots of a doctor for one day."""

    doctor_id: int
    appointment_date: date
    slots: list[SlotResponse]


class AvailabilityRangeResponse(BaseModel):
    """Free slots of a doctor per day; days without slots are omitted."""

    doctor_id: int
    start_date: date
    end_date: date
    days: dict[str, list[SlotResponse]]


class AppointmentRequest(BaseModel):
    """Request to book an appointment. The patient is the calling actor."""

    doctor_id: int = Field(..., ge=1, description="Doctor ID")
    appointment_date: str = Field(..., description="Date (YYYY-MM-DD)")
    start_time: str = Field(..., description="Start time (HH:MM)")
    type: str = Field("in-person", description="in-person or virtual")
    reason: Annotated[str, StringConstraints(strip_whitespace=True, min_length=5, max_length=500)] = Field(
        ..., description="Reason for the visit"
    )


class StatusUpdateRequest(BaseModel):
    """Request to change an appointment's status."""

    status: str = Field(..., description="scheduled, confirmed, completed, cancelled or rescheduled")
    notes: str | None = Field(None, max_length=2000, description="Notes; omit to keep existing notes")


class AppointmentResponse(BaseModel):
    """Appointment representation."""

    id: int
    patient_id: int
    doctor_id: int
    appointment_date: date
    start_time: str
    end_time: str
    status: str
    type: str
    reason: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, appointment: Appointment) -> "AppointmentResponse":
        return cls(
            id=appointment.id or 0,
            patient_id=appointment.patient_id,
            doctor_id=appointment.doctor_id,
            appointment_date=appointment.appointment_date,
            start_time=str(appointment.start),
            end_time=str(appointment.end),
            status=appointment.status.value,
            type=appointment.appointment_type.value,
            reason=appointment.reason,
            notes=appointment.notes,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )


class AppointmentListResponse(BaseModel):
    """List of appointments."""

    appointments: list[AppointmentResponse]
    count: int
