"""
Appointment Query Use Cases

Read access to appointments, filtered by what the actor is allowed to see.
"""

import logging
from dataclasses import dataclass
from datetime import date

from clinic_booking.core.domain import AppointmentNotFoundException, PermissionDeniedException
from clinic_booking.domains.scheduling.application.ports import IScheduleRepository
from clinic_booking.domains.scheduling.domain.entities import Appointment
from clinic_booking.domains.scheduling.domain.services import StatusTransitionGuard
from clinic_booking.domains.scheduling.domain.value_objects import (
    Actor,
    ActorRole,
    AppointmentStatus,
    AppointmentType,
    parse_date,
)

logger = logging.getLogger(__name__)


class GetAppointmentUseCase:
    """Fetch one appointment the actor is allowed to see."""

    def __init__(self, repository: IScheduleRepository, guard: StatusTransitionGuard | None = None):
        self.repository = repository
        self.guard = guard or StatusTransitionGuard()

    async def execute(self, actor: Actor, appointment_id: int) -> Appointment:
        async with self.repository.transaction():
            appointment = await self.repository.find_appointment(appointment_id)
        if appointment is None:
            raise AppointmentNotFoundException(appointment_id)
        if not self.guard.can_view(actor, appointment):
            raise PermissionDeniedException(
                operation="view",
                resource=f"appointment {appointment_id}",
                role=actor.role_name,
            )
        return appointment


@dataclass
class ListAppointmentsRequest:
    """Optional filters; strings are parsed and validated on construction."""

    actor: Actor
    status: AppointmentStatus | str | None = None
    appointment_date: date | str | None = None
    appointment_type: AppointmentType | str | None = None

    def __post_init__(self) -> None:
        if self.status is not None:
            self.status = AppointmentStatus.parse(self.status)
        if self.appointment_date is not None:
            self.appointment_date = parse_date(self.appointment_date)
        if self.appointment_type is not None:
            self.appointment_type = AppointmentType.parse(self.appointment_type)


class ListAppointmentsUseCase:
    """
    List appointments visible to the actor.

    Patients see their own, doctors see their own, admins see all.
    """

    def __init__(self, repository: IScheduleRepository):
        self.repository = repository

    async def execute(self, request: ListAppointmentsRequest) -> list[Appointment]:
        actor = request.actor
        patient_id: int | None = None
        doctor_id: int | None = None

        match actor.role:
            case ActorRole.ADMIN:
                pass
            case ActorRole.DOCTOR:
                doctor_id = actor.actor_id
            case ActorRole.PATIENT:
                patient_id = actor.actor_id
            case _:
                raise PermissionDeniedException(operation="list", resource="appointments", role=None)

        if actor.role is not ActorRole.ADMIN and actor.actor_id is None:
            raise PermissionDeniedException(operation="list", resource="appointments", role=actor.role_name)

        async with self.repository.transaction():
            appointments = await self.repository.find_appointments(
                patient_id=patient_id,
                doctor_id=doctor_id,
                status=request.status,
                appointment_date=request.appointment_date,
                appointment_type=request.appointment_type,
            )

        logger.debug(f"Listed {len(appointments)} appointments for role {actor.role_name}")
        return appointments
