"""
Update Appointment Status Use Case

Changes an appointment's status when the acting role is allowed to.
"""

from dataclasses import dataclass

from clinic_booking.core.domain import AppointmentNotFoundException, PermissionDeniedException
from clinic_booking.core.shared import get_use_case_logger
from clinic_booking.domains.scheduling.application.ports import IScheduleRepository
from clinic_booking.domains.scheduling.domain.entities import Appointment
from clinic_booking.domains.scheduling.domain.services import StatusTransitionGuard
from clinic_booking.domains.scheduling.domain.value_objects import Actor, AppointmentStatus

logger = get_use_case_logger("update_appointment_status")


@dataclass
class UpdateAppointmentStatusRequest:
    """Request for a status change. Unknown status values raise ValidationException."""

    actor: Actor
    appointment_id: int
    new_status: AppointmentStatus | str
    notes: str | None = None

    def __post_init__(self) -> None:
        self.new_status = AppointmentStatus.parse(self.new_status)


class UpdateAppointmentStatusUseCase:
    """
    Use case for status transitions.

    Omitted or empty notes leave the existing notes untouched.
    """

    def __init__(
        self,
        repository: IScheduleRepository,
        guard: StatusTransitionGuard | None = None,
    ):
        self.repository = repository
        self.guard = guard or StatusTransitionGuard()

    async def execute(self, request: UpdateAppointmentStatusRequest) -> Appointment:
        """
        Execute the status change.

        Raises:
            AppointmentNotFoundException: Unknown appointment
            PermissionDeniedException: Actor may not set this status
            PersistenceException: Storage failure
        """
        log = logger.with_context(
            appointment_id=request.appointment_id,
            role=request.actor.role_name,
            actor_id=request.actor.actor_id,
            new_status=request.new_status.value,
        )

        async with self.repository.transaction():
            appointment = await self.repository.find_appointment(request.appointment_id)
            if appointment is None:
                raise AppointmentNotFoundException(request.appointment_id)

            try:
                self.guard.authorize(request.actor, appointment, request.new_status)
            except PermissionDeniedException:
                log.warning("Status change denied", current_status=appointment.status.value)
                raise

            previous = appointment.status
            appointment.change_status(request.new_status, request.notes)
            await self.repository.update_appointment_status(
                appointment.id,
                appointment.status,
                appointment.notes,
            )

        log.info("Appointment status changed", previous_status=previous.value)
        return appointment
