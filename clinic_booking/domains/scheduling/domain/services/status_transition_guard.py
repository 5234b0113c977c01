"""
Status Transition Guard

Role and ownership rules for changing and viewing appointments.
"""

from clinic_booking.core.domain import PermissionDeniedException

from ..entities.appointment import Appointment
from ..value_objects.actor import Actor, ActorRole
from ..value_objects.appointment_status import AppointmentStatus

_ALL_STATUSES = frozenset(AppointmentStatus)
_NO_STATUSES: frozenset[AppointmentStatus] = frozenset()
_PATIENT_STATUSES = frozenset({AppointmentStatus.CANCELLED})


class StatusTransitionGuard:
    """
    Decides which status changes an actor may make on an appointment.

    Rules:
    - admin: any status, on any appointment
    - doctor: any status, only on their own appointments
    - patient: only ``cancelled``, only on their own appointments
    - anyone else: nothing
    """

    def allowed_targets(self, actor: Actor, appointment: Appointment) -> frozenset[AppointmentStatus]:
        match actor.role:
            case ActorRole.ADMIN:
                return _ALL_STATUSES
            case ActorRole.DOCTOR:
                return _ALL_STATUSES if appointment.belongs_to_doctor(actor.actor_id) else _NO_STATUSES
            case ActorRole.PATIENT:
                return _PATIENT_STATUSES if appointment.belongs_to_patient(actor.actor_id) else _NO_STATUSES
            case _:
                return _NO_STATUSES

    def can_transition(self, actor: Actor, appointment: Appointment, new_status: AppointmentStatus) -> bool:
        return new_status in self.allowed_targets(actor, appointment)

    def authorize(self, actor: Actor, appointment: Appointment, new_status: AppointmentStatus) -> None:
        """
        Raises:
            PermissionDeniedException: If the actor may not set ``new_status``.
        """
        if not self.can_transition(actor, appointment, new_status):
            raise PermissionDeniedException(
                operation=f"set status to '{new_status.value}'",
                resource=f"appointment {appointment.id}",
                role=actor.role_name,
            )

    def can_view(self, actor: Actor, appointment: Appointment) -> bool:
        match actor.role:
            case ActorRole.ADMIN:
                return True
            case ActorRole.DOCTOR:
                return appointment.belongs_to_doctor(actor.actor_id)
            case ActorRole.PATIENT:
                return appointment.belongs_to_patient(actor.actor_id)
            case _:
                return False
