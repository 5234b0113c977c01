"""
Scheduling Domain Value Objects

Status and type enums for appointments.
"""

from clinic_booking.core.domain import StatusEnum, ValidationException


class AppointmentStatus(StatusEnum):
    """
    Appointment lifecycle states.

    No state is terminal: who may move an appointment to which state is
    decided by StatusTransitionGuard, not by the current state.
    Cancelled and completed appointments no longer occupy their slot.
    """

    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RESCHEDULED = "rescheduled"

    @classmethod
    def inactive(cls) -> frozenset["AppointmentStatus"]:
        return frozenset({cls.CANCELLED, cls.COMPLETED})

    @classmethod
    def parse(cls, value: "AppointmentStatus | str") -> "AppointmentStatus":
        """Like from_string, but raises ValidationException for unknown values."""
        if isinstance(value, AppointmentStatus):
            return value
        try:
            return cls.from_string(value)
        except (AttributeError, ValueError) as e:
            raise ValidationException(
                f"Invalid status: {value!r}",
                field="status",
                details={"allowed": cls.values()},
            ) from e

    def is_active(self) -> bool:
        """Active appointments block their time slot."""
        return self not in self.inactive()


class AppointmentType(StatusEnum):
    """How the consultation takes place."""

    IN_PERSON = "in-person"
    VIRTUAL = "virtual"

    @classmethod
    def parse(cls, value: "AppointmentType | str") -> "AppointmentType":
        if isinstance(value, AppointmentType):
            return value
        try:
            return cls.from_string(value)
        except (AttributeError, ValueError) as e:
            raise ValidationException(
                f"Invalid appointment type: {value!r}",
                field="type",
                details={"allowed": cls.values()},
            ) from e
