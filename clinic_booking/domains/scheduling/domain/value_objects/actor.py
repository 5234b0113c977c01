"""
Actor Value Object

The authenticated caller of a scheduling operation. Authentication itself
happens outside the domain; by the time an Actor exists its role and id are
trusted.
"""

from dataclasses import dataclass

from clinic_booking.core.domain import StatusEnum, ValueObject


class ActorRole(StatusEnum):
    PATIENT = "patient"
    DOCTOR = "doctor"
    ADMIN = "admin"


@dataclass(frozen=True)
class Actor(ValueObject):
    """
    Caller identity.

    ``actor_id`` is the patient id for patients and the doctor id for doctors.
    ``role`` is None for callers whose role is not recognised; such actors are
    denied every guarded operation.
    """

    role: ActorRole | None
    actor_id: int | None = None

    @classmethod
    def from_claims(cls, role: str | None, actor_id: int | None) -> "Actor":
        """Build an actor from untrusted role text, mapping unknown roles to None."""
        parsed: ActorRole | None = None
        if role:
            try:
                parsed = ActorRole.from_string(role.strip())
            except ValueError:
                parsed = None
        return cls(role=parsed, actor_id=actor_id)

    @property
    def role_name(self) -> str | None:
        return self.role.value if self.role else None

    def is_admin(self) -> bool:
        return self.role is ActorRole.ADMIN
