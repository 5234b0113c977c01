"""
Doctor Entity for Scheduling Domain
"""

from dataclasses import dataclass
from typing import Any

from clinic_booking.core.domain import Entity


@dataclass
class Doctor(Entity[int]):
    """
    Doctor as seen by scheduling.

    Only approved doctors accept new bookings. Approval itself is managed
    elsewhere.
    """

    first_name: str = ""
    last_name: str = ""
    specialization: str | None = None
    license_number: str | None = None
    is_approved: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def can_accept_appointments(self) -> bool:
        return self.is_approved

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "full_name": self.full_name,
            "specialization": self.specialization,
            "is_approved": self.is_approved,
        }
