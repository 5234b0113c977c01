"""
Scheduling Domain Layer

Entities, value objects and pure services for appointment scheduling.
"""

from .entities import Appointment, Doctor
from .services import AvailabilityCalculator, ConflictDetector, StatusTransitionGuard
from .value_objects import (
    Actor,
    ActorRole,
    AppointmentStatus,
    AppointmentType,
    Slot,
    TimeInterval,
    TimeOfDay,
    WeeklyScheduleEntry,
)

__all__ = [
    "Appointment",
    "Doctor",
    "AvailabilityCalculator",
    "ConflictDetector",
    "StatusTransitionGuard",
    "Actor",
    "ActorRole",
    "AppointmentStatus",
    "AppointmentType",
    "Slot",
    "TimeInterval",
    "TimeOfDay",
    "WeeklyScheduleEntry",
]
