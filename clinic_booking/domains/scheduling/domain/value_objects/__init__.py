"""
Scheduling Domain Value Objects
"""

from .actor import Actor, ActorRole
from .appointment_status import AppointmentStatus, AppointmentType
from .schedule import Slot, WeeklyScheduleEntry
from .time_of_day import MINUTES_PER_DAY, TimeInterval, TimeOfDay, day_of_week, parse_date

__all__ = [
    "Actor",
    "ActorRole",
    "AppointmentStatus",
    "AppointmentType",
    "Slot",
    "WeeklyScheduleEntry",
    "MINUTES_PER_DAY",
    "TimeInterval",
    "TimeOfDay",
    "day_of_week",
    "parse_date",
]
