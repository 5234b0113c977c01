"""
Scheduling Domain Entities
"""

from .appointment import DEFAULT_DURATION_MINUTES, Appointment
from .doctor import Doctor

__all__ = ["Appointment", "Doctor", "DEFAULT_DURATION_MINUTES"]
