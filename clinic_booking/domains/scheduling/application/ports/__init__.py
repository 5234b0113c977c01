"""
Scheduling Domain Ports

Interfaces (ports) for the scheduling domain following Clean Architecture.
"""

from clinic_booking.domains.scheduling.application.ports.schedule_repository import IScheduleRepository

__all__ = ["IScheduleRepository"]
