"""
Scheduling repository implementations.
"""

from .schedule_repository import SQLAlchemyScheduleRepository

__all__ = ["SQLAlchemyScheduleRepository"]
