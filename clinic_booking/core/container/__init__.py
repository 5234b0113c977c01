"""
Dependency containers.

Containers are owned by the application (``app.state.container``), not by
module globals.
"""

from clinic_booking.core.container.scheduling import SchedulingContainer

__all__ = ["SchedulingContainer"]
