"""
Scheduling API Layer
"""

from clinic_booking.domains.scheduling.api.routes import router

__all__ = ["router"]
