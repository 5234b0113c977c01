"""
Scheduling Use Cases
"""

from .book_appointment import BookAppointmentRequest, BookAppointmentUseCase
from .get_appointments import GetAppointmentUseCase, ListAppointmentsRequest, ListAppointmentsUseCase
from .get_available_slots import GetAvailableSlotsUseCase
from .update_appointment_status import UpdateAppointmentStatusRequest, UpdateAppointmentStatusUseCase

__all__ = [
    "BookAppointmentRequest",
    "BookAppointmentUseCase",
    "GetAppointmentUseCase",
    "ListAppointmentsRequest",
    "ListAppointmentsUseCase",
    "GetAvailableSlotsUseCase",
    "UpdateAppointmentStatusRequest",
    "UpdateAppointmentStatusUseCase",
]
