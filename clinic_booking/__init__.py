"""
Clinic Booking

Appointment scheduling service: doctor availability, conflict-free booking
and role-governed status transitions.
"""

__version__ = "0.1.0"
