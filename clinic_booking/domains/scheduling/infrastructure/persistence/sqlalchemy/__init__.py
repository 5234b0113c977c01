"""
Scheduling SQLAlchemy persistence models.
"""

from .models import AppointmentModel, DoctorModel, DoctorScheduleModel, PatientModel

__all__ = ["AppointmentModel", "DoctorModel", "DoctorScheduleModel", "PatientModel"]
