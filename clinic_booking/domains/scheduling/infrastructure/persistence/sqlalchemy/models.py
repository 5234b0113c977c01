"""
Scheduling SQLAlchemy Models

Database models for scheduling persistence. Clock times are stored as
integer minutes since midnight.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Enum as SQLEnum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from clinic_booking.database.base import Base, TimestampMixin
from clinic_booking.domains.scheduling.domain.value_objects.appointment_status import (
    AppointmentStatus,
    AppointmentType,
)


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class PatientModel(Base, TimestampMixin):
    """SQLAlchemy model for patient profiles."""

    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=True)

    appointments = relationship("AppointmentModel", back_populates="patient")

    def __repr__(self) -> str:
        return f"<Patient(id={self.id}, name='{self.first_name} {self.last_name}')>"


class DoctorModel(Base, TimestampMixin):
    """SQLAlchemy model for doctor profiles."""

    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    specialization = Column(String(100), nullable=True)
    license_number = Column(String(50), unique=True, nullable=True)
    is_approved = Column(Boolean, default=False, nullable=False)

    schedules = relationship("DoctorScheduleModel", back_populates="doctor", cascade="all, delete-orphan")
    appointments = relationship("AppointmentModel", back_populates="doctor")

    def __repr__(self) -> str:
        return f"<Doctor(id={self.id}, name='{self.first_name} {self.last_name}', approved={self.is_approved})>"


class DoctorScheduleModel(Base, TimestampMixin):
    """Weekly working hours, one row per doctor and weekday (0 = Sunday)."""

    __tablename__ = "doctor_schedules"

    id = Column(Integer, primary_key=True, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.id", ondelete="CASCADE"), nullable=False)
    day_of_week = Column(Integer, nullable=False)
    start_minutes = Column(Integer, nullable=False)
    end_minutes = Column(Integer, nullable=False)
    break_start_minutes = Column(Integer, nullable=True)
    break_end_minutes = Column(Integer, nullable=True)
    is_available = Column(Boolean, default=True, nullable=False)

    doctor = relationship("DoctorModel", back_populates="schedules")

    __table_args__ = (
        UniqueConstraint("doctor_id", "day_of_week", name="uq_doctor_schedules_doctor_day"),
        CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_doctor_schedules_day_of_week"),
        CheckConstraint("start_minutes < end_minutes", name="ck_doctor_schedules_hours"),
    )

    def __repr__(self) -> str:
        return f"<DoctorSchedule(doctor_id={self.doctor_id}, day={self.day_of_week})>"


class AppointmentModel(Base, TimestampMixin):
    """SQLAlchemy model for appointments. Rows are never deleted."""

    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.id"), nullable=False)

    appointment_date = Column(Date, nullable=False)
    start_minutes = Column(Integer, nullable=False)
    end_minutes = Column(Integer, nullable=False)

    status = Column(
        SQLEnum(AppointmentStatus, name="appointment_status", values_callable=_enum_values),
        default=AppointmentStatus.SCHEDULED,
        nullable=False,
    )
    appointment_type = Column(
        "type",
        SQLEnum(AppointmentType, name="appointment_type", values_callable=_enum_values),
        default=AppointmentType.IN_PERSON,
        nullable=False,
    )

    reason = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    patient = relationship("PatientModel", back_populates="appointments")
    doctor = relationship("DoctorModel", back_populates="appointments")

    __table_args__ = (
        Index("ix_appointments_doctor_date", "doctor_id", "appointment_date"),
        CheckConstraint("start_minutes < end_minutes", name="ck_appointments_interval"),
    )

    def __repr__(self) -> str:
        return f"<Appointment(id={self.id}, doctor_id={self.doctor_id}, date={self.appointment_date}, status={self.status})>"
