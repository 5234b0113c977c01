"""Scheduling schema: patients, doctors, weekly schedules, appointments

Revision ID: 0001_scheduling
Revises:
Create Date: 2025-02-03

Clock times are stored as integer minutes since midnight (0-1439).
Appointment status and type are stored by value ("in-person", "cancelled").
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_scheduling"
down_revision = None
branch_labels = None
depends_on = None

APPOINTMENT_STATUSES = ("scheduled", "confirmed", "completed", "cancelled", "rescheduled")
APPOINTMENT_TYPES = ("in-person", "virtual")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    """Create scheduling tables."""

    # =========================================================================
    # Profiles
    # =========================================================================
    op.create_table(
        "patients",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(20), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_patients_id", "patients", ["id"])

    op.create_table(
        "doctors",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("specialization", sa.String(100), nullable=True),
        sa.Column("license_number", sa.String(50), nullable=True, unique=True),
        sa.Column(
            "is_approved",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
            comment="Only approved doctors accept bookings",
        ),
        *_timestamps(),
    )
    op.create_index("ix_doctors_id", "doctors", ["id"])

    # =========================================================================
    # Weekly schedules
    # =========================================================================
    op.create_table(
        "doctor_schedules",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("doctor_id", sa.Integer(), sa.ForeignKey("doctors.id", ondelete="CASCADE"), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False, comment="0 = Sunday ... 6 = Saturday"),
        sa.Column("start_minutes", sa.Integer(), nullable=False, comment="Minutes since midnight"),
        sa.Column("end_minutes", sa.Integer(), nullable=False, comment="Minutes since midnight"),
        sa.Column("break_start_minutes", sa.Integer(), nullable=True),
        sa.Column("break_end_minutes", sa.Integer(), nullable=True),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.UniqueConstraint("doctor_id", "day_of_week", name="uq_doctor_schedules_doctor_day"),
        sa.CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_doctor_schedules_day_of_week"),
        sa.CheckConstraint("start_minutes < end_minutes", name="ck_doctor_schedules_hours"),
    )
    op.create_index("ix_doctor_schedules_id", "doctor_schedules", ["id"])

    # =========================================================================
    # Appointments
    # =========================================================================
    op.create_table(
        "appointments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("patient_id", sa.Integer(), sa.ForeignKey("patients.id"), nullable=False),
        sa.Column("doctor_id", sa.Integer(), sa.ForeignKey("doctors.id"), nullable=False),
        sa.Column("appointment_date", sa.Date(), nullable=False),
        sa.Column("start_minutes", sa.Integer(), nullable=False, comment="Minutes since midnight"),
        sa.Column("end_minutes", sa.Integer(), nullable=False, comment="Minutes since midnight"),
        sa.Column(
            "status",
            sa.Enum(*APPOINTMENT_STATUSES, name="appointment_status"),
            nullable=False,
            server_default="scheduled",
        ),
        sa.Column(
            "type",
            sa.Enum(*APPOINTMENT_TYPES, name="appointment_type"),
            nullable=False,
            server_default="in-person",
        ),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("start_minutes < end_minutes", name="ck_appointments_interval"),
    )
    op.create_index("ix_appointments_id", "appointments", ["id"])
    op.create_index("ix_appointments_patient_id", "appointments", ["patient_id"])
    op.create_index("ix_appointments_doctor_date", "appointments", ["doctor_id", "appointment_date"])


def downgrade() -> None:
    """Drop scheduling tables and enum types."""
    op.drop_index("ix_appointments_doctor_date", table_name="appointments")
    op.drop_index("ix_appointments_patient_id", table_name="appointments")
    op.drop_index("ix_appointments_id", table_name="appointments")
    op.drop_table("appointments")

    op.drop_index("ix_doctor_schedules_id", table_name="doctor_schedules")
    op.drop_table("doctor_schedules")

    op.drop_index("ix_doctors_id", table_name="doctors")
    op.drop_table("doctors")

    op.drop_index("ix_patients_id", table_name="patients")
    op.drop_table("patients")

    sa.Enum(name="appointment_type").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="appointment_status").drop(op.get_bind(), checkfirst=True)
