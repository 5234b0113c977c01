"""
Shared pytest fixtures for all tests.

This module provides common fixtures for database sessions, mock
repositories and seeded scheduling data.
"""

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_booking.config.settings import Settings
from clinic_booking.database import Database
from clinic_booking.domains.scheduling.domain.entities import Doctor
from clinic_booking.domains.scheduling.domain.value_objects import TimeOfDay, WeeklyScheduleEntry
from clinic_booking.domains.scheduling.infrastructure.persistence.sqlalchemy.models import (
    DoctorModel,
    DoctorScheduleModel,
    PatientModel,
)

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"


# ============================================================================
# FAKES
# ============================================================================


class FakeTransaction:
    """Stand-in for repository.transaction() that records the outcome."""

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    @asynccontextmanager
    async def __call__(self):
        try:
            yield
        except BaseException:
            self.rollbacks += 1
            raise
        self.commits += 1


# ============================================================================
# DOMAIN FIXTURES
# ============================================================================


@pytest.fixture
def approved_doctor() -> Doctor:
    return Doctor(id=1, first_name="Ana", last_name="Pérez", specialization="Cardiology", is_approved=True)


@pytest.fixture
def monday_schedule() -> WeeklyScheduleEntry:
    """09:00-12:00 on Mondays, no break."""
    return WeeklyScheduleEntry(
        doctor_id=1,
        day_of_week=1,
        start=TimeOfDay.parse("09:00"),
        end=TimeOfDay.parse("12:00"),
    )


@pytest.fixture
def mock_schedule_repository(approved_doctor, monday_schedule):
    """Create a mock schedule repository with an approved doctor and no bookings."""
    repository = AsyncMock()
    repository.transaction = FakeTransaction()
    repository.find_doctor.return_value = approved_doctor
    repository.load_weekly_schedule.return_value = monday_schedule
    repository.load_active_appointments.return_value = []

    async def _insert(appointment):
        appointment.id = 100
        return appointment

    repository.insert_appointment.side_effect = _insert
    return repository


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'clinic_test.db'}",
        ENVIRONMENT="test",
        APPOINTMENT_DURATION_MINUTES=30,
        LOG_FORMAT="plain",
    )


@pytest_asyncio.fixture
async def database(test_settings: Settings) -> AsyncGenerator[Database, None]:
    """Create the schema in a fresh database and dispose it afterwards."""
    db = Database.from_settings(test_settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as session:
        yield session


@dataclass
class SeedData:
    patient_id: int
    other_patient_id: int
    doctor_id: int
    doctor_with_break_id: int
    unapproved_doctor_id: int


@pytest_asyncio.fixture
async def seed_data(database: Database) -> SeedData:
    """
    Seed two patients and three doctors.

    - doctor: approved, Mondays 09:00-12:00
    - doctor_with_break: approved, Mondays 09:00-12:00 with a 10:00-10:30 break
    - unapproved_doctor: not approved, Mondays 09:00-12:00
    """
    async with database.session() as session:
        patient = PatientModel(first_name="Juan", last_name="García")
        other_patient = PatientModel(first_name="Lucía", last_name="Romero")
        doctor = DoctorModel(first_name="Ana", last_name="Pérez", license_number="MP-1001", is_approved=True)
        doctor_with_break = DoctorModel(
            first_name="Carlos", last_name="Díaz", license_number="MP-1002", is_approved=True
        )
        unapproved = DoctorModel(first_name="Sofía", last_name="Luna", license_number="MP-1003", is_approved=False)
        session.add_all([patient, other_patient, doctor, doctor_with_break, unapproved])
        await session.flush()

        session.add_all(
            [
                DoctorScheduleModel(doctor_id=doctor.id, day_of_week=1, start_minutes=540, end_minutes=720),
                DoctorScheduleModel(
                    doctor_id=doctor_with_break.id,
                    day_of_week=1,
                    start_minutes=540,
                    end_minutes=720,
                    break_start_minutes=600,
                    break_end_minutes=630,
                ),
                DoctorScheduleModel(doctor_id=unapproved.id, day_of_week=1, start_minutes=540, end_minutes=720),
            ]
        )
        await session.commit()

        return SeedData(
            patient_id=patient.id,
            other_patient_id=other_patient.id,
            doctor_id=doctor.id,
            doctor_with_break_id=doctor_with_break.id,
            unapproved_doctor_id=unapproved.id,
        )
