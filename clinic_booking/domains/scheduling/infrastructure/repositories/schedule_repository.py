"""
Schedule Repository Implementation

SQLAlchemy implementation of IScheduleRepository.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_booking.core.domain import AppointmentNotFoundException, PersistenceException
from clinic_booking.domains.scheduling.application.ports import IScheduleRepository
from clinic_booking.domains.scheduling.domain.entities import Appointment, Doctor
from clinic_booking.domains.scheduling.domain.value_objects import (
    AppointmentStatus,
    AppointmentType,
    TimeInterval,
    TimeOfDay,
    WeeklyScheduleEntry,
)
from clinic_booking.domains.scheduling.infrastructure.persistence.sqlalchemy.models import (
    AppointmentModel,
    DoctorModel,
    DoctorScheduleModel,
)

logger = logging.getLogger(__name__)


class SQLAlchemyScheduleRepository(IScheduleRepository):
    """
    SQLAlchemy implementation of the schedule repository.

    One instance wraps one AsyncSession. Writes are only flushed; the
    commit happens when the enclosing ``transaction()`` block exits.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        try:
            yield
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error, transaction rolled back: {e}")
            raise PersistenceException("transaction", str(e)) from e
        except BaseException:
            # Domain errors and task cancellation must not leave a half-written booking.
            await self.session.rollback()
            raise

    # =========================================================================
    # Doctors and schedules
    # =========================================================================

    async def find_doctor(self, doctor_id: int) -> Doctor | None:
        result = await self.session.execute(select(DoctorModel).where(DoctorModel.id == doctor_id))
        model = result.scalar_one_or_none()
        return self._doctor_to_entity(model) if model else None

    async def load_weekly_schedule(self, doctor_id: int, day_of_week: int) -> WeeklyScheduleEntry | None:
        result = await self.session.execute(
            select(DoctorScheduleModel).where(
                DoctorScheduleModel.doctor_id == doctor_id,
                DoctorScheduleModel.day_of_week == day_of_week,
            )
        )
        model = result.scalar_one_or_none()
        return self._schedule_to_value(model) if model else None

    async def lock_doctor_day(self, doctor_id: int, appointment_date: date) -> None:
        # Row lock on the doctor; dialects without FOR UPDATE (SQLite) skip it.
        await self.session.execute(
            select(DoctorModel.id).where(DoctorModel.id == doctor_id).with_for_update()
        )

    # =========================================================================
    # Appointments
    # =========================================================================

    async def load_active_appointments(self, doctor_id: int, appointment_date: date) -> list[TimeInterval]:
        result = await self.session.execute(
            select(AppointmentModel.start_minutes, AppointmentModel.end_minutes)
            .where(
                AppointmentModel.doctor_id == doctor_id,
                AppointmentModel.appointment_date == appointment_date,
                AppointmentModel.status.notin_(list(AppointmentStatus.inactive())),
            )
            .order_by(AppointmentModel.start_minutes)
        )
        return [TimeInterval.from_minutes(start, end) for start, end in result.all()]

    async def insert_appointment(self, appointment: Appointment) -> Appointment:
        model = self._appointment_to_model(appointment)
        self.session.add(model)
        try:
            await self.session.flush()
        except IntegrityError as e:
            logger.error(f"Integrity error inserting appointment for doctor {appointment.doctor_id}: {e}")
            raise PersistenceException("insert_appointment", str(e.orig)) from e
        await self.session.refresh(model)

        logger.debug(f"Inserted appointment {model.id} for doctor {model.doctor_id} on {model.appointment_date}")
        return self._appointment_to_entity(model)

    async def find_appointment(self, appointment_id: int) -> Appointment | None:
        result = await self.session.execute(select(AppointmentModel).where(AppointmentModel.id == appointment_id))
        model = result.scalar_one_or_none()
        return self._appointment_to_entity(model) if model else None

    async def update_appointment_status(
        self,
        appointment_id: int,
        status: AppointmentStatus,
        notes: str | None,
    ) -> None:
        result = await self.session.execute(
            update(AppointmentModel)
            .where(AppointmentModel.id == appointment_id)
            .values(status=status, notes=notes)
        )
        if result.rowcount == 0:
            raise AppointmentNotFoundException(appointment_id)

    async def find_appointments(
        self,
        patient_id: int | None = None,
        doctor_id: int | None = None,
        status: AppointmentStatus | None = None,
        appointment_date: date | None = None,
        appointment_type: AppointmentType | None = None,
    ) -> list[Appointment]:
        query = select(AppointmentModel)

        if patient_id is not None:
            query = query.where(AppointmentModel.patient_id == patient_id)
        if doctor_id is not None:
            query = query.where(AppointmentModel.doctor_id == doctor_id)
        if status is not None:
            query = query.where(AppointmentModel.status == status)
        if appointment_date is not None:
            query = query.where(AppointmentModel.appointment_date == appointment_date)
        if appointment_type is not None:
            query = query.where(AppointmentModel.appointment_type == appointment_type)

        query = query.order_by(
            AppointmentModel.appointment_date.desc(),
            AppointmentModel.start_minutes.desc(),
        )

        result = await self.session.execute(query)
        return [self._appointment_to_entity(m) for m in result.scalars().all()]

    # =========================================================================
    # Mapping
    # =========================================================================

    def _doctor_to_entity(self, model: DoctorModel) -> Doctor:
        return Doctor(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            specialization=model.specialization,
            license_number=model.license_number,
            is_approved=bool(model.is_approved),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _schedule_to_value(self, model: DoctorScheduleModel) -> WeeklyScheduleEntry:
        return WeeklyScheduleEntry(
            doctor_id=model.doctor_id,
            day_of_week=model.day_of_week,
            start=TimeOfDay(model.start_minutes),
            end=TimeOfDay(model.end_minutes),
            break_start=TimeOfDay(model.break_start_minutes) if model.break_start_minutes is not None else None,
            break_end=TimeOfDay(model.break_end_minutes) if model.break_end_minutes is not None else None,
            is_available=bool(model.is_available),
        )

    def _appointment_to_entity(self, model: AppointmentModel) -> Appointment:
        return Appointment(
            id=model.id,
            patient_id=model.patient_id,
            doctor_id=model.doctor_id,
            appointment_date=model.appointment_date,
            start=TimeOfDay(model.start_minutes),
            end=TimeOfDay(model.end_minutes),
            status=model.status,
            appointment_type=model.appointment_type,
            reason=model.reason,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _appointment_to_model(self, appointment: Appointment) -> AppointmentModel:
        interval = appointment.interval
        return AppointmentModel(
            patient_id=appointment.patient_id,
            doctor_id=appointment.doctor_id,
            appointment_date=appointment.appointment_date,
            start_minutes=interval.start.minutes,
            end_minutes=interval.end.minutes,
            status=appointment.status,
            appointment_type=appointment.appointment_type,
            reason=appointment.reason,
            notes=appointment.notes,
        )
