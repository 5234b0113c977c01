"""
Scheduling Domain Container.

Single Responsibility: Wire all scheduling domain dependencies.
"""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from clinic_booking.config.settings import Settings
from clinic_booking.core.shared import KeyedLock
from clinic_booking.domains.scheduling.application.use_cases import (
    BookAppointmentUseCase,
    GetAppointmentUseCase,
    GetAvailableSlotsUseCase,
    ListAppointmentsUseCase,
    UpdateAppointmentStatusUseCase,
)
from clinic_booking.domains.scheduling.domain.services import (
    AvailabilityCalculator,
    ConflictDetector,
    StatusTransitionGuard,
)
from clinic_booking.domains.scheduling.infrastructure.repositories import SQLAlchemyScheduleRepository

logger = logging.getLogger(__name__)


class SchedulingContainer:
    """
    Scheduling domain container.

    Stateless services and the booking lock registry are created once and
    shared; repositories and use cases are created per database session.
    """

    def __init__(self, settings: Settings):
        """
        Initialize scheduling container.

        Args:
            settings: Application settings
        """
        self._settings = settings
        self.booking_locks: KeyedLock[tuple[int, date]] = KeyedLock()
        self.conflict_detector = ConflictDetector()
        self.transition_guard = StatusTransitionGuard()
        self.availability_calculator = AvailabilityCalculator(
            slot_duration_minutes=settings.APPOINTMENT_DURATION_MINUTES,
            conflict_detector=self.conflict_detector,
        )
        logger.debug(f"Scheduling container ready (duration={settings.APPOINTMENT_DURATION_MINUTES}min)")

    # ==================== REPOSITORIES ====================

    def create_schedule_repository(self, db: AsyncSession) -> SQLAlchemyScheduleRepository:
        """Create Schedule Repository."""
        return SQLAlchemyScheduleRepository(session=db)

    # ==================== USE CASES ====================

    def create_get_available_slots_use_case(self, db: AsyncSession) -> GetAvailableSlotsUseCase:
        return GetAvailableSlotsUseCase(
            repository=self.create_schedule_repository(db),
            calculator=self.availability_calculator,
            max_range_days=self._settings.MAX_AVAILABILITY_RANGE_DAYS,
        )

    def create_book_appointment_use_case(self, db: AsyncSession) -> BookAppointmentUseCase:
        return BookAppointmentUseCase(
            repository=self.create_schedule_repository(db),
            booking_locks=self.booking_locks,
            conflict_detector=self.conflict_detector,
            duration_minutes=self._settings.APPOINTMENT_DURATION_MINUTES,
        )

    def create_update_appointment_status_use_case(self, db: AsyncSession) -> UpdateAppointmentStatusUseCase:
        return UpdateAppointmentStatusUseCase(
            repository=self.create_schedule_repository(db),
            guard=self.transition_guard,
        )

    def create_get_appointment_use_case(self, db: AsyncSession) -> GetAppointmentUseCase:
        return GetAppointmentUseCase(
            repository=self.create_schedule_repository(db),
            guard=self.transition_guard,
        )

    def create_list_appointments_use_case(self, db: AsyncSession) -> ListAppointmentsUseCase:
        return ListAppointmentsUseCase(repository=self.create_schedule_repository(db))
