"""
Book Appointment Use Case

Creates an appointment after checking the doctor and the requested slot.
The check and the insert run under one lock per (doctor, date) so two
concurrent requests can never both take the same slot.
"""

from dataclasses import dataclass
from datetime import date

from clinic_booking.core.domain import (
    DoctorNotApprovedException,
    DoctorNotFoundException,
    SlotUnavailableException,
)
from clinic_booking.core.shared import KeyedLock, get_use_case_logger
from clinic_booking.domains.scheduling.application.ports import IScheduleRepository
from clinic_booking.domains.scheduling.domain.entities import DEFAULT_DURATION_MINUTES, Appointment
from clinic_booking.domains.scheduling.domain.services import ConflictDetector
from clinic_booking.domains.scheduling.domain.value_objects import (
    AppointmentType,
    TimeOfDay,
    parse_date,
)

logger = get_use_case_logger("book_appointment")

BookingKey = tuple[int, date]


@dataclass
class BookAppointmentRequest:
    """
    Request for booking an appointment.

    Accepts raw strings for date, time and type and normalizes them;
    malformed values raise ValidationException on construction.
    """

    patient_id: int
    doctor_id: int
    appointment_date: date | str
    start_time: TimeOfDay | str
    appointment_type: AppointmentType | str = AppointmentType.IN_PERSON
    reason: str | None = None

    def __post_init__(self) -> None:
        self.appointment_date = parse_date(self.appointment_date, field="appointment_date")
        self.start_time = TimeOfDay.coerce(self.start_time)
        self.appointment_type = AppointmentType.parse(self.appointment_type)


class BookAppointmentUseCase:
    """
    Use case for booking appointments.

    Checks, in order: doctor exists, doctor approved, appointment fits in the
    day, no overlap with an active appointment. Only then is the appointment
    inserted with status ``scheduled``.
    """

    def __init__(
        self,
        repository: IScheduleRepository,
        booking_locks: KeyedLock[BookingKey],
        conflict_detector: ConflictDetector | None = None,
        duration_minutes: int = DEFAULT_DURATION_MINUTES,
    ):
        """
        Initialize use case with dependencies.

        Args:
            repository: Schedule data access
            booking_locks: Process-wide lock registry shared by all bookings
            conflict_detector: Overlap checker
            duration_minutes: Length of every appointment
        """
        self.repository = repository
        self.booking_locks = booking_locks
        self.conflict_detector = conflict_detector or ConflictDetector()
        self.duration_minutes = duration_minutes

    async def execute(self, request: BookAppointmentRequest) -> Appointment:
        """
        Execute appointment booking.

        Raises:
            DoctorNotFoundException: Unknown doctor
            DoctorNotApprovedException: Doctor not approved
            ValidationException: Appointment would run past midnight
            SlotUnavailableException: Overlaps an active appointment
            PersistenceException: Storage failure; nothing was written
        """
        log = logger.with_context(
            doctor_id=request.doctor_id,
            patient_id=request.patient_id,
            date=str(request.appointment_date),
            start_time=str(request.start_time),
        )
        key: BookingKey = (request.doctor_id, request.appointment_date)

        async with self.booking_locks.hold(key):
            async with self.repository.transaction():
                await self.repository.lock_doctor_day(request.doctor_id, request.appointment_date)

                doctor = await self.repository.find_doctor(request.doctor_id)
                if doctor is None:
                    log.warning("Booking rejected: doctor not found")
                    raise DoctorNotFoundException(request.doctor_id)
                if not doctor.can_accept_appointments():
                    log.warning("Booking rejected: doctor not approved")
                    raise DoctorNotApprovedException(request.doctor_id)

                appointment = Appointment.schedule(
                    patient_id=request.patient_id,
                    doctor_id=request.doctor_id,
                    appointment_date=request.appointment_date,
                    start=request.start_time,
                    duration_minutes=self.duration_minutes,
                    appointment_type=request.appointment_type,
                    reason=request.reason,
                )

                active = await self.repository.load_active_appointments(request.doctor_id, request.appointment_date)
                conflicts = self.conflict_detector.find_conflicts(appointment.interval, active)
                if conflicts:
                    log.warning("Booking rejected: slot unavailable", conflicts=[str(c) for c in conflicts])
                    raise SlotUnavailableException(
                        doctor_id=request.doctor_id,
                        requested_date=str(request.appointment_date),
                        requested_time=str(request.start_time),
                    )

                saved = await self.repository.insert_appointment(appointment)

        log.info("Appointment booked", appointment_id=saved.id, end_time=str(saved.end))
        return saved
