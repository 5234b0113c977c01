# ============================================================================
# Tests for the Appointment aggregate
# ============================================================================
"""Unit tests for Appointment creation, invariants and status changes."""

from datetime import date

import pytest

from clinic_booking.core.domain import ValidationException
from clinic_booking.domains.scheduling.domain.entities import Appointment
from clinic_booking.domains.scheduling.domain.value_objects import (
    AppointmentStatus,
    AppointmentType,
    TimeOfDay,
)

MONDAY = date(2025, 3, 10)


def _schedule(start: str = "09:00", **kwargs) -> Appointment:
    return Appointment.schedule(
        patient_id=7,
        doctor_id=3,
        appointment_date=MONDAY,
        start=TimeOfDay.parse(start),
        **kwargs,
    )


class TestAppointmentSchedule:
    """Tests for Appointment.schedule."""

    @pytest.mark.unit
    def test_end_is_start_plus_default_duration(self) -> None:
        appointment = _schedule("09:00")
        assert str(appointment.end) == "09:30"
        assert appointment.status is AppointmentStatus.SCHEDULED
        assert appointment.appointment_type is AppointmentType.IN_PERSON
        assert appointment.is_new()

    @pytest.mark.unit
    def test_custom_duration(self) -> None:
        assert str(_schedule("09:00", duration_minutes=45).end) == "09:45"

    @pytest.mark.unit
    def test_start_too_late_in_the_day_is_invalid(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            _schedule("23:45")
        assert exc_info.value.code == "INVALID_INPUT"

    @pytest.mark.unit
    def test_rejects_reversed_times(self) -> None:
        with pytest.raises(ValidationException):
            Appointment(start=TimeOfDay(600), end=TimeOfDay(540))


class TestAppointmentStatusChange:
    """Tests for change_status and notes handling."""

    @pytest.mark.unit
    def test_change_status_sets_notes(self) -> None:
        appointment = _schedule()
        appointment.change_status(AppointmentStatus.CONFIRMED, "Bring previous results")
        assert appointment.status is AppointmentStatus.CONFIRMED
        assert appointment.notes == "Bring previous results"
        assert appointment.version == 1

    @pytest.mark.unit
    @pytest.mark.parametrize("notes", [None, ""])
    def test_missing_notes_preserve_previous_notes(self, notes) -> None:
        appointment = _schedule()
        appointment.notes = "Fasting required"
        appointment.change_status(AppointmentStatus.CANCELLED, notes)
        assert appointment.notes == "Fasting required"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "status,active",
        [
            (AppointmentStatus.SCHEDULED, True),
            (AppointmentStatus.CONFIRMED, True),
            (AppointmentStatus.RESCHEDULED, True),
            (AppointmentStatus.CANCELLED, False),
            (AppointmentStatus.COMPLETED, False),
        ],
    )
    def test_is_active(self, status, active) -> None:
        appointment = _schedule()
        appointment.change_status(status)
        assert appointment.is_active is active


class TestAppointmentSerialization:
    """Tests for to_dict."""

    @pytest.mark.unit
    def test_to_dict_renders_clock_times(self) -> None:
        data = _schedule("08:00", appointment_type=AppointmentType.VIRTUAL, reason="Follow-up").to_dict()
        assert data["start_time"] == "08:00"
        assert data["end_time"] == "08:30"
        assert data["appointment_date"] == "2025-03-10"
        assert data["type"] == "virtual"
        assert data["status"] == "scheduled"


class TestStatusParsing:
    """Tests for AppointmentStatus and AppointmentType parsing."""

    @pytest.mark.unit
    def test_parse_status(self) -> None:
        assert AppointmentStatus.parse("Cancelled") is AppointmentStatus.CANCELLED

    @pytest.mark.unit
    def test_parse_unknown_status(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            AppointmentStatus.parse("no_show")
        assert exc_info.value.field == "status"

    @pytest.mark.unit
    def test_parse_type(self) -> None:
        assert AppointmentType.parse("in-person") is AppointmentType.IN_PERSON
        with pytest.raises(ValidationException):
            AppointmentType.parse("phone")
