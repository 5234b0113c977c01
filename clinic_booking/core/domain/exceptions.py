"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They are caught and translated to HTTP responses in the API layer; the domain
never renders user-facing text itself.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Every rejection carries a machine-readable ``code`` so callers can branch
    on the kind of failure instead of parsing messages.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Diagnostic message (not meant for end users)
            code: Machine-readable error code (e.g., "SLOT_UNAVAILABLE")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when input is malformed or violates a value constraint.

    Covers unparseable times and dates, unknown status values and
    appointments that would run past the end of the day.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "INVALID_INPUT", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is not found.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class DoctorNotFoundException(EntityNotFoundException):
    """Raised when the requested doctor does not exist."""

    def __init__(self, doctor_id: int):
        super().__init__("Doctor", doctor_id)


class AppointmentNotFoundException(EntityNotFoundException):
    """Raised when the requested appointment does not exist."""

    def __init__(self, appointment_id: int):
        super().__init__("Appointment", appointment_id)


class DoctorNotApprovedException(DomainException):
    """Raised when booking with a doctor that has not been approved yet."""

    def __init__(self, doctor_id: int):
        self.doctor_id = doctor_id
        super().__init__(
            f"Doctor {doctor_id} is not approved to accept appointments",
            "NOT_APPROVED",
            {"doctor_id": doctor_id},
        )


class SlotUnavailableException(DomainException):
    """Raised when the requested interval overlaps an active appointment."""

    def __init__(
        self,
        doctor_id: int,
        requested_date: str,
        requested_time: str,
    ):
        self.doctor_id = doctor_id
        self.requested_date = requested_date
        self.requested_time = requested_time
        super().__init__(
            f"Time slot {requested_date} {requested_time} is not available for doctor {doctor_id}",
            "SLOT_UNAVAILABLE",
            {
                "doctor_id": doctor_id,
                "date": requested_date,
                "time": requested_time,
            },
        )


class PermissionDeniedException(DomainException):
    """Raised when an actor is not allowed to perform an operation."""

    def __init__(self, operation: str, resource: str | None = None, role: str | None = None):
        self.operation = operation
        self.resource = resource
        self.role = role
        msg = f"Not authorized to perform '{operation}'"
        if resource:
            msg += f" on {resource}"
        super().__init__(
            msg,
            "PERMISSION_DENIED",
            {"operation": operation, "resource": resource, "role": role},
        )


class PersistenceException(DomainException):
    """Raised when the storage layer fails to read or write."""

    def __init__(self, operation: str, message: str | None = None):
        self.operation = operation
        msg = message or f"Persistence failure during '{operation}'"
        super().__init__(msg, "PERSISTENCE_FAILURE", {"operation": operation})
