"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from clinic_booking.core.domain.entities import AggregateRoot, Entity
from clinic_booking.core.domain.exceptions import (
    AppointmentNotFoundException,
    DoctorNotApprovedException,
    DoctorNotFoundException,
    DomainException,
    EntityNotFoundException,
    PermissionDeniedException,
    PersistenceException,
    SlotUnavailableException,
    ValidationException,
)
from clinic_booking.core.domain.value_objects import StatusEnum, ValueObject

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    # Value Objects
    "ValueObject",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "DoctorNotFoundException",
    "AppointmentNotFoundException",
    "DoctorNotApprovedException",
    "SlotUnavailableException",
    "PermissionDeniedException",
    "PersistenceException",
]
