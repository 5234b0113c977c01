"""
Scheduling API Dependencies

FastAPI dependencies for the scheduling domain.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_booking.core.container import SchedulingContainer
from clinic_booking.database import Database
from clinic_booking.domains.scheduling.application.use_cases import (
    BookAppointmentUseCase,
    GetAppointmentUseCase,
    GetAvailableSlotsUseCase,
    ListAppointmentsUseCase,
    UpdateAppointmentStatusUseCase,
)
from clinic_booking.domains.scheduling.domain.value_objects import Actor


def get_container(request: Request) -> SchedulingContainer:
    return request.app.state.container


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the application's database."""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session


# Type aliases for shared dependencies
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
Container = Annotated[SchedulingContainer, Depends(get_container)]


def get_current_actor(
    x_actor_role: Annotated[str | None, Header()] = None,
    x_actor_id: Annotated[int | None, Header()] = None,
) -> Actor:
    """
    Actor from the headers set by the authenticating gateway.

    Unknown roles produce an actor without a role, which every guarded
    operation rejects.
    """
    return Actor.from_claims(x_actor_role, x_actor_id)


def get_available_slots_use_case(db: DbSession, container: Container) -> GetAvailableSlotsUseCase:
    return container.create_get_available_slots_use_case(db)


def get_book_appointment_use_case(db: DbSession, container: Container) -> BookAppointmentUseCase:
    return container.create_book_appointment_use_case(db)


def get_update_appointment_status_use_case(db: DbSession, container: Container) -> UpdateAppointmentStatusUseCase:
    return container.create_update_appointment_status_use_case(db)


def get_appointment_use_case(db: DbSession, container: Container) -> GetAppointmentUseCase:
    return container.create_get_appointment_use_case(db)


def get_list_appointments_use_case(db: DbSession, container: Container) -> ListAppointmentsUseCase:
    return container.create_list_appointments_use_case(db)


__all__ = [
    "get_current_actor",
    "get_available_slots_use_case",
    "get_book_appointment_use_case",
    "get_update_appointment_status_use_case",
    "get_appointment_use_case",
    "get_list_appointments_use_case",
]
