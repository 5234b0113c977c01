"""
Scheduling API Routes

FastAPI router for availability, booking and appointment status endpoints.
Domain exceptions propagate to the handlers in clinic_booking.api.exception_handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from clinic_booking.core.domain import PermissionDeniedException
from clinic_booking.domains.scheduling.api.dependencies import (
    get_appointment_use_case,
    get_available_slots_use_case,
    get_book_appointment_use_case,
    get_current_actor,
    get_list_appointments_use_case,
    get_update_appointment_status_use_case,
)
from clinic_booking.domains.scheduling.api.schemas import (
    AppointmentListResponse,
    AppointmentRequest,
    AppointmentResponse,
    AvailabilityRangeResponse,
    AvailableSlotsResponse,
    SlotResponse,
    StatusUpdateRequest,
)
from clinic_booking.domains.scheduling.application.use_cases import (
    BookAppointmentRequest,
    BookAppointmentUseCase,
    GetAppointmentUseCase,
    GetAvailableSlotsUseCase,
    ListAppointmentsRequest,
    ListAppointmentsUseCase,
    UpdateAppointmentStatusRequest,
    UpdateAppointmentStatusUseCase,
)
from clinic_booking.domains.scheduling.domain.value_objects import Actor, ActorRole, parse_date

router = APIRouter(prefix="/scheduling", tags=["Scheduling"])

# Type aliases for use case dependencies
ActorDep = Annotated[Actor, Depends(get_current_actor)]
GetAvailableSlotsUseCaseDep = Annotated[GetAvailableSlotsUseCase, Depends(get_available_slots_use_case)]
BookAppointmentUseCaseDep = Annotated[BookAppointmentUseCase, Depends(get_book_appointment_use_case)]
UpdateStatusUseCaseDep = Annotated[UpdateAppointmentStatusUseCase, Depends(get_update_appointment_status_use_case)]
GetAppointmentUseCaseDep = Annotated[GetAppointmentUseCase, Depends(get_appointment_use_case)]
ListAppointmentsUseCaseDep = Annotated[ListAppointmentsUseCase, Depends(get_list_appointments_use_case)]


@router.get("/doctors/{doctor_id}/slots", response_model=AvailableSlotsResponse)
async def get_available_slots(
    doctor_id: int,
    use_case: GetAvailableSlotsUseCaseDep,
    date: Annotated[str, Query(description="Date (YYYY-MM-DD)")],
):
    """Get free slots of a doctor for one day."""
    target = parse_date(date)
    slots = await use_case.execute(doctor_id, target)
    return AvailableSlotsResponse(
        doctor_id=doctor_id,
        appointment_date=target,
        slots=[SlotResponse.from_slot(s) for s in slots],
    )


@router.get("/doctors/{doctor_id}/availability", response_model=AvailabilityRangeResponse)
async def get_availability_range(
    doctor_id: int,
    use_case: GetAvailableSlotsUseCaseDep,
    start_date: Annotated[str, Query(description="First day (YYYY-MM-DD)")],
    end_date: Annotated[str, Query(description="Last day, inclusive (YYYY-MM-DD)")],
):
    """Get free slots of a doctor for each day of a range."""
    first = parse_date(start_date, field="start_date")
    last = parse_date(end_date, field="end_date")
    availability = await use_case.execute_range(doctor_id, first, last)
    return AvailabilityRangeResponse(
        doctor_id=doctor_id,
        start_date=first,
        end_date=last,
        days={day.isoformat(): [SlotResponse.from_slot(s) for s in slots] for day, slots in availability.items()},
    )


@router.post("/appointments", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def book_appointment(
    request: AppointmentRequest,
    actor: ActorDep,
    use_case: BookAppointmentUseCaseDep,
):
    """Book an appointment for the calling patient."""
    if actor.role is not ActorRole.PATIENT or actor.actor_id is None:
        raise PermissionDeniedException(operation="book appointment", role=actor.role_name)

    appointment = await use_case.execute(
        BookAppointmentRequest(
            patient_id=actor.actor_id,
            doctor_id=request.doctor_id,
            appointment_date=request.appointment_date,
            start_time=request.start_time,
            appointment_type=request.type,
            reason=request.reason,
        )
    )
    return AppointmentResponse.from_entity(appointment)


@router.get("/appointments", response_model=AppointmentListResponse)
async def list_appointments(
    actor: ActorDep,
    use_case: ListAppointmentsUseCaseDep,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
    date: Annotated[str | None, Query(description="Date (YYYY-MM-DD)")] = None,
    type: Annotated[str | None, Query(description="in-person or virtual")] = None,
):
    """List the appointments visible to the caller."""
    appointments = await use_case.execute(
        ListAppointmentsRequest(
            actor=actor,
            status=status_filter,
            appointment_date=date,
            appointment_type=type,
        )
    )
    return AppointmentListResponse(
        appointments=[AppointmentResponse.from_entity(a) for a in appointments],
        count=len(appointments),
    )


@router.get("/appointments/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: int,
    actor: ActorDep,
    use_case: GetAppointmentUseCaseDep,
):
    """Get one appointment."""
    appointment = await use_case.execute(actor, appointment_id)
    return AppointmentResponse.from_entity(appointment)


@router.put("/appointments/{appointment_id}/status", response_model=AppointmentResponse)
async def update_appointment_status(
    appointment_id: int,
    request: StatusUpdateRequest,
    actor: ActorDep,
    use_case: UpdateStatusUseCaseDep,
):
    """Change an appointment's status."""
    appointment = await use_case.execute(
        UpdateAppointmentStatusRequest(
            actor=actor,
            appointment_id=appointment_id,
            new_status=request.status,
            notes=request.notes,
        )
    )
    return AppointmentResponse.from_entity(appointment)
