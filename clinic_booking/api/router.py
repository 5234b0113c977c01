from fastapi import APIRouter

from clinic_booking.domains.scheduling.api import router as scheduling_router

api_router = APIRouter()

api_router.include_router(scheduling_router)
