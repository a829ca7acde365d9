"""Central router that includes all sub-routers."""

from fastapi import APIRouter

from hostel_occupancy.api.properties import router as properties_router
from hostel_occupancy.api.rooms import router as rooms_router
from hostel_occupancy.api.assignments import router as assignments_router

api_router = APIRouter()
api_router.include_router(properties_router)
api_router.include_router(rooms_router)
api_router.include_router(assignments_router)
