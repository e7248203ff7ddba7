"""Main API router for v1."""
from fastapi import APIRouter

from meetgrid.api.v1.endpoints import meetings

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(meetings.router, prefix="/meetings", tags=["Meetings"])
