"""API v1 router registration."""

from fastapi import APIRouter

from event_scheduler.api.routes import recurrences

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(recurrences.router)
