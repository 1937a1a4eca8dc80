"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from booking_records.presentation.api.endpoints.clients import router as clients_router
from booking_records.presentation.api.endpoints.system import router as system_router

router = APIRouter()
router.include_router(system_router)
router.include_router(clients_router)
