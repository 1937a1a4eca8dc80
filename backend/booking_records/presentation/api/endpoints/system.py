"""Service info, stats and health endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from booking_records.application.services import ClientRecordService
from booking_records.config import get_settings
from booking_records.infrastructure.database.session import database_location
from booking_records.infrastructure.dependencies import get_client_record_service

router = APIRouter(tags=["System"])

_STARTED_AT = time.monotonic()

ENDPOINTS: dict[str, str] = {
    "GET /clients": "Get all clients (formatted for booking form)",
    "GET /clients/raw": "Get all clients (raw database format)",
    "GET /clients/:id": "Get client by database ID",
    "GET /clients/clientId/:clientId": "Get client by Client ID (e.g., TB-001)",
    "POST /clients": "Create new client",
    "PUT /clients/:id": "Update client by database ID",
    "PUT /clients/clientId/:clientId": "Update client by Client ID",
    "DELETE /clients/:id": "Delete client by database ID",
    "DELETE /clients/clientId/:clientId": "Delete client by Client ID",
    "GET /stats": "Client count, latest client and server uptime",
    "GET /health": "Liveness check",
}


def uptime_seconds() -> int:
    """Whole seconds since the process imported the API."""
    return int(time.monotonic() - _STARTED_AT)


def available_endpoints() -> list[str]:
    return ["GET /", *ENDPOINTS]


@router.get("/")
async def service_info() -> dict:
    """Service description and endpoint map."""
    settings = get_settings()
    return {
        "status": f"{settings.app_title} is running",
        "version": settings.app_version,
        "endpoints": ENDPOINTS,
        "database": {
            "location": database_location(settings.database_url),
            "status": "Connected",
        },
    }


@router.get("/stats")
async def stats(
    service: ClientRecordService = Depends(get_client_record_service),
) -> dict:
    """Row count, newest record timestamp and uptime."""
    settings = get_settings()
    total, latest = await service.get_stats()
    return {
        "totalClients": total,
        "latestClient": latest.isoformat() if latest else None,
        "server": {
            "uptime": uptime_seconds(),
            "version": settings.app_version,
        },
    }


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": uptime_seconds(),
        "version": settings.app_version,
        "environment": settings.app_env,
    }
