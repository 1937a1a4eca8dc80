"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from booking_records.config import Settings, get_settings
from booking_records.application.services import BookingFormService, ClientRecordService
from booking_records.infrastructure.database.session import get_db_session
from booking_records.infrastructure.database.repositories import (
    SQLAlchemyClientRecordRepository,
)
from booking_records.infrastructure.http import OutcomeWebhookClient, RecordServiceClient


async def get_client_record_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ClientRecordService, None]:
    """Provides a ClientRecordService instance with its repository wired up."""
    repository = SQLAlchemyClientRecordRepository(session)
    yield ClientRecordService(repository)


def build_booking_form_service(settings: Settings | None = None) -> BookingFormService:
    """Provides a BookingFormService talking to the configured record service and webhook."""
    settings = settings or get_settings()
    return BookingFormService(
        directory_source=RecordServiceClient(
            settings.record_service_url,
            timeout=settings.http_timeout,
        ),
        outcome_sink=OutcomeWebhookClient(
            settings.outcome_webhook_url,
            timeout=settings.http_timeout,
        ),
        source=settings.outcome_source,
    )
