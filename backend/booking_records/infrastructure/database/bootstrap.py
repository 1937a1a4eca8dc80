"""Client store initialization — table creation and default seed data."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from booking_records.application.services import ClientRecordService
from booking_records.infrastructure.database.base import Base
from booking_records.infrastructure.database.repositories import (
    SQLAlchemyClientRecordRepository,
)

logger = logging.getLogger(__name__)


async def initialize_client_store(
    db_engine: AsyncEngine,
    session_factory: async_sessionmaker[AsyncSession],
    *,
    seed: bool = True,
) -> int:
    """Create the ``clients`` table if absent and seed an empty table.

    Idempotent, safe to call on every startup. Returns the number of
    seeded records.
    """
    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if not seed:
        return 0

    async with session_factory() as session:
        service = ClientRecordService(SQLAlchemyClientRecordRepository(session))
        try:
            inserted = await service.seed_defaults()
            await session.commit()
        except Exception:
            await session.rollback()
            raise
    return inserted
