"""Application service (use case) for ClientRecord operations."""

import logging
from datetime import datetime

from booking_records.application.interfaces import ClientRecordRepository
from booking_records.application.schemas.client_record import (
    ClientRecordCreate,
    ClientRecordUpdate,
)
from booking_records.domain.entities import ClientDirectory, ClientRecord, build_directory
from booking_records.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CLIENTS: tuple[ClientRecordCreate, ...] = (
    ClientRecordCreate(
        client_id="TB-001",
        name="John Smith",
        email="john.smith@email.com",
        phone="+44 7700 123456",
    ),
    ClientRecordCreate(
        client_id="TB-002",
        name="Sarah Johnson",
        email="sarah.johnson@email.com",
        phone="+44 7700 789123",
    ),
    ClientRecordCreate(
        client_id="TB-003",
        name="Mike Wilson",
        email="mike.wilson@email.com",
        phone="+44 7700 456789",
    ),
)


class ClientRecordService:
    """Orchestrates client record CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ClientRecordRepository):
        self._repository = repository

    async def get_record(self, record_id: int) -> ClientRecord:
        record = await self._repository.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError("ClientRecord", record_id)
        return record

    async def get_record_by_client_id(self, client_id: str) -> ClientRecord:
        record = await self._repository.get_by_client_id(client_id)
        if record is None:
            raise EntityNotFoundError("ClientRecord", client_id, field="clientId")
        return record

    async def list_records(self) -> list[ClientRecord]:
        return await self._repository.get_all()

    async def get_directory(self) -> ClientDirectory:
        return build_directory(await self._repository.get_all())

    async def create_record(self, data: ClientRecordCreate) -> ClientRecord:
        record = ClientRecord(
            client_id=data.client_id,
            name=data.name,
            email=data.email,
            phone=data.phone,
        )
        created = await self._repository.create(record)
        logger.info("Created client %s (id=%s)", created.client_id, created.id)
        return created

    async def update_record(
        self, record_id: int, data: ClientRecordUpdate
    ) -> ClientRecord:
        record = await self.get_record(record_id)
        return await self._replace(record, data)

    async def update_record_by_client_id(
        self, client_id: str, data: ClientRecordUpdate
    ) -> ClientRecord:
        record = await self.get_record_by_client_id(client_id)
        return await self._replace(record, data)

    async def delete_record(self, record_id: int) -> ClientRecord:
        """Delete a record and return its pre-deletion snapshot."""
        record = await self.get_record(record_id)
        return await self._delete(record)

    async def delete_record_by_client_id(self, client_id: str) -> ClientRecord:
        record = await self.get_record_by_client_id(client_id)
        return await self._delete(record)

    async def get_stats(self) -> tuple[int, datetime | None]:
        """Return ``(total records, newest created_at)``."""
        total = await self._repository.count()
        latest = await self._repository.latest_created_at()
        return total, latest

    async def seed_defaults(self) -> int:
        """Insert the example clients when the store is empty.

        Returns the number of inserted records; 0 when the store already
        holds data, so calling this on every startup is safe.
        """
        if await self._repository.count() > 0:
            logger.debug("Client store already populated, skipping seed")
            return 0
        for data in DEFAULT_CLIENTS:
            await self.create_record(data)
        logger.info("Seeded %d default clients", len(DEFAULT_CLIENTS))
        return len(DEFAULT_CLIENTS)

    async def _replace(
        self, record: ClientRecord, data: ClientRecordUpdate
    ) -> ClientRecord:
        record.replace(
            client_id=data.client_id or record.client_id,
            name=data.name,
            email=data.email,
            phone=data.phone,
        )
        updated = await self._repository.update(record)
        logger.info("Updated client %s (id=%s)", updated.client_id, updated.id)
        return updated

    async def _delete(self, record: ClientRecord) -> ClientRecord:
        if not await self._repository.delete(record.id):
            raise EntityNotFoundError("ClientRecord", record.id)
        logger.info("Deleted client %s (id=%s)", record.client_id, record.id)
        return record
