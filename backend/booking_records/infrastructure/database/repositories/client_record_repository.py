"""Concrete repository implementation for ClientRecord backed by SQLAlchemy."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from booking_records.application.interfaces import ClientRecordRepository
from booking_records.domain.entities import ClientRecord
from booking_records.domain.exceptions import DuplicateEntityError, StorageError
from booking_records.infrastructure.database.models import ClientRecordModel

logger = logging.getLogger(__name__)


def _short_message(exc: SQLAlchemyError) -> str:
    """Driver message without the SQL statement and parameters."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else type(exc).__name__


@contextmanager
def _storage_errors(operation: str, client_id: str | None = None) -> Iterator[None]:
    """Translate SQLAlchemy failures into domain exceptions."""
    try:
        yield
    except IntegrityError as e:
        if client_id is not None:
            raise DuplicateEntityError("ClientRecord", "clientId", client_id) from e
        logger.exception("Integrity error during %s", operation)
        raise StorageError(operation, _short_message(e)) from e
    except SQLAlchemyError as e:
        logger.exception("Database error during %s", operation)
        raise StorageError(operation, _short_message(e)) from e


class SQLAlchemyClientRecordRepository(ClientRecordRepository):
    """Implements the ClientRecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientRecordModel) -> ClientRecord:
        """Map ORM model → domain entity."""
        return ClientRecord(
            id=model.id,
            client_id=model.client_id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: ClientRecord) -> ClientRecordModel:
        """Map domain entity → ORM model (for creation)."""
        return ClientRecordModel(
            client_id=entity.client_id,
            name=entity.name,
            email=entity.email,
            phone=entity.phone,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, record_id: int) -> ClientRecord | None:
        with _storage_errors("get_by_id"):
            result = await self._session.get(ClientRecordModel, record_id)
        return self._to_entity(result) if result else None

    async def get_by_client_id(self, client_id: str) -> ClientRecord | None:
        stmt = select(ClientRecordModel).where(ClientRecordModel.client_id == client_id)
        with _storage_errors("get_by_client_id"):
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[ClientRecord]:
        stmt = select(ClientRecordModel).order_by(ClientRecordModel.name)
        with _storage_errors("get_all"):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, record: ClientRecord) -> ClientRecord:
        model = self._to_model(record)
        with _storage_errors("create", client_id=record.client_id):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def update(self, record: ClientRecord) -> ClientRecord:
        with _storage_errors("update", client_id=record.client_id):
            model = await self._session.get(ClientRecordModel, record.id)
            if model is None:
                raise ValueError(f"ClientRecord {record.id} not found in database")
            model.client_id = record.client_id
            model.name = record.name
            model.email = record.email
            model.phone = record.phone
            model.updated_at = record.updated_at
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, record_id: int) -> bool:
        with _storage_errors("delete"):
            model = await self._session.get(ClientRecordModel, record_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True

    async def count(self) -> int:
        stmt = select(func.count()).select_from(ClientRecordModel)
        with _storage_errors("count"):
            result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def latest_created_at(self) -> datetime | None:
        stmt = select(func.max(ClientRecordModel.created_at))
        with _storage_errors("latest_created_at"):
            result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
