"""Abstract repository interface (port) for ClientRecord persistence."""

from abc import ABC, abstractmethod
from datetime import datetime

from booking_records.domain.entities import ClientRecord


class ClientRecordRepository(ABC):
    """Port for client record persistence — implemented in the infrastructure layer.

    Implementations raise ``DuplicateEntityError`` when a write would break
    the ``client_id`` uniqueness rule and ``StorageError`` for any other
    driver failure.
    """

    @abstractmethod
    async def get_by_id(self, record_id: int) -> ClientRecord | None:
        """Retrieve a single record by its surrogate ID."""
        ...

    @abstractmethod
    async def get_by_client_id(self, client_id: str) -> ClientRecord | None:
        """Retrieve a single record by its business identifier."""
        ...

    @abstractmethod
    async def get_all(self) -> list[ClientRecord]:
        """Retrieve every record ordered by name."""
        ...

    @abstractmethod
    async def create(self, record: ClientRecord) -> ClientRecord:
        """Persist a new record and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, record: ClientRecord) -> ClientRecord:
        """Write all mutable fields of an existing record."""
        ...

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Total number of stored records."""
        ...

    @abstractmethod
    async def latest_created_at(self) -> datetime | None:
        """Creation time of the newest record, or None when empty."""
        ...
