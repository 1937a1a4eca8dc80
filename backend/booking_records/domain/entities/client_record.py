"""Domain entity — a stored client contact record."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class ClientRecord:
    """Core domain entity representing a client contact.

    ``id`` is the storage-assigned surrogate key; ``client_id`` is the
    caller-chosen business identifier (e.g. ``TB-001``) and must be unique.
    """

    client_id: str
    name: str
    email: str
    phone: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def replace(
        self,
        *,
        client_id: str,
        name: str,
        email: str,
        phone: str | None,
    ) -> None:
        """Replace every mutable field and refresh the updated_at timestamp."""
        self.client_id = client_id
        self.name = name
        self.email = email
        self.phone = phone
        self.updated_at = datetime.now(timezone.utc)
