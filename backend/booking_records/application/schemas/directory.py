"""Pydantic DTOs for the form-friendly client directory."""

from pydantic import BaseModel, Field

from booking_records.domain.entities import ClientDirectory, DirectoryEntry


class DirectoryEntryResponse(BaseModel):
    """A selectable client as the booking form sees it."""

    id: int | None = None
    name: str
    email: str
    phone: str = ""
    client_id: str = Field(..., alias="clientId")

    model_config = {"from_attributes": True, "populate_by_name": True}

    def to_entity(self) -> DirectoryEntry:
        return DirectoryEntry(
            id=self.id,
            name=self.name,
            email=self.email,
            phone=self.phone,
            client_id=self.client_id,
        )


class ClientDirectoryResponse(BaseModel):
    """Derived key → entry mapping plus the number of source records."""

    clients: dict[str, DirectoryEntryResponse]
    count: int

    @classmethod
    def from_directory(cls, directory: ClientDirectory) -> "ClientDirectoryResponse":
        return cls(
            clients={
                key: DirectoryEntryResponse.model_validate(entry)
                for key, entry in directory.entries.items()
            },
            count=directory.count,
        )

    def to_directory(self) -> ClientDirectory:
        return ClientDirectory.from_entries(
            ((key, entry.to_entity()) for key, entry in self.clients.items()),
            count=self.count,
        )
