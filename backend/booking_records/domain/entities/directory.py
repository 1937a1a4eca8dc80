"""Form-friendly client directory — derived keys mapped to contact entries."""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from booking_records.domain.entities.client_record import ClientRecord

_NON_ALNUM = re.compile(r"[^a-z0-9]")
DIRECTORY_KEY_LENGTH = 10


def derive_directory_key(name: str) -> str:
    """Lower-case the name, drop non-alphanumerics and truncate."""
    return _NON_ALNUM.sub("", name.lower())[:DIRECTORY_KEY_LENGTH]


@dataclass(frozen=True)
class DirectoryEntry:
    """A single selectable client in the booking form."""

    id: int | None
    name: str
    email: str
    phone: str
    client_id: str

    @classmethod
    def from_record(cls, record: ClientRecord) -> "DirectoryEntry":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            phone=record.phone or "",
            client_id=record.client_id,
        )


@dataclass(frozen=True)
class ClientDirectory:
    """Immutable snapshot of the client directory.

    ``count`` is the number of source records, which can exceed the
    number of entries when two names derive the same key.
    """

    entries: Mapping[str, DirectoryEntry] = field(
        default_factory=lambda: MappingProxyType({})
    )
    count: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str) -> DirectoryEntry | None:
        return self.entries.get(key)

    @classmethod
    def from_entries(
        cls, entries: Iterable[tuple[str, DirectoryEntry]], count: int | None = None
    ) -> "ClientDirectory":
        """Build a snapshot; for a repeated key the later entry wins."""
        mapping: dict[str, DirectoryEntry] = {}
        total = 0
        for key, entry in entries:
            mapping[key] = entry
            total += 1
        return cls(
            entries=MappingProxyType(mapping),
            count=total if count is None else count,
        )


def build_directory(records: Iterable[ClientRecord]) -> ClientDirectory:
    """Format records for the booking form.

    Key collisions are not deduplicated: a later record silently
    replaces an earlier one under the same key.
    """
    return ClientDirectory.from_entries(
        (derive_directory_key(r.name), DirectoryEntry.from_record(r)) for r in records
    )
