from .client_record import ClientRecord
from .directory import (
    ClientDirectory,
    DirectoryEntry,
    build_directory,
    derive_directory_key,
)
from .meeting_outcome import MeetingOutcome, DEFAULT_OUTCOME_SOURCE

__all__ = [
    "ClientRecord",
    "ClientDirectory",
    "DirectoryEntry",
    "build_directory",
    "derive_directory_key",
    "MeetingOutcome",
    "DEFAULT_OUTCOME_SOURCE",
]
