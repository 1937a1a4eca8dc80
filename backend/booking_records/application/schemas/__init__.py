from .client_record import (
    ClientRecordCreate,
    ClientRecordUpdate,
    ClientRecordResponse,
    ClientEnvelope,
    ClientListResponse,
    ClientMutationResponse,
    ClientDeletedResponse,
    INVALID_EMAIL_MESSAGE,
)
from .directory import DirectoryEntryResponse, ClientDirectoryResponse

__all__ = [
    "ClientRecordCreate",
    "ClientRecordUpdate",
    "ClientRecordResponse",
    "ClientEnvelope",
    "ClientListResponse",
    "ClientMutationResponse",
    "ClientDeletedResponse",
    "INVALID_EMAIL_MESSAGE",
    "DirectoryEntryResponse",
    "ClientDirectoryResponse",
]
