from .client_record_repository import ClientRecordRepository
from .directory_source import ClientDirectorySource
from .outcome_sink import OutcomeSink

__all__ = [
    "ClientRecordRepository",
    "ClientDirectorySource",
    "OutcomeSink",
]
