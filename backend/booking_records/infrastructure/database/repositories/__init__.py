from .client_record_repository import SQLAlchemyClientRecordRepository

__all__ = [
    "SQLAlchemyClientRecordRepository",
]
