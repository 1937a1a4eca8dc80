from .client_record import ClientRecordModel

__all__ = [
    "ClientRecordModel",
]
