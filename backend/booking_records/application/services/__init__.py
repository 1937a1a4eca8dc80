from .client_record_service import ClientRecordService, DEFAULT_CLIENTS
from .booking_form_service import (
    BookingFormService,
    DirectoryRefresh,
    SubmissionResult,
)

__all__ = [
    "ClientRecordService",
    "DEFAULT_CLIENTS",
    "BookingFormService",
    "DirectoryRefresh",
    "SubmissionResult",
]
