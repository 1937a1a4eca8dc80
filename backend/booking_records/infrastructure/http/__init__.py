from .record_service_client import RecordServiceClient
from .outcome_webhook_client import OutcomeWebhookClient

__all__ = [
    "RecordServiceClient",
    "OutcomeWebhookClient",
]
