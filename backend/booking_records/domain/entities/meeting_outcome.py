"""Domain entity — a recorded meeting outcome sent to the automation webhook."""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone

DEFAULT_OUTCOME_SOURCE = "Meeting Record Form"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class MeetingOutcome:
    """Flat outcome payload for a single client meeting."""

    name: str
    email: str
    phone: str
    client_id: str
    details: str
    outcome: str
    timestamp: str = field(default_factory=_utc_timestamp)
    source: str = DEFAULT_OUTCOME_SOURCE

    def to_payload(self) -> dict[str, str]:
        """Webhook JSON body, using the form's ``clientId`` field name."""
        payload = asdict(self)
        payload["clientId"] = payload.pop("client_id")
        return payload
