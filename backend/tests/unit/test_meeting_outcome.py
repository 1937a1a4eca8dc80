"""Unit tests for the MeetingOutcome webhook payload."""

from datetime import datetime

from booking_records.domain.entities import DEFAULT_OUTCOME_SOURCE, MeetingOutcome


def test_payload_uses_form_field_names():
    outcome = MeetingOutcome(
        name="John Smith",
        email="john.smith@email.com",
        phone="+44 7700 123456",
        client_id="TB-001",
        details="Discussed renewal",
        outcome="Booked follow-up",
        timestamp="2024-05-01T10:00:00Z",
    )

    assert outcome.to_payload() == {
        "name": "John Smith",
        "email": "john.smith@email.com",
        "phone": "+44 7700 123456",
        "clientId": "TB-001",
        "details": "Discussed renewal",
        "outcome": "Booked follow-up",
        "timestamp": "2024-05-01T10:00:00Z",
        "source": DEFAULT_OUTCOME_SOURCE,
    }


def test_default_timestamp_is_utc_iso():
    outcome = MeetingOutcome(
        name="n", email="e@x.io", phone="", client_id="c", details="d", outcome="o"
    )
    assert outcome.timestamp.endswith("Z")
    parsed = datetime.fromisoformat(outcome.timestamp.replace("Z", "+00:00"))
    assert parsed.utcoffset().total_seconds() == 0
