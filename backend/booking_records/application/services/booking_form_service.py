"""Booking form use cases — directory refresh, client selection, outcome submission.

Holds the current directory as an immutable snapshot that is only ever
replaced by ``refresh_directory()``. Outbound calls are awaited one at a
time and report failures as values instead of raising.
"""

import logging
from dataclasses import dataclass

from booking_records.application.interfaces import ClientDirectorySource, OutcomeSink
from booking_records.domain.entities import (
    DEFAULT_OUTCOME_SOURCE,
    ClientDirectory,
    DirectoryEntry,
    MeetingOutcome,
)
from booking_records.domain.exceptions import ServiceRequestError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryRefresh:
    """Result of a directory pull — ``error`` is set when the pull failed."""

    directory: ClientDirectory
    error: ServiceRequestError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class SubmissionResult:
    """Result of a webhook submission."""

    outcome: MeetingOutcome
    error: ServiceRequestError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BookingFormService:
    """Non-UI logic of the meeting outcome form."""

    def __init__(
        self,
        directory_source: ClientDirectorySource,
        outcome_sink: OutcomeSink,
        *,
        source: str = DEFAULT_OUTCOME_SOURCE,
    ):
        self._directory_source = directory_source
        self._outcome_sink = outcome_sink
        self._source = source
        self._directory = ClientDirectory()

    @property
    def directory(self) -> ClientDirectory:
        """The most recently pulled snapshot (empty before the first pull)."""
        return self._directory

    async def refresh_directory(self) -> DirectoryRefresh:
        """Pull a new snapshot; on failure the snapshot is reset to empty."""
        try:
            directory = await self._directory_source.fetch_directory()
        except ServiceRequestError as e:
            logger.error("Failed to load clients: %s", e)
            self._directory = ClientDirectory()
            return DirectoryRefresh(directory=self._directory, error=e)

        if len(directory) == 0:
            logger.warning("No clients returned from the record service")
        else:
            logger.info("Loaded %d clients", len(directory))
        self._directory = directory
        return DirectoryRefresh(directory=directory)

    def select_client(self, key: str) -> DirectoryEntry | None:
        return self._directory.get(key)

    def build_outcome(
        self,
        *,
        details: str,
        outcome: str,
        entry: DirectoryEntry | None = None,
        name: str = "",
        email: str = "",
        phone: str = "",
        client_id: str = "",
    ) -> MeetingOutcome:
        """Assemble an outcome, pre-filling contact fields from ``entry`` if given.

        Explicit contact arguments override the selected entry, matching a
        user editing a pre-filled form.
        """
        if entry is not None:
            name = name or entry.name
            email = email or entry.email
            phone = phone or entry.phone
            client_id = client_id or entry.client_id
        return MeetingOutcome(
            name=name,
            email=email,
            phone=phone,
            client_id=client_id,
            details=details,
            outcome=outcome,
            source=self._source,
        )

    async def submit_outcome(self, outcome: MeetingOutcome) -> SubmissionResult:
        """Send the outcome to the webhook once, without retry."""
        try:
            await self._outcome_sink.submit(outcome)
        except ServiceRequestError as e:
            logger.error("Error submitting outcome for %s: %s", outcome.client_id, e)
            return SubmissionResult(outcome=outcome, error=e)
        logger.info("Submitted outcome for %s", outcome.client_id)
        return SubmissionResult(outcome=outcome)
