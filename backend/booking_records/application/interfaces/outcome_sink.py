"""Port for delivering meeting outcomes to the external automation webhook."""

from abc import ABC, abstractmethod

from booking_records.domain.entities import MeetingOutcome


class OutcomeSink(ABC):
    """Port — one-way delivery of a completed outcome."""

    @abstractmethod
    async def submit(self, outcome: MeetingOutcome) -> None:
        """Deliver the outcome.

        Raises:
            ServiceRequestError: If delivery fails or the receiver answers non-2xx.
        """
        ...
