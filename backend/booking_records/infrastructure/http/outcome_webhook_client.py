"""Outcome webhook client — posts meeting outcomes to the automation webhook."""

import logging

import httpx

from booking_records.application.interfaces import OutcomeSink
from booking_records.domain.entities import MeetingOutcome
from booking_records.domain.exceptions import ServiceRequestError

logger = logging.getLogger(__name__)


class OutcomeWebhookClient(OutcomeSink):
    """Infrastructure adapter — ``POST {webhook_url}`` with a flat JSON body.

    The webhook's response body is opaque; only the status code matters.
    """

    service_name = "outcome-webhook"

    def __init__(
        self,
        webhook_url: str,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        if not webhook_url:
            raise ValueError("webhook_url must not be empty")
        self._webhook_url = webhook_url
        self._timeout = timeout
        self._http_client = http_client

    def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def submit(self, outcome: MeetingOutcome) -> None:
        client = self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(
                self._webhook_url,
                headers={"Content-Type": "application/json"},
                json=outcome.to_payload(),
            )
            if not response.is_success:
                raise ServiceRequestError(
                    self.service_name,
                    response.status_code,
                    f"HTTP {response.status_code}",
                )
            logger.debug("Webhook accepted outcome (status=%d)", response.status_code)
        except httpx.HTTPError as e:
            raise ServiceRequestError(self.service_name, None, str(e) or type(e).__name__) from e
        finally:
            if should_close:
                await client.aclose()
