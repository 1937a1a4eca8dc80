"""Record service client — pulls the formatted client directory over HTTP."""

import logging

import httpx
from pydantic import ValidationError

from booking_records.application.interfaces import ClientDirectorySource
from booking_records.application.schemas import ClientDirectoryResponse
from booking_records.domain.entities import ClientDirectory
from booking_records.domain.exceptions import ServiceRequestError

logger = logging.getLogger(__name__)


class RecordServiceClient(ClientDirectorySource):
    """Infrastructure adapter — reads ``GET {base_url}/clients``.

    An injected ``http_client`` is reused and left open; otherwise a
    client is created and closed per call.
    """

    service_name = "record-service"

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def fetch_directory(self) -> ClientDirectory:
        url = f"{self._base_url}/clients"
        client = self._get_client()
        should_close = self._http_client is None

        try:
            logger.debug("Loading clients from %s", url)
            response = await client.get(url, headers={"Accept": "application/json"})
            if not response.is_success:
                raise ServiceRequestError(
                    self.service_name,
                    response.status_code,
                    f"HTTP {response.status_code}",
                )
            try:
                body = ClientDirectoryResponse.model_validate(response.json())
            except (ValueError, ValidationError) as e:
                raise ServiceRequestError(
                    self.service_name, response.status_code, f"Malformed directory: {e}"
                ) from e
            return body.to_directory()
        except httpx.HTTPError as e:
            raise ServiceRequestError(self.service_name, None, str(e) or type(e).__name__) from e
        finally:
            if should_close:
                await client.aclose()
