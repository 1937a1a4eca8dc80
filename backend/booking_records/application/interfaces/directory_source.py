"""Port for fetching the formatted client directory from the record service."""

from abc import ABC, abstractmethod

from booking_records.domain.entities import ClientDirectory


class ClientDirectorySource(ABC):
    """Port — where the booking form pulls its selectable clients from."""

    @abstractmethod
    async def fetch_directory(self) -> ClientDirectory:
        """Return a fresh directory snapshot.

        Raises:
            ServiceRequestError: If the source is unreachable or answers non-2xx.
        """
        ...
