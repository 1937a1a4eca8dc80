"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str, field: str = "id"):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        super().__init__(f"{entity_type} with {field} '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class StorageError(Exception):
    """Raised when the underlying database or driver fails.

    ``message`` is a short description safe to return to callers.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation} failed: {message}")


class ServiceRequestError(Exception):
    """Raised when an outbound HTTP call (record service, webhook) fails.

    ``status_code`` is None for transport-level failures.
    """

    def __init__(self, service: str, status_code: int | None, message: str):
        self.service = service
        self.status_code = status_code
        self.message = message
        prefix = f"{status_code}: " if status_code is not None else ""
        super().__init__(f"[{service}] {prefix}{message}")
