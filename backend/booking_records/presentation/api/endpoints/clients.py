"""Client record CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from booking_records.application.schemas import (
    ClientDeletedResponse,
    ClientDirectoryResponse,
    ClientEnvelope,
    ClientListResponse,
    ClientMutationResponse,
    ClientRecordCreate,
    ClientRecordResponse,
    ClientRecordUpdate,
)
from booking_records.application.services import ClientRecordService
from booking_records.domain.entities import ClientRecord
from booking_records.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from booking_records.infrastructure.dependencies import get_client_record_service

router = APIRouter(prefix="/clients", tags=["Clients"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"error": "Client not found"},
    )


def _conflict(e: DuplicateEntityError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={"error": "Client ID already exists", "clientId": e.value},
    )


def _record(record: ClientRecord) -> ClientRecordResponse:
    return ClientRecordResponse.model_validate(record, from_attributes=True)


@router.get("", response_model=ClientDirectoryResponse)
async def list_directory(
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientDirectoryResponse:
    """All clients keyed for the booking form.

    Names deriving the same key collapse to the later record; ``count``
    still reports every stored row.
    """
    directory = await service.get_directory()
    return ClientDirectoryResponse.from_directory(directory)


@router.get("/raw", response_model=ClientListResponse)
async def list_raw(
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientListResponse:
    """All clients as stored, ordered by name."""
    records = await service.list_records()
    return ClientListResponse(clients=[_record(r) for r in records], count=len(records))


@router.get("/clientId/{client_id}", response_model=ClientEnvelope)
async def get_by_client_id(
    client_id: str,
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientEnvelope:
    """Retrieve a client by business identifier (e.g. TB-001)."""
    try:
        record = await service.get_record_by_client_id(client_id)
    except EntityNotFoundError:
        raise _not_found()
    return ClientEnvelope(client=_record(record))


@router.get("/{record_id}", response_model=ClientEnvelope)
async def get_by_id(
    record_id: int,
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientEnvelope:
    """Retrieve a client by database ID."""
    try:
        record = await service.get_record(record_id)
    except EntityNotFoundError:
        raise _not_found()
    return ClientEnvelope(client=_record(record))


@router.post("", response_model=ClientMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientRecordCreate,
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientMutationResponse:
    """Create a new client."""
    try:
        record = await service.create_record(data)
    except DuplicateEntityError as e:
        raise _conflict(e)
    return ClientMutationResponse(
        message="Client created successfully", client=_record(record)
    )


@router.put("/clientId/{client_id}", response_model=ClientMutationResponse)
async def update_by_client_id(
    client_id: str,
    data: ClientRecordUpdate,
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientMutationResponse:
    """Replace a client located by business identifier."""
    try:
        record = await service.update_record_by_client_id(client_id, data)
    except EntityNotFoundError:
        raise _not_found()
    except DuplicateEntityError as e:
        raise _conflict(e)
    return ClientMutationResponse(
        message="Client updated successfully", client=_record(record)
    )


@router.put("/{record_id}", response_model=ClientMutationResponse)
async def update_by_id(
    record_id: int,
    data: ClientRecordUpdate,
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientMutationResponse:
    """Replace a client located by database ID."""
    try:
        record = await service.update_record(record_id, data)
    except EntityNotFoundError:
        raise _not_found()
    except DuplicateEntityError as e:
        raise _conflict(e)
    return ClientMutationResponse(
        message="Client updated successfully", client=_record(record)
    )


@router.delete("/clientId/{client_id}", response_model=ClientDeletedResponse)
async def delete_by_client_id(
    client_id: str,
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientDeletedResponse:
    """Delete a client by business identifier and return the removed record."""
    try:
        record = await service.delete_record_by_client_id(client_id)
    except EntityNotFoundError:
        raise _not_found()
    return ClientDeletedResponse(
        message="Client deleted successfully", deleted_client=_record(record)
    )


@router.delete("/{record_id}", response_model=ClientDeletedResponse)
async def delete_by_id(
    record_id: int,
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientDeletedResponse:
    """Delete a client by database ID and return the removed record."""
    try:
        record = await service.delete_record(record_id)
    except EntityNotFoundError:
        raise _not_found()
    return ClientDeletedResponse(
        message="Client deleted successfully", deleted_client=_record(record)
    )
