from datetime import date, datetime

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session

from footfall.database import get_db
from footfall.routers.common import calendar_day, date_range, pagination_params, require_ids
from footfall.schemas import (
    ApiResponse,
    EntryCreate,
    EntryListItem,
    EntryStatistics,
    EntryUpdate,
    IdResponse,
    PaginatedResponse,
    StoreEntryItem,
)
from footfall.services.entry_service import EntryService
from footfall.services.pagination import PaginationParams

router = APIRouter(prefix="/entries", tags=["entries"])


def get_entry_service(db: Session = Depends(get_db)) -> EntryService:
    return EntryService(db)


@router.get("", response_model=PaginatedResponse[EntryListItem])
def list_entries(
    pagination: PaginationParams = Depends(pagination_params),
    service: EntryService = Depends(get_entry_service),
):
    """All entries, newest first."""
    return service.list_entries(pagination)


@router.get("/store/{store_id}", response_model=PaginatedResponse[StoreEntryItem])
def list_store_entries(
    store_id: int,
    pagination: PaginationParams = Depends(pagination_params),
    service: EntryService = Depends(get_entry_service),
):
    return service.list_by_store(store_id, pagination)


@router.get("/store/{store_id}/date/{day}", response_model=PaginatedResponse[StoreEntryItem])
def list_store_entries_on_date(
    store_id: int,
    day: date | datetime,
    pagination: PaginationParams = Depends(pagination_params),
    service: EntryService = Depends(get_entry_service),
):
    return service.list_by_store_and_date(store_id, calendar_day(day), pagination)


@router.get("/date", response_model=PaginatedResponse[EntryListItem])
def list_entries_in_range(
    period: tuple[datetime, datetime] = Depends(date_range),
    pagination: PaginationParams = Depends(pagination_params),
    service: EntryService = Depends(get_entry_service),
):
    """Entries between startDate and endDate, both inclusive."""
    start_date, end_date = period
    return service.list_by_date_range(start_date, end_date, pagination)


@router.get("/date/{day}", response_model=PaginatedResponse[EntryListItem])
def list_entries_on_date(
    day: date | datetime,
    pagination: PaginationParams = Depends(pagination_params),
    service: EntryService = Depends(get_entry_service),
):
    """Entries recorded on a calendar day (yyyy-MM-dd; any time part is ignored)."""
    return service.list_by_date(calendar_day(day), pagination)


@router.get("/statistics", response_model=EntryStatistics)
def get_entry_statistics(
    period: tuple[datetime, datetime] = Depends(date_range),
    service: EntryService = Depends(get_entry_service),
):
    """Daily counts and per-store counts between startDate and endDate."""
    start_date, end_date = period
    return service.get_statistics(start_date, end_date)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
def create_entry(payload: EntryCreate, service: EntryService = Depends(get_entry_service)):
    result = service.add_entry(payload)
    if not result.status:
        raise HTTPException(status_code=404, detail=result.message)
    return result


@router.delete("/bulk", response_model=ApiResponse)
def delete_entries(
    ids: list[int] = Body(..., description="Entry IDs to delete"),
    service: EntryService = Depends(get_entry_service),
):
    result = service.delete_entries(require_ids(ids))
    if not result.status:
        raise HTTPException(status_code=404, detail=result.message)
    return result


@router.put("/{entry_id}", response_model=ApiResponse)
def update_entry(entry_id: int, payload: EntryUpdate, service: EntryService = Depends(get_entry_service)):
    """Move an entry to a new timestamp."""
    result = service.update_entry(entry_id, payload)
    if not result.status:
        raise HTTPException(status_code=404, detail=result.message)
    return result


@router.delete("/{entry_id}", response_model=ApiResponse)
def delete_entry(entry_id: int, service: EntryService = Depends(get_entry_service)):
    result = service.delete_entry(entry_id)
    if not result.status:
        raise HTTPException(status_code=404, detail=result.message)
    return result
