from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from footfall.database import get_db
from footfall.routers.common import date_range, pagination_params, require_ids
from footfall.schemas import (
    ApiResponse,
    IdResponse,
    PaginatedResponse,
    StoreCreate,
    StoreDetail,
    StoreItem,
    StoreStatistics,
    StoreUpdate,
)
from footfall.services.pagination import PaginationParams
from footfall.services.store_service import StoreService

router = APIRouter(prefix="/stores", tags=["stores"])


def get_store_service(db: Session = Depends(get_db)) -> StoreService:
    return StoreService(db)


@router.get("", response_model=PaginatedResponse[StoreItem])
def list_stores(
    pagination: PaginationParams = Depends(pagination_params),
    sort: Optional[str] = Query(None, description='"field:direction", e.g. "name:asc", "entries:desc". Default: "id:asc"'),
    search: Optional[str] = Query(None, description="Case-insensitive match on store name"),
    service: StoreService = Depends(get_store_service),
):
    """List stores with their entry counts."""
    pagination.sort = sort
    pagination.search = search
    return service.list_stores(pagination)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
def create_store(payload: StoreCreate, service: StoreService = Depends(get_store_service)):
    return service.create_store(payload)


@router.delete("/bulk", response_model=ApiResponse)
def delete_stores(
    ids: list[int] = Body(..., description="Store IDs to delete"),
    service: StoreService = Depends(get_store_service),
):
    """Delete every listed store; 404 only when none of them exist."""
    result = service.delete_stores(require_ids(ids))
    if not result.status:
        raise HTTPException(status_code=404, detail=result.message)
    return result


@router.get("/statistics/{store_id}", response_model=StoreStatistics)
def get_store_statistics(
    store_id: int,
    period: tuple[datetime, datetime] = Depends(date_range),
    service: StoreService = Depends(get_store_service),
):
    """Daily visit counts for a store between startDate and endDate."""
    start_date, end_date = period
    result = service.get_statistics(store_id, start_date, end_date)
    if not result.status:
        raise HTTPException(status_code=404, detail=result.message)
    return result


@router.get("/{store_id}", response_model=StoreDetail)
def get_store(store_id: int, service: StoreService = Depends(get_store_service)):
    result = service.get_store(store_id)
    if not result.status:
        raise HTTPException(status_code=404, detail=result.message)
    return result


@router.put("/{store_id}", response_model=IdResponse)
def update_store(store_id: int, payload: StoreUpdate, service: StoreService = Depends(get_store_service)):
    """Replace a store's name, city and country."""
    result = service.update_store(store_id, payload)
    if not result.status:
        raise HTTPException(status_code=404, detail=result.message)
    return result


@router.delete("/{store_id}", response_model=ApiResponse)
def delete_store(store_id: int, service: StoreService = Depends(get_store_service)):
    """Delete a store together with all of its entries."""
    result = service.delete_store(store_id)
    if not result.status:
        raise HTTPException(status_code=404, detail=result.message)
    return result
