"""Query-parameter dependencies shared by the store and entry routers."""
from datetime import date, datetime

from fastapi import HTTPException, Query

from footfall.schemas.common import to_naive_utc
from footfall.services.pagination import DEFAULT_PAGE_SIZE, PaginationParams

INVALID_DATE_RANGE = "startDate must be less than or equal to endDate"
NO_IDS_PROVIDED = "No IDs provided"


def pagination_params(
    page: int = Query(1, description="Page number, pages below 1 are treated as 1"),
    page_size: int = Query(
        DEFAULT_PAGE_SIZE,
        alias="pageSize",
        description="Items per page (default 10, max 50)",
    ),
) -> PaginationParams:
    return PaginationParams(page=page, page_size=page_size)


def date_range(
    start_date: datetime = Query(..., alias="startDate", description="Inclusive lower bound"),
    end_date: datetime = Query(..., alias="endDate", description="Inclusive upper bound"),
) -> tuple[datetime, datetime]:
    start_date = to_naive_utc(start_date)
    end_date = to_naive_utc(end_date)
    if start_date > end_date:
        raise HTTPException(status_code=400, detail=INVALID_DATE_RANGE)
    return start_date, end_date


def calendar_day(day: date | datetime) -> date:
    """Path dates may carry a time of day; only the (UTC) calendar day is used."""
    if isinstance(day, datetime):
        return to_naive_utc(day).date()
    return day


def require_ids(ids: list[int]) -> list[int]:
    if not ids:
        raise HTTPException(status_code=400, detail=NO_IDS_PROVIDED)
    return ids
