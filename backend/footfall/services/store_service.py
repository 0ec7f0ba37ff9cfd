"""
Store queries: paginated listing with search and sort, CRUD and
per-store daily visit statistics.
"""
import logging
from datetime import datetime

from sqlalchemy import String, asc, desc, func
from sqlalchemy.orm import Session

from footfall.models import Entry, Store
from footfall.schemas import (
    ApiResponse,
    DailyStatistic,
    IdResponse,
    PaginatedResponse,
    StoreCreate,
    StoreDetail,
    StoreItem,
    StoreStatistics,
    StoreUpdate,
)
from footfall.services.dates import format_day
from footfall.services.pagination import PaginationParams, parse_sort

logger = logging.getLogger(__name__)

STORE_NOT_FOUND = "Store not found"
NO_STORES_FOUND = "No stores found"

# Recognised values for the field part of "field:direction"
STORE_SORT_FIELDS = ("id", "name", "entries")


class StoreService:
    def __init__(self, db: Session):
        self.db = db

    def list_stores(self, pagination: PaginationParams) -> PaginatedResponse[StoreItem]:
        criteria = []
        term = pagination.search_term
        if term:
            criteria.append(func.lower(Store.name, type_=String).contains(term, autoescape=True))

        total_items = self.db.query(Store).filter(*criteria).count()

        entry_counts = (
            self.db.query(Entry.store_id, func.count(Entry.id).label("entry_count"))
            .group_by(Entry.store_id)
            .subquery()
        )
        entry_count = func.coalesce(entry_counts.c.entry_count, 0)

        query = (
            self.db.query(Store.id, Store.name, entry_count.label("entry_count"))
            .outerjoin(entry_counts, entry_counts.c.store_id == Store.id)
            .filter(*criteria)
        )

        field, ascending = parse_sort(pagination.sort, STORE_SORT_FIELDS)
        column = {"id": Store.id, "name": Store.name, "entries": entry_count}[field]
        direction = asc if ascending else desc
        query = query.order_by(direction(column))
        if field != "id":
            # Ties keep a stable order across pages
            query = query.order_by(Store.id)

        rows = query.offset(pagination.offset).limit(pagination.page_size).all()

        return PaginatedResponse[StoreItem](
            items=[StoreItem(**row._asdict()) for row in rows],
            page=pagination.page,
            page_size=pagination.page_size,
            total_items=total_items,
            total_pages=pagination.total_pages(total_items),
        )

    def get_store(self, store_id: int) -> StoreDetail:
        store = self.db.get(Store, store_id)
        if store is None:
            return StoreDetail(status=False, message=STORE_NOT_FOUND)

        return StoreDetail(id=store.id, name=store.name, city=store.city, country=store.country)

    def create_store(self, data: StoreCreate) -> IdResponse:
        store = Store(name=data.name, city=data.city, country=data.country)
        self.db.add(store)
        self.db.commit()
        self.db.refresh(store)

        logger.info(f"Created store {store.id} ({store.name})")
        return IdResponse(id=store.id)

    def update_store(self, store_id: int, data: StoreUpdate) -> IdResponse:
        store = self.db.get(Store, store_id)
        if store is None:
            logger.warning(f"Update skipped, store {store_id} not found")
            return IdResponse(id=0, status=False, message=STORE_NOT_FOUND)

        store.name = data.name
        store.city = data.city
        store.country = data.country
        self.db.commit()

        logger.info(f"Updated store {store_id}")
        return IdResponse(id=store_id)

    def delete_store(self, store_id: int) -> ApiResponse:
        store = self.db.get(Store, store_id)
        if store is None:
            logger.warning(f"Delete skipped, store {store_id} not found")
            return ApiResponse(status=False, message=STORE_NOT_FOUND)

        # Entries go with the store (ON DELETE CASCADE)
        self.db.delete(store)
        self.db.commit()

        logger.info(f"Deleted store {store_id}")
        return ApiResponse()

    def delete_stores(self, ids: list[int]) -> ApiResponse:
        stores = self.db.query(Store).filter(Store.id.in_(ids)).all()
        if not stores:
            logger.warning(f"Bulk delete matched no stores: {ids}")
            return ApiResponse(status=False, message=NO_STORES_FOUND)

        for store in stores:
            self.db.delete(store)
        self.db.commit()

        logger.info(f"Bulk deleted {len(stores)} stores")
        return ApiResponse()

    def get_statistics(self, store_id: int, start_date: datetime, end_date: datetime) -> StoreStatistics:
        """Daily visit counts for one store, both bounds inclusive."""
        store = self.db.get(Store, store_id)
        if store is None:
            return StoreStatistics(status=False, message=STORE_NOT_FOUND)

        entry_day = func.date(Entry.entry_date)
        rows = (
            self.db.query(entry_day.label("entry_day"), func.count(Entry.id).label("visits"))
            .filter(
                Entry.store_id == store_id,
                Entry.entry_date >= start_date,
                Entry.entry_date <= end_date,
            )
            .group_by(entry_day)
            .order_by(entry_day)
            .all()
        )

        return StoreStatistics(
            id=store.id,
            name=store.name,
            city=store.city,
            country=store.country,
            statistics=[DailyStatistic(date=format_day(row.entry_day), count=row.visits) for row in rows],
        )
