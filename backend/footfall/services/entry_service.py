"""
Entry (store visit) queries.

All listings are newest first. Listings scoped to one store return
``StoreEntryItem`` rows; the others carry the store id and name.
"""
import logging
from datetime import date, datetime
from typing import Type

from sqlalchemy import desc, func
from sqlalchemy.orm import Query, Session

from footfall.models import Entry, Store
from footfall.schemas import (
    ApiResponse,
    EntryCreate,
    EntryDailyCount,
    EntryListItem,
    EntryStatistics,
    EntryStoreCount,
    EntryUpdate,
    IdResponse,
    PaginatedResponse,
    StoreEntryItem,
)
from footfall.services.dates import day_bounds, format_day
from footfall.services.pagination import PaginationParams

logger = logging.getLogger(__name__)

STORE_NOT_FOUND = "Store not found"
ENTRY_NOT_FOUND = "Entry not found"
NO_ENTRIES_FOUND = "No entries found"


class EntryService:
    def __init__(self, db: Session):
        self.db = db

    def _with_store_name(self) -> Query:
        return self.db.query(
            Entry.id,
            Entry.store_id,
            Store.name.label("store_name"),
            Entry.entry_date,
        ).join(Store, Entry.store_id == Store.id)

    def _store_entries(self, store_id: int) -> Query:
        return self.db.query(Entry.id, Entry.entry_date).filter(Entry.store_id == store_id)

    def _paginate(self, query: Query, pagination: PaginationParams, schema: Type) -> PaginatedResponse:
        total_items = query.count()
        rows = (
            query.order_by(desc(Entry.entry_date), desc(Entry.id))
            .offset(pagination.offset)
            .limit(pagination.page_size)
            .all()
        )

        return PaginatedResponse[schema](
            items=[schema(**row._asdict()) for row in rows],
            page=pagination.page,
            page_size=pagination.page_size,
            total_items=total_items,
            total_pages=pagination.total_pages(total_items),
        )

    def list_entries(self, pagination: PaginationParams) -> PaginatedResponse[EntryListItem]:
        return self._paginate(self._with_store_name(), pagination, EntryListItem)

    def list_by_store(self, store_id: int, pagination: PaginationParams) -> PaginatedResponse[StoreEntryItem]:
        return self._paginate(self._store_entries(store_id), pagination, StoreEntryItem)

    def list_by_date_range(
        self, start_date: datetime, end_date: datetime, pagination: PaginationParams
    ) -> PaginatedResponse[EntryListItem]:
        query = self._with_store_name().filter(
            Entry.entry_date >= start_date,
            Entry.entry_date <= end_date,
        )
        return self._paginate(query, pagination, EntryListItem)

    def list_by_date(self, day: date, pagination: PaginationParams) -> PaginatedResponse[EntryListItem]:
        start, next_day = day_bounds(day)
        query = self._with_store_name().filter(
            Entry.entry_date >= start,
            Entry.entry_date < next_day,
        )
        return self._paginate(query, pagination, EntryListItem)

    def list_by_store_and_date(
        self, store_id: int, day: date, pagination: PaginationParams
    ) -> PaginatedResponse[StoreEntryItem]:
        start, next_day = day_bounds(day)
        query = self._store_entries(store_id).filter(
            Entry.entry_date >= start,
            Entry.entry_date < next_day,
        )
        return self._paginate(query, pagination, StoreEntryItem)

    def add_entry(self, data: EntryCreate) -> IdResponse:
        if self.db.get(Store, data.store_id) is None:
            logger.warning(f"Entry rejected, store {data.store_id} not found")
            return IdResponse(id=0, status=False, message=STORE_NOT_FOUND)

        entry = Entry(store_id=data.store_id, entry_date=data.entry_date)
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)

        logger.info(f"Recorded entry {entry.id} for store {entry.store_id}")
        return IdResponse(id=entry.id)

    def update_entry(self, entry_id: int, data: EntryUpdate) -> ApiResponse:
        entry = self.db.get(Entry, entry_id)
        if entry is None:
            logger.warning(f"Update skipped, entry {entry_id} not found")
            return ApiResponse(status=False, message=ENTRY_NOT_FOUND)

        entry.entry_date = data.entry_date
        self.db.commit()

        logger.info(f"Updated entry {entry_id}")
        return ApiResponse()

    def delete_entry(self, entry_id: int) -> ApiResponse:
        entry = self.db.get(Entry, entry_id)
        if entry is None:
            logger.warning(f"Delete skipped, entry {entry_id} not found")
            return ApiResponse(status=False, message=ENTRY_NOT_FOUND)

        self.db.delete(entry)
        self.db.commit()

        logger.info(f"Deleted entry {entry_id}")
        return ApiResponse()

    def delete_entries(self, ids: list[int]) -> ApiResponse:
        deleted = (
            self.db.query(Entry)
            .filter(Entry.id.in_(ids))
            .delete(synchronize_session=False)
        )
        if not deleted:
            logger.warning(f"Bulk delete matched no entries: {ids}")
            return ApiResponse(status=False, message=NO_ENTRIES_FOUND)

        self.db.commit()

        logger.info(f"Bulk deleted {deleted} entries")
        return ApiResponse()

    def get_statistics(self, start_date: datetime, end_date: datetime) -> EntryStatistics:
        """Daily counts and per-store counts for every entry in [start_date, end_date]."""
        in_range = (
            Entry.entry_date >= start_date,
            Entry.entry_date <= end_date,
        )

        entry_day = func.date(Entry.entry_date)
        daily = (
            self.db.query(entry_day.label("entry_day"), func.count(Entry.id).label("visits"))
            .filter(*in_range)
            .group_by(entry_day)
            .order_by(entry_day)
            .all()
        )

        visits = func.count(Entry.id)
        per_store = (
            self.db.query(Entry.store_id, visits.label("visits"))
            .filter(*in_range)
            .group_by(Entry.store_id)
            .order_by(desc(visits), Entry.store_id)
            .all()
        )

        store_names = {}
        if per_store:
            store_ids = [row.store_id for row in per_store]
            store_names = dict(
                self.db.query(Store.id, Store.name).filter(Store.id.in_(store_ids)).all()
            )

        return EntryStatistics(
            daily_counts=[
                EntryDailyCount(date=format_day(row.entry_day), count=row.visits)
                for row in daily
            ],
            store_counts=[
                EntryStoreCount(
                    store_id=row.store_id,
                    store_name=store_names.get(row.store_id),
                    count=row.visits,
                )
                for row in per_store
            ],
        )
