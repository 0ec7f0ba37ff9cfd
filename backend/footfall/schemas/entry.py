from datetime import datetime

from pydantic import Field, field_validator

from footfall.schemas.common import CamelModel, to_naive_utc


class EntryCreate(CamelModel):
    store_id: int = Field(..., ge=1)
    entry_date: datetime

    @field_validator("entry_date")
    @classmethod
    def _naive_utc(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class EntryUpdate(CamelModel):
    entry_date: datetime

    @field_validator("entry_date")
    @classmethod
    def _naive_utc(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class EntryListItem(CamelModel):
    id: int
    store_id: int
    store_name: str | None = None
    entry_date: datetime


class StoreEntryItem(CamelModel):
    """Entry listed under a known store, so the store fields are left out."""
    id: int
    entry_date: datetime


class EntryDailyCount(CamelModel):
    date: str  # yyyy-MM-dd
    count: int


class EntryStoreCount(CamelModel):
    store_id: int
    store_name: str | None = None
    count: int


class EntryStatistics(CamelModel):
    daily_counts: list[EntryDailyCount] = []
    store_counts: list[EntryStoreCount] = []
    status: bool = True
    message: str | None = None
