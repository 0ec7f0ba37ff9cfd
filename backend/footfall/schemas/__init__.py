from footfall.schemas.common import ApiResponse, IdResponse, PaginatedResponse
from footfall.schemas.store import (
    StoreCreate, StoreUpdate, StoreItem, StoreDetail, DailyStatistic, StoreStatistics,
)
from footfall.schemas.entry import (
    EntryCreate, EntryUpdate, EntryListItem, StoreEntryItem,
    EntryDailyCount, EntryStoreCount, EntryStatistics,
)

__all__ = [
    "ApiResponse", "IdResponse", "PaginatedResponse",
    "StoreCreate", "StoreUpdate", "StoreItem", "StoreDetail", "DailyStatistic", "StoreStatistics",
    "EntryCreate", "EntryUpdate", "EntryListItem", "StoreEntryItem",
    "EntryDailyCount", "EntryStoreCount", "EntryStatistics",
]
