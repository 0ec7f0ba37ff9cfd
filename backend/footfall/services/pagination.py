"""
Pagination, sorting and search parameters for list queries.

Every input is normalized rather than rejected:
- page size above 50 is clamped to 50, below 1 falls back to the default of 10
- page numbers below 1 are treated as page 1, huge ones as the last page whose
  offset still fits in a 64-bit integer
- a sort expression looks like "name:desc"; unknown fields sort by id ascending
- search is trimmed and lower-cased, blank search means no filter
"""
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Iterable

MAX_PAGE_SIZE = 50
DEFAULT_PAGE_SIZE = 10
DEFAULT_SORT_FIELD = "id"

# Largest OFFSET a database can bind (signed 64-bit)
MAX_OFFSET = 2**63 - 1


def normalize_page_size(page_size: int) -> int:
    if page_size > MAX_PAGE_SIZE:
        return MAX_PAGE_SIZE
    if page_size < 1:
        return DEFAULT_PAGE_SIZE
    return page_size


def parse_sort(
    sort: Optional[str],
    allowed_fields: Iterable[str] = (DEFAULT_SORT_FIELD,),
    default_field: str = DEFAULT_SORT_FIELD,
) -> Tuple[str, bool]:
    """Split "field:direction" into (field, ascending)."""
    if not sort or not sort.strip():
        return default_field, True

    parts = sort.split(":")
    field = parts[0].strip().lower()
    ascending = len(parts) < 2 or parts[1].strip().lower() != "desc"

    if field not in allowed_fields:
        return default_field, True

    return field, ascending


@dataclass
class PaginationParams:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    sort: Optional[str] = None
    search: Optional[str] = None

    def __post_init__(self):
        self.page_size = normalize_page_size(self.page_size)
        self.page = min(max(self.page, 1), MAX_OFFSET // self.page_size + 1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def search_term(self) -> Optional[str]:
        if self.search is None:
            return None
        term = self.search.strip().lower()
        return term or None

    def total_pages(self, total_items: int) -> int:
        return math.ceil(total_items / self.page_size)
