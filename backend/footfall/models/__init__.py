from footfall.models.store import Store
from footfall.models.entry import Entry

__all__ = [
    "Store",
    "Entry",
]
