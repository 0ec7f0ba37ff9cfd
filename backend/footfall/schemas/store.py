from typing import Annotated

from pydantic import StringConstraints

from footfall.schemas.common import CamelModel

StoreText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class StoreCreate(CamelModel):
    name: StoreText
    city: StoreText
    country: StoreText


class StoreUpdate(StoreCreate):
    pass


class StoreItem(CamelModel):
    id: int
    name: str
    entry_count: int = 0


class StoreDetail(CamelModel):
    id: int = 0
    name: str = ""
    city: str = ""
    country: str = ""
    status: bool = True
    message: str | None = None


class DailyStatistic(CamelModel):
    date: str  # yyyy-MM-dd
    count: int


class StoreStatistics(CamelModel):
    id: int = 0
    name: str = ""
    city: str = ""
    country: str = ""
    statistics: list[DailyStatistic] = []
    status: bool = True
    message: str | None = None
