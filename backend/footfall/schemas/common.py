from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def to_naive_utc(value: datetime) -> datetime:
    """Entry timestamps are stored without a zone; aware inputs are shifted to UTC first."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ApiResponse(CamelModel):
    status: bool = True
    message: str | None = None


class IdResponse(CamelModel):
    id: int = 0
    status: bool = True
    message: str | None = None


class PaginatedResponse(CamelModel, Generic[T]):
    items: list[T] = []
    page: int
    page_size: int
    total_items: int
    total_pages: int
    status: bool = True
    message: str | None = None
