from datetime import date, datetime, time, timedelta
from typing import Tuple, Union


def day_bounds(day: Union[date, datetime]) -> Tuple[datetime, datetime]:
    """Return [start, next day start) for a calendar day, ignoring any time of day."""
    if isinstance(day, datetime):
        day = day.date()
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def format_day(value) -> str:
    """yyyy-MM-dd for a grouped day; SQLite's date() yields text, PostgreSQL a date."""
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    return str(value)[:10]
