"""Demo dataset: 27 European stores with a few months of visits."""
import logging
import random
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from footfall.models import Entry, Store

logger = logging.getLogger(__name__)

CITIES = [
    ("Warsaw", "Poland"),
    ("Krakow", "Poland"),
    ("Gdansk", "Poland"),
    ("Wroclaw", "Poland"),
    ("Poznan", "Poland"),
    ("Berlin", "Germany"),
    ("Munich", "Germany"),
    ("Hamburg", "Germany"),
    ("Prague", "Czech Republic"),
    ("Vienna", "Austria"),
    ("Budapest", "Hungary"),
    ("Bratislava", "Slovakia"),
    ("Amsterdam", "Netherlands"),
    ("Brussels", "Belgium"),
    ("Paris", "France"),
    ("Lyon", "France"),
    ("Madrid", "Spain"),
    ("Barcelona", "Spain"),
    ("Rome", "Italy"),
    ("Milan", "Italy"),
    ("London", "United Kingdom"),
    ("Manchester", "United Kingdom"),
    ("Dublin", "Ireland"),
    ("Stockholm", "Sweden"),
    ("Oslo", "Norway"),
    ("Copenhagen", "Denmark"),
    ("Helsinki", "Finland"),
]

HISTORY_DAYS = 90
MIN_ENTRIES, MAX_ENTRIES = 50, 150
OPENING_HOUR, CLOSING_HOUR = 8, 20


def seed_demo_data(db: Session, seed: int = 42, now: datetime | None = None) -> int:
    """Seed stores and entries if the database has no stores. Returns the number of stores added."""
    if db.query(Store).count() > 0:
        return 0

    rng = random.Random(seed)
    start = (now or datetime.now()) - timedelta(days=HISTORY_DAYS)
    start = start.replace(hour=0, minute=0, second=0, microsecond=0)

    stores = [Store(name=f"Store {city}", city=city, country=country) for city, country in CITIES]
    db.add_all(stores)
    db.flush()

    entries = []
    for store in stores:
        for _ in range(rng.randint(MIN_ENTRIES, MAX_ENTRIES)):
            entries.append(Entry(
                store_id=store.id,
                entry_date=start + timedelta(
                    days=rng.randrange(HISTORY_DAYS),
                    hours=rng.randint(OPENING_HOUR, CLOSING_HOUR),
                    minutes=rng.randrange(60),
                ),
            ))

    db.add_all(entries)
    db.commit()

    logger.info(f"Seeded {len(stores)} stores with {len(entries)} entries")
    return len(stores)
