"""
Seed Demo Data Script

Creates 27 demo stores with randomised visit entries over the last 90 days.
Does nothing if the database already has stores.
Run with: python -m scripts.seed_demo_data
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from footfall.database import SessionLocal, init_db
from footfall.models import Entry, Store
from footfall.seed import seed_demo_data


def main():
    init_db()

    db = SessionLocal()
    try:
        added = seed_demo_data(db)
        if not added:
            print("Stores already present, nothing to seed")
            return

        print(f"Done! Seeded {added} stores")
        print(f"\nSummary:")
        print(f"  Total stores: {db.query(Store).count()}")
        print(f"  Total entries: {db.query(Entry).count()}")
    except Exception as e:
        print(f"Error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
