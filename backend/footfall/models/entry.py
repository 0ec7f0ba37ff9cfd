from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from footfall.database import Base


class Entry(Base):
    """A recorded customer visit to a store."""
    __tablename__ = "entries"

    id = Column(Integer, primary_key=True, index=True)
    store_id = Column(Integer, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False)
    entry_date = Column(DateTime, nullable=False, index=True)

    # Relationships
    store = relationship("Store", back_populates="entries")

    # Filtering by store within a date range
    __table_args__ = (
        Index("ix_entries_store_id_entry_date", "store_id", "entry_date"),
    )
