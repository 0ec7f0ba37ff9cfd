from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from footfall.database import Base


class Store(Base):
    """A physical store location."""
    __tablename__ = "stores"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)  # searched and sorted on
    city = Column(String(100), nullable=False)
    country = Column(String(100), nullable=False)

    # Relationships
    entries = relationship(
        "Entry",
        back_populates="store",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
