# scraptrade/models.py
"""SQLAlchemy ORM models for persisted entities.

Defines the `Listing` model and its indexes. The star rating is exposed as
read-only properties computed from the counters; it has no column.
"""
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, Text, Float, TIMESTAMP, Index, CheckConstraint
from .db import Base
from .rating import rating, rating_stars

LISTING_TYPES = ("buy", "sell")


def utcnow():
    return datetime.now(timezone.utc)


class Listing(Base):
    __tablename__ = "listings"
    id = Column(Integer, primary_key=True, index=True)
    type = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    details = Column(Text)
    rate = Column(Float, nullable=False)
    unit = Column(Text)
    city = Column(Text)
    user_name = Column(Text)
    views = Column(Integer, nullable=False, default=0, server_default="0")
    clicks = Column(Integer, nullable=False, default=0, server_default="0")
    # python-side default keeps sub-second precision for newest-first ordering
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint("type IN ('buy', 'sell')", name="ck_listings_type"),
        CheckConstraint("views >= 0 AND clicks >= 0", name="ck_listings_counters"),
    )

    @property
    def rating(self):
        return rating(self.views or 0, self.clicks or 0)

    @property
    def stars(self):
        return rating_stars(self.views or 0, self.clicks or 0)

    def __repr__(self):
        return f"<Listing {self.id} {self.type} {self.category!r}>"

Index("idx_listings_type", Listing.type)
Index("idx_listings_category", Listing.category)
Index("idx_listings_created_at", Listing.created_at)
