# scraptrade/crud.py
"""Repository operations for `Listing` entities.

Create, filtered find (newest first), single fetch and atomic counter
increments. Database failures surface as `StorageError`; the session is rolled
back before re-raising.
"""
from functools import wraps
from typing import Dict, Any, Optional
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from .errors import StorageError
from .models import Listing
from .utils import logger

COUNTER_FIELDS = ("views", "clicks")


def _escape_like(needle: str) -> str:
    # user text is a literal substring, not a LIKE pattern
    return needle.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def storage_errors(f):
    @wraps(f)
    def wrapper(db: Session, *args, **kwargs):
        try:
            return f(db, *args, **kwargs)
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception("Storage failure in %s: %s", f.__name__, e)
            raise StorageError(f"{f.__name__} failed") from e
    return wrapper


@storage_errors
def create_listing(db: Session, data: Dict[str, Any]):
    obj = Listing(**data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@storage_errors
def get_listing(db: Session, listing_id: int):
    return db.get(Listing, listing_id)


@storage_errors
def list_listings(db: Session, filters: Optional[Dict] = None):
    q = db.query(Listing)
    if filters:
        if filters.get("type"):
            q = q.filter(Listing.type == filters["type"])
        if filters.get("category"):
            q = q.filter(Listing.category == filters["category"])
        if filters.get("city"):
            q = q.filter(Listing.city.ilike(f"%{_escape_like(filters['city'])}%", escape="\\"))
    return q.order_by(Listing.created_at.desc(), Listing.id.desc()).all()


@storage_errors
def increment_counter(db: Session, listing_id: int, field: str) -> int:
    """Add one to `field` in a single UPDATE; returns the number of rows hit."""
    if field not in COUNTER_FIELDS:
        raise ValueError(f"not a counter: {field}")
    column = getattr(Listing, field)
    stmt = (
        update(Listing)
        .where(Listing.id == listing_id)
        .values({column: column + 1})
        .execution_options(synchronize_session=False)
    )
    result = db.execute(stmt)
    db.commit()
    return result.rowcount
