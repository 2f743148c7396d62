# scraptrade/services.py
"""Listing Service: the operations behind the HTTP routes.

Each function takes the request's SQLAlchemy session first, like the
repository helpers in `crud`, and raises the errors from `scraptrade.errors`.
"""
import os
from typing import Dict, Iterable, List, Optional
from sqlalchemy.orm import Session
from . import crud
from .errors import NotFoundError, ValidationError
from .models import LISTING_TYPES
from .utils import logger

REQUIRED_FIELDS = ("type", "category", "rate")
OPTIONAL_FIELDS = ("details", "unit", "city", "user_name")

DEFAULT_CONTACT_EMAIL = "contact@scraptrade.com"
DEFAULT_CONTACT_MESSAGE = "Log in to see the poster's actual contact details."


def _normalize(payload: Dict) -> Dict:
    data = dict(payload)
    if "userName" in data and "user_name" not in data:
        data["user_name"] = data.pop("userName")
    return data


def create_listing(db: Session, payload: Dict):
    data = _normalize(payload)
    missing = [f for f in REQUIRED_FIELDS if data.get(f) is None or data.get(f) == ""]
    if missing:
        raise ValidationError(f"missing required fields: {', '.join(missing)}")
    if data["type"] not in LISTING_TYPES:
        raise ValidationError(f"type must be one of {', '.join(LISTING_TYPES)}")
    try:
        rate = float(data["rate"])
    except (TypeError, ValueError):
        raise ValidationError(f"rate is not a number: {data['rate']!r}")

    # counters and timestamps are never taken from the caller
    values = {f: data.get(f) for f in OPTIONAL_FIELDS}
    values.update(type=data["type"], category=data["category"], rate=rate, views=0, clicks=0)
    obj = crud.create_listing(db, values)
    logger.info("Created %s listing %s (%s, %s)", obj.type, obj.id, obj.category, obj.city)
    return obj


def get_listing(db: Session, listing_id: int):
    obj = crud.get_listing(db, listing_id)
    if obj is None:
        raise NotFoundError(listing_id)
    return obj


def list_listings(db: Session, filters: Optional[Dict] = None):
    """Listings matching `type`/`category` exactly and `city` as a
    case-insensitive substring, newest first."""
    return crud.list_listings(db, filters=filters or {})


def _field(listing, name):
    if isinstance(listing, dict):
        return listing.get(name)
    return getattr(listing, name, None)


def _matches(value, needle):
    if not needle:
        return True
    return value is not None and needle.lower() in str(value).lower()


def apply_client_filter(listings: Iterable, category: Optional[str] = None, city: Optional[str] = None) -> List:
    """Re-filter already fetched listings without another query.

    Both criteria are case-insensitive substrings and must both match; an
    empty criterion matches everything. Input order is kept.
    """
    return [
        listing for listing in listings
        if _matches(_field(listing, "category"), category) and _matches(_field(listing, "city"), city)
    ]


def record_view(db: Session, listing_id: int) -> None:
    if not crud.increment_counter(db, listing_id, "views"):
        raise NotFoundError(listing_id)


def contact_payload() -> Dict[str, str]:
    return {
        "contact_email": os.getenv("CONTACT_EMAIL", DEFAULT_CONTACT_EMAIL),
        "message": os.getenv("CONTACT_MESSAGE", DEFAULT_CONTACT_MESSAGE),
    }


def record_contact_reveal(db: Session, listing_id: int) -> Dict[str, str]:
    if not crud.increment_counter(db, listing_id, "clicks"):
        raise NotFoundError(listing_id)
    logger.info("Contact revealed for listing %s", listing_id)
    return contact_payload()
