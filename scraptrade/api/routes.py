# scraptrade/api/routes.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List
from .. import schemas, services
from ..db import get_db
from ..errors import NotFoundError, ValidationError

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/listings", response_model=List[schemas.ListingOut])
def listings(
    type: schemas.ListingType | None = Query(None),
    category: str | None = Query(None),
    city: str | None = Query(None),
    db: Session = Depends(get_db)
):
    filters = schemas.ListingFilter(type=type, category=category, city=city)
    return services.list_listings(db, filters=filters.model_dump(exclude_none=True))


@router.post("/listings", response_model=schemas.ListingOut, status_code=201)
def create_listing(payload: schemas.ListingCreate, db: Session = Depends(get_db)):
    try:
        return services.create_listing(db, payload.model_dump())
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/listings/{listing_id}", response_model=schemas.ListingOut)
def get_listing(listing_id: int, db: Session = Depends(get_db)):
    try:
        return services.get_listing(db, listing_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Listing not found")


@router.patch("/listings/{listing_id}/view", response_model=schemas.ViewAck)
def view_listing(listing_id: int, db: Session = Depends(get_db)):
    try:
        services.record_view(db, listing_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Listing not found")
    return {"success": True}


@router.patch("/listings/{listing_id}/contact", response_model=schemas.ContactInfo)
def reveal_contact(listing_id: int, db: Session = Depends(get_db)):
    try:
        return services.record_contact_reveal(db, listing_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Listing not found")
