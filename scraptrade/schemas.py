# scraptrade/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Literal
from datetime import datetime

ListingType = Literal["buy", "sell"]

class CamelModel(BaseModel):
    # wire names are camelCase (userName, createdAt); snake_case is accepted too
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class ListingBase(CamelModel):
    type: ListingType
    category: str = Field(..., min_length=1)
    details: Optional[str] = None
    rate: float
    unit: Optional[str] = None
    city: Optional[str] = None
    user_name: Optional[str] = None

class ListingCreate(ListingBase):
    pass

class ListingOut(ListingBase):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
    id: int
    views: int
    clicks: int
    created_at: datetime
    rating: int
    stars: str

class ListingFilter(CamelModel):
    type: Optional[ListingType] = None
    category: Optional[str] = None
    city: Optional[str] = None

class ViewAck(CamelModel):
    success: bool = True

class ContactInfo(CamelModel):
    contact_email: str
    message: str
