"""Property Pydantic schemas for request/response validation."""

from datetime import datetime

from pydantic import Field, model_validator

from realestate.core.config import settings
from realestate.schemas.common import ApiModel
from realestate.schemas.owner import OwnerResponse


class PropertyBase(ApiModel):
    """Base property schema."""

    name: str
    address: str
    price: float = Field(ge=0)
    code_internal: str
    year: int
    id_owner: str


class PropertyCreate(PropertyBase):
    """Schema for creating a property. ``idProperty`` is assigned by the server."""


class PropertyUpdate(PropertyBase):
    """Schema for replacing a property. ``idProperty`` cannot be changed."""


class PropertyResponse(PropertyBase):
    """Schema for property in listings, with its cover image and owner."""

    id: str
    id_property: str
    image: str | None = None
    owner: OwnerResponse | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PropertyImageCreate(ApiModel):
    """Schema for attaching an image URL to a property."""

    file: str = Field(min_length=1)
    enabled: bool = True


class PropertyImageResponse(ApiModel):
    """Schema for property image response."""

    id: str
    id_property_image: str
    file: str
    enabled: bool


class PropertyTraceCreate(ApiModel):
    """Schema for recording a sale or valuation of a property."""

    date_sale: datetime
    name: str
    value: float = Field(ge=0)
    tax: float = Field(ge=0)


class PropertyTraceResponse(ApiModel):
    """Schema for property trace response."""

    id: str
    id_property_trace: str
    date_sale: datetime
    name: str
    value: float
    tax: float


class PropertyDetailResponse(PropertyResponse):
    """Schema for a single property with its enabled images and trace history."""

    images: list[PropertyImageResponse] = []
    traces: list[PropertyTraceResponse] = []


# Keeps (page - 1) * page_size inside the int64 skip BSON can encode
MAX_PAGE = (2**63 - 1) // settings.MAX_PAGE_SIZE


class PropertyFilter(ApiModel):
    """Listing filter. Text fields match case-insensitive substrings."""

    name: str | None = None
    address: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    page: int = Field(default=1, ge=1, le=MAX_PAGE)
    page_size: int = Field(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)

    @model_validator(mode="after")
    def blank_text_is_no_filter(self) -> "PropertyFilter":
        """Treat empty search boxes as absent."""
        if self.name is not None and not self.name.strip():
            self.name = None
        if self.address is not None and not self.address.strip():
            self.address = None
        return self

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size
