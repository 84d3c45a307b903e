"""Owner Pydantic schemas for request/response validation."""

from datetime import date, datetime

from realestate.schemas.common import ApiModel


class OwnerBase(ApiModel):
    """Base owner schema."""

    name: str
    address: str
    photo: str | None = None
    birthday: date


class OwnerCreate(OwnerBase):
    """Schema for creating an owner. ``idOwner`` is assigned by the server."""


class OwnerUpdate(OwnerBase):
    """Schema for replacing an owner. ``idOwner`` cannot be changed."""


class OwnerResponse(OwnerBase):
    """Schema for owner response."""

    id: str
    id_owner: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
