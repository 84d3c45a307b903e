"""Property, image and trace document models."""

from datetime import datetime

from realestate.models.base import MongoDocument


class PropertyDocument(MongoDocument):
    """Listed property. ``id_owner`` is a soft reference to an owner."""

    id_property: str = ""
    name: str
    address: str
    price: float
    code_internal: str
    year: int
    id_owner: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PropertyImageDocument(MongoDocument):
    """Image reference (URL) attached to a property by ``id_property``."""

    id_property_image: str = ""
    id_property: str
    file: str
    enabled: bool = True


class PropertyTraceDocument(MongoDocument):
    """Sale or valuation record of a property."""

    id_property_trace: str = ""
    id_property: str
    date_sale: datetime
    name: str
    value: float
    tax: float
