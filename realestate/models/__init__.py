"""Database document models."""

from realestate.models.owner import OwnerDocument
from realestate.models.property import (
    PropertyDocument,
    PropertyImageDocument,
    PropertyTraceDocument,
)

__all__ = [
    "OwnerDocument",
    "PropertyDocument",
    "PropertyImageDocument",
    "PropertyTraceDocument",
]
