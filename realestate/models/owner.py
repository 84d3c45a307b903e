"""Owner document model."""

from datetime import datetime

from realestate.models.base import MongoDocument


class OwnerDocument(MongoDocument):
    """Owner of one or more properties, referenced by ``id_owner``."""

    id_owner: str = ""
    name: str
    address: str
    photo: str | None = None
    birthday: datetime
    created_at: datetime | None = None
    updated_at: datetime | None = None
