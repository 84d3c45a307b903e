"""Base class for MongoDB documents."""

from datetime import datetime, timezone
from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MongoDocument(BaseModel):
    """A document stored in a MongoDB collection.

    Field names are snake_case in Python and camelCase in the database. The
    ObjectId ``_id`` is carried as the string ``id`` and is never written back
    as part of the document body.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = None

    @classmethod
    def from_mongo(cls, doc: dict[str, Any]) -> Self:
        """Build a document model from a raw pymongo result."""
        data = dict(doc)
        object_id = data.pop("_id", None)
        if object_id is not None:
            data["id"] = str(object_id)
        # pymongo hands back naive UTC datetimes
        for key, value in data.items():
            if isinstance(value, datetime) and value.tzinfo is None:
                data[key] = value.replace(tzinfo=timezone.utc)
        return cls.model_validate(data)

    def to_mongo(self) -> dict[str, Any]:
        """Dump to the stored shape, without ``_id``."""
        return self.model_dump(by_alias=True, exclude={"id"})
