"""Property, image and trace persistence operations."""

import re
from collections.abc import Iterable
from typing import Any

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.database import Database

from realestate.core import database
from realestate.models.property import (
    PropertyDocument,
    PropertyImageDocument,
    PropertyTraceDocument,
)
from realestate.repositories.common import object_id, utcnow
from realestate.schemas.property import PropertyFilter


def build_property_query(property_filter: PropertyFilter) -> dict[str, Any]:
    """
    Translate a listing filter into a MongoDB query.

    Name and address match as case-insensitive substrings of the literal text.
    Price bounds are inclusive.
    """
    query: dict[str, Any] = {}
    if property_filter.name:
        query["name"] = {"$regex": re.escape(property_filter.name), "$options": "i"}
    if property_filter.address:
        query["address"] = {"$regex": re.escape(property_filter.address), "$options": "i"}

    price: dict[str, float] = {}
    if property_filter.min_price is not None:
        price["$gte"] = property_filter.min_price
    if property_filter.max_price is not None:
        price["$lte"] = property_filter.max_price
    if price:
        query["price"] = price
    return query


def list_properties(
    db: Database, property_filter: PropertyFilter
) -> tuple[list[PropertyDocument], int]:
    """
    Get one page of properties matching the filter.

    Args:
        db: Database handle
        property_filter: Text/price filter and page selection

    Returns:
        The page items, ordered by ``_id``, and the total match count

    """
    collection = database.properties(db)
    query = build_property_query(property_filter)
    total = collection.count_documents(query)
    cursor = (
        collection.find(query)
        .sort("_id", ASCENDING)
        .skip(property_filter.skip)
        .limit(property_filter.page_size)
    )
    return [PropertyDocument.from_mongo(doc) for doc in cursor], total


def get_property_by_id(db: Database, property_id: str) -> PropertyDocument | None:
    oid = object_id(property_id)
    if oid is None:
        return None
    doc = database.properties(db).find_one({"_id": oid})
    return PropertyDocument.from_mongo(doc) if doc else None


def create_property(db: Database, property_doc: PropertyDocument) -> PropertyDocument:
    """Insert a property, stamping both timestamps."""
    now = utcnow()
    property_doc = property_doc.model_copy(update={"created_at": now, "updated_at": now})
    collection = database.properties(db)
    result = collection.insert_one(property_doc.to_mongo())
    return PropertyDocument.from_mongo(collection.find_one({"_id": result.inserted_id}))


def replace_property(
    db: Database, property_id: str, property_doc: PropertyDocument
) -> PropertyDocument | None:
    """Replace the whole document. Returns ``None`` when nothing matched."""
    oid = object_id(property_id)
    if oid is None:
        return None
    property_doc = property_doc.model_copy(update={"updated_at": utcnow()})
    doc = database.properties(db).find_one_and_replace(
        {"_id": oid},
        property_doc.to_mongo(),
        return_document=ReturnDocument.AFTER,
    )
    return PropertyDocument.from_mongo(doc) if doc else None


def delete_property(db: Database, property_id: str) -> bool:
    """Hard delete. Images and traces of the property are left in place."""
    oid = object_id(property_id)
    if oid is None:
        return False
    result = database.properties(db).delete_one({"_id": oid})
    return result.deleted_count > 0


def get_property_images(db: Database, id_property: str) -> list[PropertyImageDocument]:
    """Enabled images of a property in insertion order."""
    cursor = (
        database.property_images(db)
        .find({"idProperty": id_property, "enabled": True})
        .sort("_id", ASCENDING)
    )
    return [PropertyImageDocument.from_mongo(doc) for doc in cursor]


def get_cover_images(
    db: Database, id_properties: Iterable[str]
) -> dict[str, PropertyImageDocument]:
    """First enabled image of each given property, keyed by ``id_property``."""
    wanted = list(set(id_properties))
    if not wanted:
        return {}
    cursor = (
        database.property_images(db)
        .find({"idProperty": {"$in": wanted}, "enabled": True})
        .sort("_id", ASCENDING)
    )
    covers: dict[str, PropertyImageDocument] = {}
    for doc in cursor:
        image = PropertyImageDocument.from_mongo(doc)
        covers.setdefault(image.id_property, image)
    return covers


def get_property_traces(db: Database, id_property: str) -> list[PropertyTraceDocument]:
    """Trace history of a property, newest sale first."""
    cursor = (
        database.property_traces(db)
        .find({"idProperty": id_property})
        .sort([("dateSale", DESCENDING), ("_id", DESCENDING)])
    )
    return [PropertyTraceDocument.from_mongo(doc) for doc in cursor]


def add_property_image(db: Database, image: PropertyImageDocument) -> PropertyImageDocument:
    collection = database.property_images(db)
    result = collection.insert_one(image.to_mongo())
    return PropertyImageDocument.from_mongo(collection.find_one({"_id": result.inserted_id}))


def add_property_trace(db: Database, trace: PropertyTraceDocument) -> PropertyTraceDocument:
    collection = database.property_traces(db)
    result = collection.insert_one(trace.to_mongo())
    return PropertyTraceDocument.from_mongo(collection.find_one({"_id": result.inserted_id}))
