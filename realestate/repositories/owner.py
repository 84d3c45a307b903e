"""Owner persistence operations."""

from collections.abc import Iterable

from pymongo import ReturnDocument
from pymongo.database import Database

from realestate.core import database
from realestate.models.owner import OwnerDocument
from realestate.repositories.common import object_id, utcnow


def get_owner_by_id(db: Database, owner_id: str) -> OwnerDocument | None:
    oid = object_id(owner_id)
    if oid is None:
        return None
    doc = database.owners(db).find_one({"_id": oid})
    return OwnerDocument.from_mongo(doc) if doc else None


def get_owner_by_id_owner(db: Database, id_owner: str) -> OwnerDocument | None:
    doc = database.owners(db).find_one({"idOwner": id_owner})
    return OwnerDocument.from_mongo(doc) if doc else None


def get_owners_by_id_owners(db: Database, id_owners: Iterable[str]) -> dict[str, OwnerDocument]:
    """Resolve many business ids in one query, keyed by ``id_owner``."""
    wanted = list(set(id_owners))
    if not wanted:
        return {}
    cursor = database.owners(db).find({"idOwner": {"$in": wanted}})
    owners = (OwnerDocument.from_mongo(doc) for doc in cursor)
    return {owner.id_owner: owner for owner in owners}


def create_owner(db: Database, owner: OwnerDocument) -> OwnerDocument:
    """Insert an owner, stamping both timestamps."""
    now = utcnow()
    owner = owner.model_copy(update={"created_at": now, "updated_at": now})
    collection = database.owners(db)
    result = collection.insert_one(owner.to_mongo())
    return OwnerDocument.from_mongo(collection.find_one({"_id": result.inserted_id}))


def replace_owner(db: Database, owner_id: str, owner: OwnerDocument) -> OwnerDocument | None:
    """Replace the whole document. Returns ``None`` when nothing matched."""
    oid = object_id(owner_id)
    if oid is None:
        return None
    owner = owner.model_copy(update={"updated_at": utcnow()})
    doc = database.owners(db).find_one_and_replace(
        {"_id": oid},
        owner.to_mongo(),
        return_document=ReturnDocument.AFTER,
    )
    return OwnerDocument.from_mongo(doc) if doc else None


def delete_owner(db: Database, owner_id: str) -> bool:
    oid = object_id(owner_id)
    if oid is None:
        return False
    result = database.owners(db).delete_one({"_id": oid})
    return result.deleted_count > 0
