"""Owner service for business logic."""

import uuid

from pymongo.database import Database

from realestate.core.logging import get_logger
from realestate.repositories import owner as owner_repository
from realestate.schemas.owner import OwnerCreate, OwnerResponse, OwnerUpdate
from realestate.services import mappers

logger = get_logger(__name__)


def get_owner(db: Database, owner_id: str) -> OwnerResponse | None:
    """Get an owner by document ID."""
    owner = owner_repository.get_owner_by_id(db, owner_id)
    return mappers.owner_to_response(owner) if owner else None


def get_owner_by_id_owner(db: Database, id_owner: str) -> OwnerResponse | None:
    """Get an owner by business ID."""
    owner = owner_repository.get_owner_by_id_owner(db, id_owner)
    return mappers.owner_to_response(owner) if owner else None


def create_owner(db: Database, owner_data: OwnerCreate) -> OwnerResponse:
    """
    Create a new owner with a freshly assigned business ID.

    Args:
        db: Database handle
        owner_data: Owner creation data

    Returns:
        Created owner

    """
    owner = mappers.owner_from_create(owner_data, id_owner=str(uuid.uuid4()))
    created = owner_repository.create_owner(db, owner)
    logger.info("owner_created", owner_id=created.id, id_owner=created.id_owner)
    return mappers.owner_to_response(created)


def update_owner(db: Database, owner_id: str, owner_data: OwnerUpdate) -> OwnerResponse | None:
    """
    Replace an owner, keeping its business ID and creation time.

    Args:
        db: Database handle
        owner_id: Owner document ID
        owner_data: Full owner data

    Returns:
        Updated owner or None if not found

    """
    existing = owner_repository.get_owner_by_id(db, owner_id)
    if not existing:
        return None

    owner = mappers.owner_from_create(owner_data, id_owner=existing.id_owner)
    owner = owner.model_copy(update={"created_at": existing.created_at})
    updated = owner_repository.replace_owner(db, owner_id, owner)
    if not updated:
        return None

    logger.info("owner_updated", owner_id=owner_id, id_owner=updated.id_owner)
    return mappers.owner_to_response(updated)


def delete_owner(db: Database, owner_id: str) -> bool:
    """Delete an owner. Returns False if not found."""
    deleted = owner_repository.delete_owner(db, owner_id)
    if deleted:
        logger.info("owner_deleted", owner_id=owner_id)
    return deleted
