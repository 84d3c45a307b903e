"""Property service for business logic."""

import uuid

from pymongo.database import Database

from realestate.core.logging import get_logger
from realestate.repositories import owner as owner_repository
from realestate.repositories import property as property_repository
from realestate.schemas.common import PagedResponse
from realestate.schemas.property import (
    PropertyCreate,
    PropertyDetailResponse,
    PropertyFilter,
    PropertyImageCreate,
    PropertyImageResponse,
    PropertyResponse,
    PropertyTraceCreate,
    PropertyTraceResponse,
    PropertyUpdate,
)
from realestate.services import mappers

logger = get_logger(__name__)


def list_properties(
    db: Database, property_filter: PropertyFilter
) -> PagedResponse[PropertyResponse]:
    """
    Get one page of properties with their cover image and owner.

    Args:
        db: Database handle
        property_filter: Text/price filter and page selection

    Returns:
        Paged properties; ``total_count`` counts every match, not just this page

    """
    items, total = property_repository.list_properties(db, property_filter)

    covers = property_repository.get_cover_images(db, (p.id_property for p in items))
    owners = owner_repository.get_owners_by_id_owners(db, (p.id_owner for p in items))

    responses = []
    for property_doc in items:
        cover = covers.get(property_doc.id_property)
        responses.append(
            mappers.property_to_response(
                property_doc,
                [cover] if cover else [],
                owners.get(property_doc.id_owner),
            )
        )

    return PagedResponse[PropertyResponse](
        items=responses,
        total_count=total,
        page=property_filter.page,
        page_size=property_filter.page_size,
    )


def get_property(db: Database, property_id: str) -> PropertyDetailResponse | None:
    """
    Get a property with its enabled images, trace history and owner.

    Args:
        db: Database handle
        property_id: Property document ID

    Returns:
        Property detail or None if not found

    """
    property_doc = property_repository.get_property_by_id(db, property_id)
    if not property_doc:
        return None

    images = property_repository.get_property_images(db, property_doc.id_property)
    traces = property_repository.get_property_traces(db, property_doc.id_property)
    owner = owner_repository.get_owner_by_id_owner(db, property_doc.id_owner)
    return mappers.property_to_detail_response(property_doc, images, traces, owner)


def create_property(db: Database, property_data: PropertyCreate) -> PropertyResponse:
    """Create a new property with a freshly assigned business ID."""
    property_doc = mappers.property_from_create(property_data, id_property=str(uuid.uuid4()))
    created = property_repository.create_property(db, property_doc)
    logger.info("property_created", property_id=created.id, id_property=created.id_property)

    owner = owner_repository.get_owner_by_id_owner(db, created.id_owner)
    return mappers.property_to_response(created, [], owner)


def update_property(
    db: Database, property_id: str, property_data: PropertyUpdate
) -> PropertyResponse | None:
    """
    Replace a property, keeping its business ID and creation time.

    There is no version check: concurrent updates overwrite each other.

    Args:
        db: Database handle
        property_id: Property document ID
        property_data: Full property data

    Returns:
        Updated property or None if not found

    """
    existing = property_repository.get_property_by_id(db, property_id)
    if not existing:
        return None

    property_doc = mappers.property_from_create(property_data, id_property=existing.id_property)
    property_doc = property_doc.model_copy(update={"created_at": existing.created_at})
    updated = property_repository.replace_property(db, property_id, property_doc)
    if not updated:
        return None

    logger.info("property_updated", property_id=property_id, id_property=updated.id_property)
    images = property_repository.get_property_images(db, updated.id_property)
    owner = owner_repository.get_owner_by_id_owner(db, updated.id_owner)
    return mappers.property_to_response(updated, images, owner)


def delete_property(db: Database, property_id: str) -> bool:
    """Delete a property. Returns False if not found."""
    deleted = property_repository.delete_property(db, property_id)
    if deleted:
        logger.info("property_deleted", property_id=property_id)
    return deleted


def add_property_image(
    db: Database, property_id: str, image_data: PropertyImageCreate
) -> PropertyImageResponse | None:
    """Attach an image URL to a property. Returns None if the property is missing."""
    property_doc = property_repository.get_property_by_id(db, property_id)
    if not property_doc:
        return None

    image = mappers.image_from_create(
        image_data,
        id_property=property_doc.id_property,
        id_property_image=str(uuid.uuid4()),
    )
    created = property_repository.add_property_image(db, image)
    logger.info(
        "property_image_added",
        property_id=property_id,
        id_property_image=created.id_property_image,
    )
    return mappers.image_to_response(created)


def add_property_trace(
    db: Database, property_id: str, trace_data: PropertyTraceCreate
) -> PropertyTraceResponse | None:
    """Record a sale or valuation. Returns None if the property is missing."""
    property_doc = property_repository.get_property_by_id(db, property_id)
    if not property_doc:
        return None

    trace = mappers.trace_from_create(
        trace_data,
        id_property=property_doc.id_property,
        id_property_trace=str(uuid.uuid4()),
    )
    created = property_repository.add_property_trace(db, trace)
    logger.info(
        "property_trace_added",
        property_id=property_id,
        id_property_trace=created.id_property_trace,
    )
    return mappers.trace_to_response(created)
