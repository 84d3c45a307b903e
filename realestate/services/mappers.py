"""Conversions between stored documents and API schemas."""

from datetime import date, datetime, time, timezone

from realestate.models.owner import OwnerDocument
from realestate.models.property import (
    PropertyDocument,
    PropertyImageDocument,
    PropertyTraceDocument,
)
from realestate.schemas.owner import OwnerBase, OwnerResponse
from realestate.schemas.property import (
    PropertyBase,
    PropertyDetailResponse,
    PropertyImageCreate,
    PropertyImageResponse,
    PropertyResponse,
    PropertyTraceCreate,
    PropertyTraceResponse,
)


def date_to_datetime(value: date) -> datetime:
    """BSON has no date type; store calendar dates as UTC midnight."""
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def owner_to_response(owner: OwnerDocument) -> OwnerResponse:
    return OwnerResponse(
        id=owner.id,
        id_owner=owner.id_owner,
        name=owner.name,
        address=owner.address,
        photo=owner.photo,
        birthday=owner.birthday.date(),
        created_at=owner.created_at,
        updated_at=owner.updated_at,
    )


def owner_from_create(data: OwnerBase, id_owner: str) -> OwnerDocument:
    return OwnerDocument(
        id_owner=id_owner,
        name=data.name,
        address=data.address,
        photo=data.photo,
        birthday=date_to_datetime(data.birthday),
    )


def cover_image(images: list[PropertyImageDocument]) -> str | None:
    """File of the first enabled image, if any."""
    return next((image.file for image in images if image.enabled), None)


def property_to_response(
    property_doc: PropertyDocument,
    images: list[PropertyImageDocument],
    owner: OwnerDocument | None,
) -> PropertyResponse:
    return PropertyResponse(
        id=property_doc.id,
        id_property=property_doc.id_property,
        name=property_doc.name,
        address=property_doc.address,
        price=property_doc.price,
        code_internal=property_doc.code_internal,
        year=property_doc.year,
        id_owner=property_doc.id_owner,
        image=cover_image(images),
        owner=owner_to_response(owner) if owner else None,
        created_at=property_doc.created_at,
        updated_at=property_doc.updated_at,
    )


def property_to_detail_response(
    property_doc: PropertyDocument,
    images: list[PropertyImageDocument],
    traces: list[PropertyTraceDocument],
    owner: OwnerDocument | None,
) -> PropertyDetailResponse:
    summary = property_to_response(property_doc, images, owner)
    return PropertyDetailResponse(
        **summary.model_dump(),
        images=[image_to_response(image) for image in images if image.enabled],
        traces=[trace_to_response(trace) for trace in traces],
    )


def property_from_create(data: PropertyBase, id_property: str) -> PropertyDocument:
    return PropertyDocument(
        id_property=id_property,
        name=data.name,
        address=data.address,
        price=data.price,
        code_internal=data.code_internal,
        year=data.year,
        id_owner=data.id_owner,
    )


def image_to_response(image: PropertyImageDocument) -> PropertyImageResponse:
    return PropertyImageResponse(
        id=image.id,
        id_property_image=image.id_property_image,
        file=image.file,
        enabled=image.enabled,
    )


def image_from_create(
    data: PropertyImageCreate, id_property: str, id_property_image: str
) -> PropertyImageDocument:
    return PropertyImageDocument(
        id_property_image=id_property_image,
        id_property=id_property,
        file=data.file,
        enabled=data.enabled,
    )


def trace_to_response(trace: PropertyTraceDocument) -> PropertyTraceResponse:
    return PropertyTraceResponse(
        id=trace.id,
        id_property_trace=trace.id_property_trace,
        date_sale=trace.date_sale,
        name=trace.name,
        value=trace.value,
        tax=trace.tax,
    )


def trace_from_create(
    data: PropertyTraceCreate, id_property: str, id_property_trace: str
) -> PropertyTraceDocument:
    return PropertyTraceDocument(
        id_property_trace=id_property_trace,
        id_property=id_property,
        date_sale=data.date_sale,
        name=data.name,
        value=data.value,
        tax=data.tax,
    )
