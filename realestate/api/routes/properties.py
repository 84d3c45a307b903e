"""Property API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from pymongo.database import Database

from realestate.api.dependencies import require_id
from realestate.core.config import settings
from realestate.core.database import get_db
from realestate.schemas.common import ErrorResponse, PagedResponse
from realestate.schemas.property import (
    MAX_PAGE,
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
from realestate.services import property as property_service

router = APIRouter(
    prefix="/properties",
    tags=["properties"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)

NOT_FOUND = "Property not found"


@router.get("", response_model=PagedResponse[PropertyResponse])
def list_properties(
    name: str | None = Query(None, description="Case-insensitive substring of the name"),
    address: str | None = Query(None, description="Case-insensitive substring of the address"),
    min_price: float | None = Query(None, alias="minPrice", ge=0),
    max_price: float | None = Query(None, alias="maxPrice", ge=0),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=settings.MAX_PAGE_SIZE
    ),
    db: Database = Depends(get_db),
) -> PagedResponse[PropertyResponse]:
    """List properties with optional filtering and offset pagination."""
    property_filter = PropertyFilter(
        name=name,
        address=address,
        min_price=min_price,
        max_price=max_price,
        page=page,
        page_size=page_size,
    )
    return property_service.list_properties(db, property_filter)


@router.get(
    "/{property_id}",
    response_model=PropertyDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_property(property_id: str, db: Database = Depends(get_db)) -> PropertyDetailResponse:
    """Get a property with its images, trace history and owner."""
    property_id = require_id(property_id, "Property")
    property_obj = property_service.get_property(db, property_id)
    if not property_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return property_obj


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
def create_property(
    property_data: PropertyCreate,
    request: Request,
    response: Response,
    db: Database = Depends(get_db),
) -> PropertyResponse:
    """Create a new property."""
    created = property_service.create_property(db, property_data)
    response.headers["Location"] = str(request.url_for("get_property", property_id=created.id))
    return created


@router.put(
    "/{property_id}",
    response_model=PropertyResponse,
    responses={404: {"model": ErrorResponse}},
)
def update_property(
    property_id: str,
    property_data: PropertyUpdate,
    db: Database = Depends(get_db),
) -> PropertyResponse:
    """Replace a property."""
    property_id = require_id(property_id, "Property")
    updated = property_service.update_property(db, property_id, property_data)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return updated


@router.delete(
    "/{property_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
def delete_property(property_id: str, db: Database = Depends(get_db)) -> None:
    """Delete a property."""
    property_id = require_id(property_id, "Property")
    if not property_service.delete_property(db, property_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


@router.post(
    "/{property_id}/images",
    response_model=PropertyImageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
def add_property_image(
    property_id: str,
    image_data: PropertyImageCreate,
    db: Database = Depends(get_db),
) -> PropertyImageResponse:
    """Attach an image URL to a property."""
    property_id = require_id(property_id, "Property")
    image = property_service.add_property_image(db, property_id, image_data)
    if not image:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return image


@router.post(
    "/{property_id}/traces",
    response_model=PropertyTraceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
def add_property_trace(
    property_id: str,
    trace_data: PropertyTraceCreate,
    db: Database = Depends(get_db),
) -> PropertyTraceResponse:
    """Record a sale or valuation of a property."""
    property_id = require_id(property_id, "Property")
    trace = property_service.add_property_trace(db, property_id, trace_data)
    if not trace:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return trace
