"""Property listing and detail pages."""

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError

from realestate.core.config import settings
from realestate.core.database import get_db
from realestate.core.logging import get_logger
from realestate.schemas.property import MAX_PAGE, PropertyFilter
from realestate.services import property as property_service
from realestate.web.template_config import templates

logger = get_logger(__name__)

router = APIRouter()

PLACEHOLDER_IMAGE = "https://via.placeholder.com/800x600?text=No+Image"


def _parse_float(value: str | None) -> float | None:
    """Form inputs arrive as text; blank or invalid means no bound."""
    if value is None or not value.strip():
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    return parsed if parsed >= 0 else None


def _parse_int(value: str | None, default: int, lower: int, upper: int) -> int:
    try:
        parsed = int(value) if value else default
    except ValueError:
        return default
    return min(max(parsed, lower), upper)


def page_window(page: int, total_pages: int, size: int = 5) -> list[int]:
    """Page numbers to show around the current page."""
    if total_pages <= 0:
        return []
    start = max(1, min(page - size // 2, total_pages - size + 1))
    end = min(total_pages, start + size - 1)
    return list(range(start, end + 1))


@router.get("/", response_class=HTMLResponse)
def list_properties_page(
    request: Request,
    name: str | None = None,
    address: str | None = None,
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    page: str | None = None,
    page_size: str | None = Query(None, alias="pageSize"),
    db: Database = Depends(get_db),
) -> HTMLResponse:
    """Property listing with filter form and pagination."""
    property_filter = PropertyFilter(
        name=name,
        address=address,
        min_price=_parse_float(min_price),
        max_price=_parse_float(max_price),
        page=_parse_int(page, 1, 1, MAX_PAGE),
        page_size=_parse_int(page_size, settings.DEFAULT_PAGE_SIZE, 1, settings.MAX_PAGE_SIZE),
    )

    result = None
    error = None
    try:
        result = property_service.list_properties(db, property_filter)
    except PyMongoError as exc:
        logger.error("property_listing_failed", error=str(exc))
        error = "Failed to fetch properties. Please try again."

    def page_url(number: int) -> str:
        return str(request.url.include_query_params(page=number))

    return templates.TemplateResponse(
        request,
        "properties/list.html",
        {
            "filter": property_filter,
            "result": result,
            "error": error,
            "pages": page_window(result.page, result.total_pages) if result else [],
            "page_url": page_url,
        },
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE if error else status.HTTP_200_OK,
    )


@router.get("/properties/{property_id}", response_class=HTMLResponse)
def property_detail_page(
    request: Request,
    property_id: str,
    image: str | None = None,
    db: Database = Depends(get_db),
) -> HTMLResponse:
    """Property detail with image gallery, trace history and owner."""
    try:
        property_obj = property_service.get_property(db, property_id)
    except PyMongoError as exc:
        logger.error("property_detail_failed", property_id=property_id, error=str(exc))
        return templates.TemplateResponse(
            request,
            "properties/error.html",
            {"error": "Failed to fetch property details. Please try again."},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    if not property_obj:
        return templates.TemplateResponse(
            request,
            "properties/not_found.html",
            {},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    gallery = [img.file for img in property_obj.images] or [PLACEHOLDER_IMAGE]
    selected = _parse_int(image, 0, 0, len(gallery) - 1)

    def image_url(index: int) -> str:
        return str(request.url.include_query_params(image=index))

    return templates.TemplateResponse(
        request,
        "properties/detail.html",
        {
            "property": property_obj,
            "gallery": gallery,
            "selected": selected,
            "image_url": image_url,
        },
    )
