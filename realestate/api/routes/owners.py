"""Owner API routes."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pymongo.database import Database

from realestate.api.dependencies import require_id
from realestate.core.database import get_db
from realestate.schemas.common import ErrorResponse
from realestate.schemas.owner import OwnerCreate, OwnerResponse, OwnerUpdate
from realestate.services import owner as owner_service

router = APIRouter(
    prefix="/owners",
    tags=["owners"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)

NOT_FOUND = "Owner not found"


@router.get(
    "/by-id-owner/{id_owner}",
    response_model=OwnerResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_owner_by_id_owner(id_owner: str, db: Database = Depends(get_db)) -> OwnerResponse:
    """Get an owner by business ID."""
    id_owner = require_id(id_owner, "Owner")
    owner = owner_service.get_owner_by_id_owner(db, id_owner)
    if not owner:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return owner


@router.get(
    "/{owner_id}",
    response_model=OwnerResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_owner(owner_id: str, db: Database = Depends(get_db)) -> OwnerResponse:
    """Get an owner by ID."""
    owner_id = require_id(owner_id, "Owner")
    owner = owner_service.get_owner(db, owner_id)
    if not owner:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return owner


@router.post("", response_model=OwnerResponse, status_code=status.HTTP_201_CREATED)
def create_owner(
    owner_data: OwnerCreate,
    request: Request,
    response: Response,
    db: Database = Depends(get_db),
) -> OwnerResponse:
    """Create a new owner."""
    created = owner_service.create_owner(db, owner_data)
    response.headers["Location"] = str(request.url_for("get_owner", owner_id=created.id))
    return created


@router.put(
    "/{owner_id}",
    response_model=OwnerResponse,
    responses={404: {"model": ErrorResponse}},
)
def update_owner(
    owner_id: str, owner_data: OwnerUpdate, db: Database = Depends(get_db)
) -> OwnerResponse:
    """Replace an owner."""
    owner_id = require_id(owner_id, "Owner")
    updated = owner_service.update_owner(db, owner_id, owner_data)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return updated


@router.delete(
    "/{owner_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
def delete_owner(owner_id: str, db: Database = Depends(get_db)) -> None:
    """Delete an owner."""
    owner_id = require_id(owner_id, "Owner")
    if not owner_service.delete_owner(db, owner_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
