"""Demo fixture routes. Not meant for production deployments."""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from realestate.core.database import get_db
from realestate.schemas.common import MessageResponse
from realestate.schemas.seed import SeedResponse
from realestate.services import seed as seed_service

router = APIRouter(prefix="/seed", tags=["seed"])


@router.post("/seed", response_model=SeedResponse)
def seed_data(db: Database = Depends(get_db)) -> SeedResponse:
    """Seed the database with sample data."""
    result = seed_service.seed_data(db)
    message = "Sample data already exists" if result.skipped else "Sample data seeded successfully"
    return SeedResponse(message=message, **result.model_dump())


@router.delete("/clear", response_model=MessageResponse)
def clear_data(db: Database = Depends(get_db)) -> MessageResponse:
    """Clear all data from the database."""
    seed_service.clear_data(db)
    return MessageResponse(message="Data cleared successfully")
