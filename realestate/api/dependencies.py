"""Request validation helpers shared by the API routes."""

from fastapi import HTTPException, status


def require_id(value: str, entity: str) -> str:
    """Reject blank path identifiers with 400."""
    if not value or not value.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{entity} ID is required",
        )
    return value.strip()
