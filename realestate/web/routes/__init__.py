"""Web routes package."""

from fastapi import APIRouter

from realestate.web.routes import properties

web_router = APIRouter()

web_router.include_router(properties.router, tags=["web-properties"])
