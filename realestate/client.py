"""Typed async client for the listings REST API."""

from types import TracebackType
from typing import Any, Self

import httpx

from realestate.core.config import settings
from realestate.schemas.common import MessageResponse, PagedResponse
from realestate.schemas.owner import OwnerCreate, OwnerResponse, OwnerUpdate
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
from realestate.schemas.seed import SeedResponse


class ApiError(Exception):
    """Any non-2xx response from the API."""

    def __init__(self, status_code: int, message: str, error: Any = None) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.error = error


class RealEstateClient:
    """
    Thin wrapper over the REST surface returning the API schemas.

    Usage::

        async with RealEstateClient() as client:
            page = await client.list_properties(PropertyFilter(name="loft"))
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        base = (base_url or settings.API_BASE_URL).rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=base,
            transport=transport,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        response = await self._http.request(method, path, **kwargs)
        if response.is_success:
            return response
        try:
            body = response.json()
        except ValueError:
            body = {}
        message = body.get("message") if isinstance(body, dict) else None
        error = body.get("error") if isinstance(body, dict) else None
        raise ApiError(response.status_code, message or response.reason_phrase, error)

    @staticmethod
    def _body(model: Any) -> dict[str, Any]:
        return model.model_dump(mode="json", by_alias=True)

    # Properties

    async def list_properties(
        self, property_filter: PropertyFilter | None = None
    ) -> PagedResponse[PropertyResponse]:
        property_filter = property_filter or PropertyFilter()
        params = property_filter.model_dump(by_alias=True, exclude_none=True)
        response = await self._request("GET", "/properties", params=params)
        return PagedResponse[PropertyResponse].model_validate(response.json())

    async def get_property(self, property_id: str) -> PropertyDetailResponse:
        response = await self._request("GET", f"/properties/{property_id}")
        return PropertyDetailResponse.model_validate(response.json())

    async def create_property(self, property_data: PropertyCreate) -> PropertyResponse:
        response = await self._request("POST", "/properties", json=self._body(property_data))
        return PropertyResponse.model_validate(response.json())

    async def update_property(
        self, property_id: str, property_data: PropertyUpdate
    ) -> PropertyResponse:
        response = await self._request(
            "PUT", f"/properties/{property_id}", json=self._body(property_data)
        )
        return PropertyResponse.model_validate(response.json())

    async def delete_property(self, property_id: str) -> None:
        await self._request("DELETE", f"/properties/{property_id}")

    async def add_property_image(
        self, property_id: str, image_data: PropertyImageCreate
    ) -> PropertyImageResponse:
        response = await self._request(
            "POST", f"/properties/{property_id}/images", json=self._body(image_data)
        )
        return PropertyImageResponse.model_validate(response.json())

    async def add_property_trace(
        self, property_id: str, trace_data: PropertyTraceCreate
    ) -> PropertyTraceResponse:
        response = await self._request(
            "POST", f"/properties/{property_id}/traces", json=self._body(trace_data)
        )
        return PropertyTraceResponse.model_validate(response.json())

    # Owners

    async def get_owner(self, owner_id: str) -> OwnerResponse:
        response = await self._request("GET", f"/owners/{owner_id}")
        return OwnerResponse.model_validate(response.json())

    async def get_owner_by_id_owner(self, id_owner: str) -> OwnerResponse:
        response = await self._request("GET", f"/owners/by-id-owner/{id_owner}")
        return OwnerResponse.model_validate(response.json())

    async def create_owner(self, owner_data: OwnerCreate) -> OwnerResponse:
        response = await self._request("POST", "/owners", json=self._body(owner_data))
        return OwnerResponse.model_validate(response.json())

    async def update_owner(self, owner_id: str, owner_data: OwnerUpdate) -> OwnerResponse:
        response = await self._request("PUT", f"/owners/{owner_id}", json=self._body(owner_data))
        return OwnerResponse.model_validate(response.json())

    async def delete_owner(self, owner_id: str) -> None:
        await self._request("DELETE", f"/owners/{owner_id}")

    # Fixtures

    async def seed(self) -> SeedResponse:
        response = await self._request("POST", "/seed/seed")
        return SeedResponse.model_validate(response.json())

    async def clear(self) -> MessageResponse:
        response = await self._request("DELETE", "/seed/clear")
        return MessageResponse.model_validate(response.json())
