"""Shared Pydantic schemas."""

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base schema: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PagedResponse(ApiModel, Generic[T]):
    """One page of results plus paging metadata."""

    items: list[T]
    total_count: int
    page: int
    page_size: int

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0

    @computed_field(alias="hasNextPage")
    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @computed_field(alias="hasPreviousPage")
    @property
    def has_previous_page(self) -> bool:
        return self.page > 1


class MessageResponse(BaseModel):
    """Plain status message."""

    message: str


class ErrorResponse(BaseModel):
    """Body returned for every 4xx/5xx response."""

    message: str
    error: Any | None = None
