"""Shared schema base: camelCase JSON on the wire, snake_case in Python."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ItemT = TypeVar("ItemT")


class CamelModel(BaseModel):
    """Base for API schemas. Accepts both camelCase and field names on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PagedResponse(CamelModel, Generic[ItemT]):
    """One page of results (items, totalCount, page, pageSize)."""

    items: list[ItemT] = Field(default_factory=list)
    total_count: int = 0
    page: int = 1
    page_size: int = 20


class ErrorResponse(CamelModel):
    """Uniform error body produced by the exception handlers."""

    success: bool = False
    error: str
    code: str | None = None
    details: dict = Field(default_factory=dict)
