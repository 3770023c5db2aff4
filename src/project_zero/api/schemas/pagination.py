from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PagingMetadataResponse(BaseModel):
    size: int
    current_page: int
    next_page: int | None = None
    total_items_count: int

    model_config = {"from_attributes": True}


class PagedResponse(BaseModel, Generic[T]):
    items: T
    paging_metadata: PagingMetadataResponse
