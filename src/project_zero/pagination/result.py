from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PagingMetadata:
    size: int
    current_page: int
    next_page: int | None
    total_items_count: int

    DEFAULT_INSTANCE: ClassVar[PagingMetadata]


PagingMetadata.DEFAULT_INSTANCE = PagingMetadata(
    size=0, current_page=0, next_page=0, total_items_count=0,
)


@dataclass(frozen=True, slots=True)
class PagedResult(Generic[T]):
    items: T
    paging_metadata: PagingMetadata
