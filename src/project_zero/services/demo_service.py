"""Demo listings served through the in-memory paginator."""
from __future__ import annotations

import string
from collections.abc import Mapping
from functools import lru_cache

from project_zero.pagination import (
    PagedResult,
    Paginator,
    PagingStrategy,
    paginate,
    paginate_mapping,
)


def select_strategy(page: str | None, cursor: str | None) -> tuple[PagingStrategy, str | None]:
    """A ``cursor`` parameter switches to zero-based paging; otherwise ``page`` is one-based."""
    if cursor is not None:
        return PagingStrategy.CURSOR, cursor
    return PagingStrategy.DEFAULT, page


def demo_items(count: int) -> list[str]:
    return [f"item-{i}" for i in range(1, count + 1)]


def alphabet() -> dict[str, int]:
    return {letter: pos for pos, letter in enumerate(string.ascii_lowercase, start=1)}


# Paginators are immutable once built, so one instance per shape is shared.
@lru_cache(maxsize=32)
def _items_paginator(count: int, limit: int) -> Paginator[tuple[str, ...]]:
    return paginate(demo_items(count), limit)


@lru_cache(maxsize=32)
def _alphabet_paginator(limit: int) -> Paginator[Mapping[str, int]]:
    return paginate_mapping(alphabet(), limit)


def list_items(
    count: int,
    limit: int,
    strategy: PagingStrategy,
    page_number: str | None,
) -> PagedResult[tuple[str, ...]]:
    return _items_paginator(count, limit).get_page(strategy, page_number)


def list_alphabet(
    limit: int,
    strategy: PagingStrategy,
    page_number: str | None,
) -> PagedResult[Mapping[str, int]]:
    return _alphabet_paginator(limit).get_page(strategy, page_number)
