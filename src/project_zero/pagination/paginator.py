"""Eager in-memory pagination over sequences and insertion-ordered mappings.

Pages are built once at construction and held as tuples or read-only mapping
proxies, so a paginator can be shared between callers without copying.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Generic, TypeVar

from project_zero.application.exceptions import InvalidArgumentError, PageOutOfRangeError
from project_zero.pagination.result import PagedResult, PagingMetadata
from project_zero.pagination.strategy import PagingStrategy

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

_OUT_OF_RANGE = (
    "[pagingStrategy = {name}] - Requested {alias} value: {value} is out of range!... "
    "(When totalItemsCount = {total} and requested limit = {limit}, "
    "then {which} allowable {alias} value = {bound})"
)


class Paginator(Generic[T]):
    __slots__ = ("_limit", "_pages", "_total_items_count", "_default_empty_items")

    def __init__(
        self,
        limit: int,
        pages: tuple[T, ...],
        total_items_count: int,
        default_empty_items: T,
    ) -> None:
        self._limit = limit
        self._pages = pages
        self._total_items_count = total_items_count
        self._default_empty_items = default_empty_items

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def pages(self) -> tuple[T, ...]:
        return self._pages

    @property
    def total_items_count(self) -> int:
        return self._total_items_count

    @property
    def default_empty_items(self) -> T:
        return self._default_empty_items

    def get_page(
        self,
        strategy: PagingStrategy,
        page_number: int | str | None,
    ) -> PagedResult[T]:
        """Return the page at ``page_number`` under ``strategy``.

        Anything other than an int or a plain run of digits, bools included,
        falls back to the strategy's start counter. Raises PageOutOfRangeError
        when the number is outside the strategy's bounds.
        """
        if isinstance(page_number, bool) or not isinstance(page_number, int):
            page_number = strategy.resolve_page_number(page_number)

        if not self._pages:
            return PagedResult(self._default_empty_items, PagingMetadata.DEFAULT_INSTANCE)

        max_page_number = strategy.max_page_number(len(self._pages))
        page_index = strategy.page_index(page_number)

        if page_number < strategy.start_counter:
            raise self._out_of_range(strategy, page_number, "min", strategy.start_counter)
        if page_number > max_page_number:
            raise self._out_of_range(strategy, page_number, "max", max_page_number)

        next_page = page_number + 1
        page = self._pages[page_index]
        return PagedResult(
            page,
            PagingMetadata(
                size=len(page),  # type: ignore[arg-type]
                current_page=page_number,
                next_page=next_page if next_page <= max_page_number else None,
                total_items_count=self._total_items_count,
            ),
        )

    def _out_of_range(
        self,
        strategy: PagingStrategy,
        page_number: int,
        which: str,
        bound: int,
    ) -> PageOutOfRangeError:
        detail = _OUT_OF_RANGE.format(
            name=strategy.name,
            alias=strategy.alias,
            value=page_number,
            total=self._total_items_count,
            limit=self._limit,
            which=which,
            bound=bound,
        )
        return PageOutOfRangeError(
            detail,
            strategy=strategy.name,
            page_number=page_number,
            total_items_count=self._total_items_count,
            limit=self._limit,
            bound=bound,
        )


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidArgumentError(f"Page size must be a positive integer, not: {size!r}")


def _chunks(items: Sequence[V], size: int) -> Iterable[Sequence[V]]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


def paginate(items: Iterable[V], size: int) -> Paginator[tuple[V, ...]]:
    """Split ``items`` into consecutive pages of at most ``size`` items."""
    _check_size(size)
    snapshot = tuple(items)
    pages = tuple(tuple(chunk) for chunk in _chunks(snapshot, size))
    logger.debug("Paginated %d items into %d pages (limit=%d)", len(snapshot), len(pages), size)
    return Paginator(size, pages, len(snapshot), ())


def paginate_mapping(items: Mapping[K, V], size: int) -> Paginator[Mapping[K, V]]:
    """Split the entries of ``items`` into read-only mappings of at most ``size`` entries.

    The mapping's iteration order is kept; each page is its own mapping.
    """
    _check_size(size)
    entries = tuple(dict(items).items())
    pages = tuple(MappingProxyType(dict(chunk)) for chunk in _chunks(entries, size))
    logger.debug("Paginated %d entries into %d pages (limit=%d)", len(entries), len(pages), size)
    return Paginator(size, pages, len(entries), MappingProxyType({}))
