from __future__ import annotations

import sys
from enum import Enum


class PagingStrategy(Enum):
    """How a caller-visible page number maps onto the stored pages."""

    DEFAULT = ("one-based start counter", 1, "page")
    CURSOR = ("zero-based start counter", 0, "cursor")

    def __init__(self, description: str, start_counter: int, alias: str) -> None:
        self.description = description
        self.start_counter = start_counter
        self.alias = alias

    def max_page_number(self, page_count: int) -> int:
        return page_count - 1 + self.start_counter

    def page_index(self, page_number: int) -> int:
        return page_number - self.start_counter

    def resolve_page_number(self, raw: object) -> int:
        """Parse a page number leniently; anything but a string of digits gives start_counter."""
        if not isinstance(raw, str) or not raw.isdecimal():
            return self.start_counter
        try:
            return int(raw)
        except ValueError:
            # Too many digits to convert; no paginator holds that many pages.
            return sys.maxsize
