from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class NotFoundError(AppError):
    pass


class ValidationError(AppError):
    pass


class InvalidArgumentError(ValidationError):
    pass


class PageOutOfRangeError(NotFoundError):
    """Requested page number falls outside the pages a paginator holds."""

    def __init__(
        self,
        detail: str,
        *,
        strategy: str,
        page_number: int,
        total_items_count: int,
        limit: int,
        bound: int,
    ) -> None:
        self.strategy = strategy
        self.page_number = page_number
        self.total_items_count = total_items_count
        self.limit = limit
        self.bound = bound
        super().__init__(detail)
