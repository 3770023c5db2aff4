"""In-memory pagination: partition a finite collection, then fetch pages by number."""
from project_zero.pagination.paginator import Paginator, paginate, paginate_mapping
from project_zero.pagination.result import PagedResult, PagingMetadata
from project_zero.pagination.strategy import PagingStrategy

__all__ = [
    "PagedResult",
    "Paginator",
    "PagingMetadata",
    "PagingStrategy",
    "paginate",
    "paginate_mapping",
]
