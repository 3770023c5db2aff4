from __future__ import annotations

import logging

from fastapi import APIRouter, Query

from project_zero.api.schemas.pagination import PagedResponse, PagingMetadataResponse
from project_zero.application.exceptions import PageOutOfRangeError
from project_zero.config import settings
from project_zero.services import demo_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/demo", tags=["demo"])


@router.get("/items", response_model=PagedResponse[list[str]])
async def list_items(
    page: str | None = Query(None),
    cursor: str | None = Query(None),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
) -> PagedResponse[list[str]]:
    strategy, page_number = demo_service.select_strategy(page, cursor)
    try:
        result = demo_service.list_items(
            settings.DEMO_ITEMS_COUNT, limit, strategy, page_number,
        )
    except PageOutOfRangeError as exc:
        logger.info("Rejected items %s=%s (limit=%d)", strategy.alias, exc.page_number, limit)
        raise
    return PagedResponse[list[str]](
        items=list(result.items),
        paging_metadata=PagingMetadataResponse.model_validate(
            result.paging_metadata, from_attributes=True,
        ),
    )


@router.get("/alphabet", response_model=PagedResponse[dict[str, int]])
async def list_alphabet(
    page: str | None = Query(None),
    cursor: str | None = Query(None),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
) -> PagedResponse[dict[str, int]]:
    strategy, page_number = demo_service.select_strategy(page, cursor)
    try:
        result = demo_service.list_alphabet(limit, strategy, page_number)
    except PageOutOfRangeError as exc:
        logger.info("Rejected alphabet %s=%s (limit=%d)", strategy.alias, exc.page_number, limit)
        raise
    return PagedResponse[dict[str, int]](
        items=dict(result.items),
        paging_metadata=PagingMetadataResponse.model_validate(
            result.paging_metadata, from_attributes=True,
        ),
    )
