from __future__ import annotations

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from project_zero.services import greeting_service

router = APIRouter(prefix="/api", tags=["greeting"])


@router.get("/greeting", response_class=PlainTextResponse)
async def greeting(name: str = Query(...)) -> str:
    return greeting_service.greet(name)
