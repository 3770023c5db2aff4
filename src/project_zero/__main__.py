"""Entrypoint: python -m project_zero"""
from __future__ import annotations

import logging

import uvicorn

from project_zero.api.middleware.correlation_id import RequestIdLogFilter
from project_zero.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


def configure_logging() -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdLogFilter())
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), handlers=[handler])


def main() -> None:
    configure_logging()
    uvicorn.run(
        "project_zero.app:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )


if __name__ == "__main__":
    main()
