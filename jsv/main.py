from __future__ import annotations

import logging

from fastapi import FastAPI

from jsv import __version__
from jsv.config import configure_logging, get_validation_settings


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    configure_logging()
    settings = get_validation_settings()
    logging.getLogger(__name__).info(
        "Starting jsv API max_reported_records=%s abort_on_malformed=%s",
        settings.max_reported_records,
        settings.abort_on_malformed,
    )

    application = FastAPI(
        title="jsv API",
        version=__version__,
    )

    from jsv.api.routers import csv_validation_router

    application.include_router(csv_validation_router)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()
