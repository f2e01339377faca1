import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from mangum import Mangum
from starlette.exceptions import HTTPException
from starlette.middleware.cors import CORSMiddleware

from ledgerapi import containers
from ledgerapi.config import settings
from ledgerapi.core.exception_handlers import (
    handle_base_api_exception,
    handle_http_exception,
    handle_unexpected_error,
)
from ledgerapi.core.exceptions import BaseAPIException
from ledgerapi.core.logging_middleware import LoggingMiddleware
from ledgerapi.database.connection import engine
from ledgerapi.logging_config import init_logging
from ledgerapi.models.base import Base
from ledgerapi.routers import health_router, summary_router

load_dotenv("ledgerapi/.env")
init_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    Base.metadata.create_all(bind=engine)

    scheduler = None
    if settings.SYNC_SCHEDULER_ENABLED:
        scheduler = app.container.sync.sync_scheduler()  # type: ignore[attr-defined]
        scheduler.start()

    yield

    if scheduler is not None:
        await scheduler.stop()
    app.container.sync.transaction_source().close()  # type: ignore[attr-defined]
    logger.info("Application shutdown complete")


def create_app(container: Optional[containers.Container] = None) -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.container = container or containers.Container()  # type: ignore

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(BaseAPIException, handle_base_api_exception)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(health_router.router)
    app.include_router(summary_router.router)
    return app


app = create_app()

handler = Mangum(app)
