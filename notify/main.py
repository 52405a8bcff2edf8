from contextlib import asynccontextmanager

import httpx
import structlog
from fastapi import FastAPI

from notify.api.notify import router as notify_router
from notify.config import settings
from notify.core.errors import NotifyError
from notify.middleware.error_handler import global_exception_handler, notify_exception_handler
from notify.middleware.logging import LoggingMiddleware
from notify.output.router import Dispatcher


logger = structlog.get_logger()


def configure_logging():
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            (
                structlog.dev.ConsoleRenderer()
                if settings.APP_ENV == "development"
                else structlog.processors.JSONRenderer()
            ),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("app.startup", env=settings.APP_ENV)

    # One pooled client shared by every backend for the process lifetime
    client = httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT)
    app.state.dispatcher = Dispatcher.from_settings(settings, client=client)

    yield

    await client.aclose()
    logger.info("app.shutdown")


app = FastAPI(title="Notify", lifespan=lifespan)

# Middleware
app.add_middleware(LoggingMiddleware)

# Exception handlers
app.add_exception_handler(NotifyError, notify_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Routes
app.include_router(notify_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
