import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

from notify.core.errors import AggregatedError, BackendStatusError, InvalidMessageFormat, NotifyError

logger = structlog.get_logger()


def _failure(err: NotifyError) -> dict:
    return {
        "backend": err.backend,
        "destination": err.destination,
        "kind": err.kind,
        "detail": err.message,
        "status_code": err.status_code if isinstance(err, BackendStatusError) else None,
    }


async def notify_exception_handler(request: Request, exc: NotifyError) -> JSONResponse:
    if isinstance(exc, InvalidMessageFormat):
        return JSONResponse(status_code=422, content={"error": exc.message, "failures": []})

    failures = list(exc.errors) if isinstance(exc, AggregatedError) else [exc]
    logger.warning("notify.request_failed", path=request.url.path, failed=len(failures))
    return JSONResponse(
        status_code=502,
        content={
            "error": "One or more backends did not receive the message",
            "failures": [_failure(e) for e in failures],
        },
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc)},
    )
