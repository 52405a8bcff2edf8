import structlog
from fastapi import APIRouter, Depends

from notify.api.deps import get_dispatcher
from notify.output.router import Dispatcher
from notify.schemas.notify import BackendOut, FailureResponse, NotifyRequest, NotifyResponse

router = APIRouter(prefix="/api/notify", tags=["notify"])
logger = structlog.get_logger()


@router.post(
    "",
    response_model=NotifyResponse,
    responses={502: {"model": FailureResponse}},
)
async def send_notification(
    req: NotifyRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    """Fan the message out to every configured backend.

    Failures surface as AggregatedError and are turned into a 502 by the
    global exception handler.
    """
    await dispatcher.send(req.message)
    kind = "text" if isinstance(req.message, (str, list)) else "raw"
    logger.info("api.notify_sent", kind=kind, backends=len(dispatcher.backends))
    return NotifyResponse(backends=len(dispatcher.backends))


@router.get("/backends", response_model=list[BackendOut])
async def list_backends(dispatcher: Dispatcher = Depends(get_dispatcher)):
    """List configured backends (kind and destination only, no credentials)."""
    return [BackendOut(**b.describe()) for b in dispatcher.backends]
