from fastapi import HTTPException, Request

from notify.output.router import Dispatcher


async def get_dispatcher(request: Request) -> Dispatcher:
    """Return the dispatcher built during app startup."""
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise HTTPException(status_code=503, detail="Dispatcher not initialized")
    return dispatcher
