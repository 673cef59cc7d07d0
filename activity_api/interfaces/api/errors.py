"""Exception handlers translating domain errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from activity_api.domain.errors import ActivityPermissionError, ActivityStoreError

logger = logging.getLogger(__name__)


async def permission_error_handler(request: Request, exc: ActivityPermissionError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": exc.reason})


async def store_error_handler(request: Request, exc: ActivityStoreError) -> JSONResponse:
    logger.error(
        "Activity store failure while serving %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "The activity store could not complete the request."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handlers to ``app``."""

    app.add_exception_handler(ActivityPermissionError, permission_error_handler)
    app.add_exception_handler(ActivityStoreError, store_error_handler)


__all__ = [
    "permission_error_handler",
    "register_exception_handlers",
    "store_error_handler",
]
