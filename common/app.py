"""Core FastAPI application utilities shared across all services."""

import logging
from typing import Any

import fastapi
import fastapi.responses

import common.log

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class AppError(Exception):
    """Request-level failure rendered as a short plain-text response.

    ``message`` is what the client sees; the exception's own string and its
    ``__cause__`` are only ever logged.
    """

    status_code: int = 500
    message: str = 'Internal Server Error'


async def handle_app_error(
    request: fastapi.Request, exc: Exception
) -> fastapi.responses.PlainTextResponse:
    """Turn an AppError into a plain-text response without internal details."""
    assert isinstance(exc, AppError)
    if exc.status_code >= 500:
        logger.error(
            '%s %s failed: %s', request.method, request.url.path, exc, exc_info=exc
        )
    else:
        logger.info('%s %s -> %d', request.method, request.url.path, exc.status_code)
    return fastapi.responses.PlainTextResponse(exc.message, status_code=exc.status_code)


# ---------------------------------------------------------------------------
# Health router
# ---------------------------------------------------------------------------

_health_router = fastapi.APIRouter()


@_health_router.api_route('/health', methods=['GET', 'HEAD'])
async def health() -> dict[str, str]:
    """Liveness probe; does not touch the posts file."""
    return {'status': 'healthy'}


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------


def create_app(title: str, **kwargs: Any) -> fastapi.FastAPI:
    """Create a FastAPI app with health endpoint, logging and error handling.

    Additional keyword arguments are forwarded to FastAPI.__init__ (e.g. lifespan).
    """
    app = fastapi.FastAPI(title=title, **kwargs)
    common.log.configure_logging()
    app.include_router(_health_router)
    app.add_exception_handler(AppError, handle_app_error)
    return app
