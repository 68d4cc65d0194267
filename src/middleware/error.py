from datetime import datetime

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.shared.error_handler import ServiceError
from src.shared.utils import get_logger

logger = get_logger(__name__)


def _error_body(request: Request, status_code: int, message) -> dict:
    return {
        "statusCode": status_code,
        "timestamp": datetime.now().isoformat(),
        "path": request.url.path,
        "method": request.method,
        "message": message,
    }


async def http_exception_handler(request: Request, exc: Exception):
    """Global exception handler for HTTP errors."""
    if isinstance(exc, StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(request, exc.status_code, exc.detail),
            headers=getattr(exc, "headers", None),
        )

    if isinstance(exc, ServiceError):
        logger.error(f"Service failure on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        ),
    )
