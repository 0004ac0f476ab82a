"""Validation error handling for the item service.

Request validation failures are reported as 400 with the standard
``{"success": false, "error": ...}`` body instead of FastAPI's default 422.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from item_service.core.logging import logger


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert a RequestValidationError into a 400 response."""
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]

    logger.warning(
        "request_validation_failed",
        method=request.method,
        path=request.url.path,
        errors=details,
    )

    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Validation failed", "details": details},
    )
