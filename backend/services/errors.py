"""Service-layer exceptions and their HTTP error handlers."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""


class InputValidationError(ServiceException):
    """Raised when a profile or job record is missing required data or is malformed."""


class ComputationInvariantViolation(ServiceException):
    """Raised when a produced score falls outside [0, 100]."""


def _status_code(exc: ServiceException) -> int:
    if isinstance(exc, InputValidationError):
        return 400
    return 500


async def service_exception_handler(request: Request, exc: ServiceException) -> JSONResponse:
    status_code = _status_code(exc)
    if status_code >= 500:
        logger.error("Service error in %s: %s", request.url.path, exc, exc_info=True)
    else:
        logger.info("Rejected request to %s: %s", request.url.path, exc)

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__,
        },
    )
