"""Envelope helpers for the ``{success, data | error, errorType}`` routes."""

from typing import Any, Optional

from fastapi.responses import JSONResponse

from ..errors import PortfolioValidationError, error_type_of
from ..types import ApiEnvelope


def success_response(data: Any) -> JSONResponse:
    return JSONResponse(ApiEnvelope(success=True, data=data).to_wire())


def error_response(exc: Exception, status_code: Optional[int] = None) -> JSONResponse:
    """Render ``exc`` as a failure envelope.

    Validation failures map to 400, everything else to 500 unless
    ``status_code`` is given.
    """

    if status_code is None:
        status_code = 400 if isinstance(exc, PortfolioValidationError) else 500
    message = getattr(exc, "message", None) or str(exc) or "Internal server error"
    envelope = ApiEnvelope(success=False, error=message, errorType=error_type_of(exc).value)
    return JSONResponse(envelope.to_wire(), status_code=status_code)


def bad_request(message: str, **extra: Any) -> JSONResponse:
    return JSONResponse({**extra, "error": message}, status_code=400)
