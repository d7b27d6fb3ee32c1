"""
Error Classification

Typed failures raised by the upstream clients and services. Each error carries
an ``error_type`` tag that route handlers surface as ``errorType`` and an
optional upstream HTTP ``status``.
"""

from enum import Enum
from typing import Any, Optional


class PortfolioErrorType(str, Enum):
    """Tags surfaced to API callers as ``errorType``."""

    API_ERROR = "API_ERROR"                      # Upstream answered with an error
    NETWORK_ERROR = "NETWORK_ERROR"              # No response received
    TIMEOUT_ERROR = "TIMEOUT_ERROR"              # Time budget exceeded
    REQUEST_ERROR = "REQUEST_ERROR"              # Request could not be built/sent
    VALIDATION_ERROR = "VALIDATION_ERROR"        # Bad caller input
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"  # Server misconfiguration
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class PortfolioError(Exception):
    """Base class for every failure the aggregation layer reports."""

    error_type: PortfolioErrorType = PortfolioErrorType.UNKNOWN_ERROR

    def __init__(self, message: str, *, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": self.error_type.value,
            "message": self.message,
        }
        if self.status is not None:
            payload["status"] = self.status
        return payload


class PortfolioValidationError(PortfolioError):
    """Caller input failed validation. Never retried, always HTTP 400."""

    error_type = PortfolioErrorType.VALIDATION_ERROR


class MissingCredentialError(PortfolioError):
    """A required API credential is not configured.

    Raised before any network call is attempted.
    """

    error_type = PortfolioErrorType.CONFIGURATION_ERROR

    def __init__(self, credential: str, message: Optional[str] = None):
        super().__init__(message or f"{credential} not configured")
        self.credential = credential


class NetworkError(PortfolioError):
    """The upstream could not be reached."""

    error_type = PortfolioErrorType.NETWORK_ERROR


class UpstreamTimeoutError(NetworkError):
    error_type = PortfolioErrorType.TIMEOUT_ERROR


class UpstreamStatusError(PortfolioError):
    """The upstream returned a non-2xx status."""

    error_type = PortfolioErrorType.API_ERROR

    def __init__(self, message: str, *, status: int, body: Any = None):
        super().__init__(message, status=status)
        self.body = body


class UpstreamPayloadError(PortfolioError):
    """The upstream answered 2xx but the body lacks required structure."""

    error_type = PortfolioErrorType.API_ERROR


class UpstreamRequestError(PortfolioError):
    error_type = PortfolioErrorType.REQUEST_ERROR


def error_type_of(exc: BaseException) -> PortfolioErrorType:
    if isinstance(exc, PortfolioError):
        return exc.error_type
    return PortfolioErrorType.UNKNOWN_ERROR


__all__ = [
    "PortfolioErrorType",
    "PortfolioError",
    "PortfolioValidationError",
    "MissingCredentialError",
    "NetworkError",
    "UpstreamTimeoutError",
    "UpstreamStatusError",
    "UpstreamPayloadError",
    "UpstreamRequestError",
    "error_type_of",
]
