"""
================================================================================
API Client Errors
================================================================================

Closed error taxonomy raised by BaseClient.

    ApiClientError
    ├── TransportError          no response (connection failure, timeout)
    ├── HttpStatusError         non-2xx response
    │   ├── NotFoundError       404
    │   ├── AccessDeniedError   401, 403
    │   ├── BadRequestError     400
    │   ├── ServerError         500
    │   └── RequestFailedError  any other non-2xx
    └── DeserializationError    2xx body does not match the expected type

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Dict, Optional, Type


class ApiClientError(Exception):
    """Base exception for API client errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class TransportError(ApiClientError):
    """Raised when no response was received at all."""
    pass


class HttpStatusError(ApiClientError):
    """Base for errors classified from a non-2xx status code."""

    label = "Request failed"

    def __init__(self, status_code: int, server_message: str, body: Optional[str] = None) -> None:
        super().__init__(
            f"{self.label} ({status_code}): {server_message}",
            status_code=status_code,
            body=body,
        )
        self.server_message = server_message


class NotFoundError(HttpStatusError):
    label = "Resource not found"


class AccessDeniedError(HttpStatusError):
    """Unauthorized (401) and forbidden (403) collapse into one kind."""

    label = "Access denied"


class BadRequestError(HttpStatusError):
    label = "Bad request"


class ServerError(HttpStatusError):
    label = "Server error"


class RequestFailedError(HttpStatusError):
    label = "Request failed"


class DeserializationError(ApiClientError):
    """Raised when a 2xx body cannot be turned into the expected type."""

    def __init__(self, type_name: str, status_code: Optional[int] = None, body: Optional[str] = None) -> None:
        super().__init__(
            f"Response deserialization failed for type {type_name}",
            status_code=status_code,
            body=body,
        )
        self.type_name = type_name


_STATUS_ERRORS: Dict[int, Type[HttpStatusError]] = {
    400: BadRequestError,
    401: AccessDeniedError,
    403: AccessDeniedError,
    404: NotFoundError,
    500: ServerError,
}


def classify_status(status_code: int) -> Type[HttpStatusError]:
    """
    Map a non-2xx status code to exactly one error kind.

    Raises:
        ValueError: For 2xx codes, which are not failures
    """
    if 200 <= status_code < 300:
        raise ValueError(f"Status {status_code} is a success status")
    return _STATUS_ERRORS.get(status_code, RequestFailedError)


__all__ = [
    "AccessDeniedError",
    "ApiClientError",
    "BadRequestError",
    "DeserializationError",
    "HttpStatusError",
    "NotFoundError",
    "RequestFailedError",
    "ServerError",
    "TransportError",
    "classify_status",
]
