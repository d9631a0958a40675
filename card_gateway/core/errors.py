"""
Domain-specific exceptions for the Card SOAP Gateway.

These exceptions are raised by the service and SOAP layers and are mapped
to HTTP status codes in the API layer.
"""

from typing import Any


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(GatewayError):
    """
    Raised when a required request parameter is missing or empty.

    Always raised before any backend call is attempted.

    HTTP Status: 400 Bad Request
    """

    pass


class BackendError(GatewayError):
    """
    Raised when the SOAP backend cannot be reached or answers with a
    non-success status.

    Examples:
    - Connection refused / DNS failure
    - Timeout
    - HTTP 500 carrying a SOAP fault

    HTTP Status: 400 Bad Request
    """

    pass


class MalformedResponseError(GatewayError):
    """
    Raised when the backend answers with a success status but the body
    is not well-formed XML.

    HTTP Status: 502 Bad Gateway
    """

    pass


ERROR_STATUS_MAP = {
    ValidationError: 400,
    BackendError: 400,
    MalformedResponseError: 502,
}

# Errors whose details come from the backend and may be hidden from clients.
UPSTREAM_ERRORS = (BackendError, MalformedResponseError)


def get_status_code(error: Exception) -> int:
    """
    Get the HTTP status code for a given exception.

    Args:
        error: The exception instance

    Returns:
        HTTP status code (defaults to 500 for unknown errors)
    """
    return ERROR_STATUS_MAP.get(type(error), 500)
