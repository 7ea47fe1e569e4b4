"""Error types raised by the Sendivent client."""

from typing import Any, Optional

API_ERROR_PREFIX = "Sendivent API request failed: "


class SendiventError(Exception):
    """Base class for all errors raised by this library."""

    code = "SENDIVENT_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message}


class ConfigurationError(SendiventError):
    """
    The client was misused: bad API key, missing event, unsupported recipient.

    Always raised before any network call is attempted.
    """

    code = "CONFIGURATION_ERROR"


class ApiError(SendiventError):
    """The request was rejected by the API or could not be completed."""

    code = "API_ERROR"


class ApiResponseError(ApiError):
    """The API answered with a non-success HTTP status (or an unusable body)."""

    code = "API_RESPONSE_ERROR"

    def __init__(self, status_code: int, detail: str, body: Optional[Any] = None):
        super().__init__(f"{API_ERROR_PREFIX}{status_code} - {detail}")
        self.status_code = status_code
        self.detail = detail
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["status_code"] = self.status_code
        d["detail"] = self.detail
        return d


class ApiTransportError(ApiError):
    """The HTTP transport failed before a response was received."""

    code = "API_TRANSPORT_ERROR"

    def __init__(self, cause: BaseException):
        super().__init__(f"{API_ERROR_PREFIX}{cause}")
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["cause"] = type(self.cause).__name__
        return d
