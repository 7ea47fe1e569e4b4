"""Python client for the Sendivent notification API."""

from sendivent.client import LIVE_BASE_URL, SANDBOX_BASE_URL, Sendivent, resolve_base_url
from sendivent.config import SendiventSettings
from sendivent.exceptions import (
    ApiError,
    ApiResponseError,
    ApiTransportError,
    ConfigurationError,
    SendiventError,
)
from sendivent.request import SendRequest
from sendivent.response import SendResponse
from sendivent.schemas import Contact, Recipient

__version__ = "1.0.0"

__all__ = [
    "ApiError",
    "ApiResponseError",
    "ApiTransportError",
    "ConfigurationError",
    "Contact",
    "LIVE_BASE_URL",
    "Recipient",
    "SANDBOX_BASE_URL",
    "SendRequest",
    "SendResponse",
    "Sendivent",
    "SendiventError",
    "SendiventSettings",
    "resolve_base_url",
]
