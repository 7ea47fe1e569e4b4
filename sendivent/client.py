"""Fluent client for sending notifications through the Sendivent API."""

import asyncio
import json
import logging
from typing import Any, Awaitable, Optional

import httpx

from sendivent.config import DEFAULT_USER_AGENT, SendiventSettings
from sendivent.exceptions import (
    ApiResponseError,
    ApiTransportError,
    ConfigurationError,
    SendiventError,
)
from sendivent.http import api_http_client
from sendivent.request import SendRequest
from sendivent.response import SendResponse
from sendivent.schemas import Recipient, serialize_recipient

logger = logging.getLogger(__name__)

LIVE_BASE_URL = "https://api.sendivent.com"
SANDBOX_BASE_URL = "https://api-sandbox.sendivent.com"

_KEY_PREFIXES = ("test_", "live_")


def resolve_base_url(api_key: str) -> str:
    """
    Map an API key to the API base URL.

    ``live_`` keys talk to production, ``test_`` keys to the sandbox.
    """
    if not isinstance(api_key, str) or not api_key.startswith(_KEY_PREFIXES):
        raise ConfigurationError("API key must start with 'test_' or 'live_'")
    if api_key.startswith("live_"):
        return LIVE_BASE_URL
    return SANDBOX_BASE_URL


class Sendivent:
    """
    Builder for a single notification event.

    Setters store their argument and return the builder, so calls can be
    chained or made one at a time. Nothing is validated until the request is
    built; ``send()`` then issues exactly one POST.

    One instance can be kept per event type and sent repeatedly. Each send
    snapshots the current state, so changing the builder afterwards does not
    affect requests already in flight.
    """

    def __init__(
        self,
        api_key: str,
        event: Optional[str] = None,
        *,
        timeout: float = 15,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self._base_url = resolve_base_url(api_key)
        self._api_key = api_key
        self._timeout = timeout
        self._client = client
        self._transport = transport
        self._user_agent = user_agent

        self._event: Optional[str] = event
        self._to: Optional[Recipient] = None
        self._payload: dict[str, Any] = {}
        self._channel: Optional[str] = None
        self._language: Optional[str] = None
        self._overrides: dict[str, Any] = {}
        self._idempotency_key: Optional[str] = None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[SendiventSettings] = None,
        event: Optional[str] = None,
        **kwargs,
    ) -> "Sendivent":
        """Create a client from SENDIVENT_* environment settings."""
        settings = settings or SendiventSettings()
        if not settings.api_key:
            raise ConfigurationError("SENDIVENT_API_KEY is not set")
        kwargs.setdefault("timeout", settings.timeout)
        kwargs.setdefault("user_agent", settings.user_agent)
        return cls(settings.api_key, event, **kwargs)

    def __repr__(self) -> str:
        return f"<Sendivent env={'live' if self.is_live else 'sandbox'} event={self._event!r}>"

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_live(self) -> bool:
        return self._base_url == LIVE_BASE_URL

    # --- Accumulators ---

    def event(self, event: str) -> "Sendivent":
        self._event = event
        return self

    def to(self, recipient: Recipient) -> "Sendivent":
        """Set the recipient(s). Omit entirely to broadcast to the event's listeners."""
        self._to = recipient
        return self

    def payload(self, data: dict[str, Any]) -> "Sendivent":
        self._payload = data
        return self

    def channel(self, channel: str) -> "Sendivent":
        """Force a delivery channel (email, sms, slack, ...)."""
        self._channel = channel
        return self

    def language(self, language: str) -> "Sendivent":
        self._language = language
        return self

    def overrides(self, overrides: dict[str, Any]) -> "Sendivent":
        """Merge template overrides into the ones already set. Later keys win."""
        self._overrides = {**self._overrides, **overrides}
        return self

    def idempotency_key(self, key: str) -> "Sendivent":
        self._idempotency_key = key
        return self

    # --- Finalize ---

    def build_request(self) -> SendRequest:
        """
        Build the HTTP request from the current state without sending it.

        Raises:
            ConfigurationError: no event was set, the recipient has an
                unsupported type, or the body is not JSON serializable.
        """
        if not self._event:
            raise ConfigurationError("Event name must be set using event() method")

        endpoint = f"send/{self._event}"
        if self._channel:
            endpoint += f"/{self._channel}"

        body: dict[str, Any] = {"payload": self._payload}
        if self._to is not None:
            body["to"] = serialize_recipient(self._to)
        if self._language:
            body["language"] = self._language
        if self._overrides:
            body["overrides"] = self._overrides

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "User-Agent": self._user_agent,
        }
        if self._idempotency_key:
            headers["X-Idempotency-Key"] = self._idempotency_key

        try:
            encoded = json.dumps(body)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Request body is not JSON serializable: {e}") from e

        return SendRequest(
            method="POST",
            url=f"{self._base_url}/{endpoint}",
            headers=headers,
            body=encoded,
        )

    def send(self) -> Awaitable[SendResponse]:
        """
        Send the notification and normalize the response.

        The request is built when send() is called, before anything is
        awaited, so later changes to the builder do not affect it.

        A 2xx response is always returned as a SendResponse, even when it
        reports ``success: false``; check ``has_error()``.

        Raises:
            ConfigurationError: the builder is incomplete (nothing is sent).
            ApiResponseError: the API answered with a non-2xx status.
            ApiTransportError: the request could not be completed.
        """
        request = self.build_request()
        return self._send_request(request)

    def dispatch(self) -> "asyncio.Task[Optional[SendResponse]]":
        """
        Send in the background without awaiting the result.

        The request is built immediately, so configuration errors still raise
        here and later changes to the builder do not affect it. API failures
        are logged and the task resolves to None. Must be called from a
        running event loop.
        """
        request = self.build_request()
        return asyncio.get_running_loop().create_task(self._send_logged(request))

    async def _send_logged(self, request: SendRequest) -> Optional[SendResponse]:
        try:
            return await self._send_request(request)
        except ApiTransportError:
            # Logged with traceback in _send_request
            return None
        except SendiventError as e:
            logger.error("Background send to %s failed: %s", request.url, e)
            return None

    async def _send_request(self, request: SendRequest) -> SendResponse:
        logger.debug(
            "Sending %s %s idempotency_key=%s",
            request.method,
            request.url,
            request.headers.get("X-Idempotency-Key"),
        )

        try:
            if self._client is not None:
                response = await _post(self._client, request)
            else:
                async with api_http_client(
                    timeout=self._timeout, transport=self._transport
                ) as client:
                    response = await _post(client, request)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            logger.error("Sendivent request to %s failed: %s", request.url, e, exc_info=True)
            raise ApiTransportError(e) from e

        return _handle_response(request, response)


async def _post(client: httpx.AsyncClient, request: SendRequest) -> httpx.Response:
    return await client.request(
        method=request.method,
        url=request.url,
        headers=request.headers,
        content=request.body,
    )


def _handle_response(request: SendRequest, response: httpx.Response) -> SendResponse:
    try:
        data = response.json()
    except ValueError:
        data = None

    if not response.is_success:
        detail = "Unknown error"
        if isinstance(data, dict):
            detail = data.get("error") or data.get("message") or detail
        logger.warning(
            "Sendivent API returned status %s for %s: %s",
            response.status_code,
            request.url,
            detail,
        )
        raise ApiResponseError(response.status_code, str(detail), body=data)

    if not isinstance(data, dict):
        raise ApiResponseError(
            response.status_code, "Invalid JSON response", body=response.text[:200]
        )

    result = SendResponse.from_data(data)
    if result.has_error() or not result.success:
        logger.warning("Sendivent rejected %s: %s", request.url, result.error or result.message)
    else:
        logger.info("Notification sent via %s", request.url)
    return result
