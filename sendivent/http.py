"""HTTP client construction for API calls."""

from typing import Optional

import httpx


def api_http_client(
    timeout: float = 15,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    **kwargs,
) -> httpx.AsyncClient:
    """Build a short-lived async client for a single send call. Redirects are not followed."""
    return httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=False,
        transport=transport,
        **kwargs,
    )
