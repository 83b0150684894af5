"""httpx client factory used by ``fitzone.client``.

Defaults suit a single interactive user talking to one API host: a small
pool and short timeouts so a dead server surfaces quickly.
"""

import httpx

DEFAULT_TIMEOUT = httpx.Timeout(10.0, connect=5.0, pool=5.0)
DEFAULT_LIMITS = httpx.Limits(max_connections=10, max_keepalive_connections=5)
DEFAULT_HEADERS = {"Accept": "application/json"}


def create_http_client(
    base_url: str = "",
    *,
    timeout: httpx.Timeout = DEFAULT_TIMEOUT,
    limits: httpx.Limits = DEFAULT_LIMITS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an AsyncClient for the API at base_url.

    Pass ``transport=httpx.ASGITransport(app=app)`` to talk to an app
    in-process without a network.
    """
    return httpx.AsyncClient(
        base_url=base_url,
        headers=DEFAULT_HEADERS,
        timeout=timeout,
        limits=limits,
        transport=transport,
    )
