# config/http_client.py
from typing import Optional
import httpx
from config.settings import settings

_client: Optional[httpx.AsyncClient] = None


async def get_http_client() -> httpx.AsyncClient:
    """
    Process-wide outbound client, created on first use.
    Every call carries the configured timeout; there is no retry.
    """
    global _client
    if _client is None:
        timeout = httpx.Timeout(
            settings.UPSTREAM_TIMEOUT_SECONDS,
            connect=settings.UPSTREAM_CONNECT_TIMEOUT_SECONDS,
        )
        _client = httpx.AsyncClient(timeout=timeout)
    return _client


async def close_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
