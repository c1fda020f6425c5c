"""
Async HTTP client for the remote search backend (ESG + internet search)
"""

import json
import logging
from typing import Any, Dict, Optional
import httpx
from core.config import settings
from core.exceptions import SearchHTTPStatusError

logger = logging.getLogger(__name__)


def dump_json(data: Any) -> str:
    """Compact JSON text, no whitespace between tokens."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


class SearchAPIClient:
    """
    Thin async client that POSTs a JSON body and hands back the JSON response as text.

    One instance may be shared by many tools and concurrent calls; it keeps no
    per-request state. Pass `http_client` to reuse an existing httpx client
    (the caller then owns its lifecycle).
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.timeout = timeout if timeout is not None else settings.search_api_timeout
        self._client = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def post_json(self, url: str, body: Dict[str, Any], headers: Dict[str, str]) -> str:
        """
        POST `body` to `url` and return the response JSON re-serialised as text.

        Raises:
            SearchHTTPStatusError: Non-2xx status. The error body is not parsed.
            httpx.TransportError: Connection/DNS level failures.
            json.JSONDecodeError: Response body is not valid JSON.
        """
        client = await self._get_client()
        response = await client.post(url, content=dump_json(body), headers=headers)

        if not response.is_success:
            raise SearchHTTPStatusError(response.status_code, response.reason_phrase, url)

        return dump_json(response.json())

    async def close(self):
        """Close HTTP client"""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
