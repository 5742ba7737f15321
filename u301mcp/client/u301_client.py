import json
import logging
from typing import List, Optional, Sequence

import httpx

from u301mcp.config import U301Config
from u301mcp.Error.u301_error import (
    EmptyResponseError,
    TransportError,
    U301ApiError,
    UnexpectedResponseError,
)
from u301mcp.schemas import ShortenRequestItem, ShortenResult, parse_result

logger = logging.getLogger(__name__)


class U301ApiClient:
    """Handles all HTTP communication with the U301 API."""

    def __init__(self, config: U301Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        # No timeout override and no retries: one attempt per tool call
        self._client = httpx.AsyncClient(transport=transport)

    @property
    def headers(self) -> dict:
        return {
            "User-Agent": self.config.user_agent,
            "Authorization": f"Bearer {self.config.api_key}",
            "Accept-Encoding": "gzip",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def build_payload(self, items: Sequence[ShortenRequestItem]) -> List[dict]:
        """Map request items to the bulk body. The domain always comes from config."""
        payload = []
        for item in items:
            entry = {
                "url": item.url,
                "slug": item.slug,
                "domain": self.config.domain,
                "expiredAt": item.expiredAt,
                "password": item.password,
                "comment": item.comment,
            }
            payload.append({k: v for k, v in entry.items() if v is not None})
        return payload

    async def shorten_bulk(self, items: Sequence[ShortenRequestItem]) -> List[ShortenResult]:
        """
        Shorten a batch of URLs with a single POST /shorten/bulk.

        Returns one result per item, in the same order. Items the API could not
        shorten come back as ShortenedURLFailure rather than raising.

        Raises:
            U301ApiError: non-2xx response
            TransportError: the API could not be reached
            EmptyResponseError: the response had no body
            UnexpectedResponseError: the body was not a list of results
        """
        url = f"{self.config.api_base}/shorten/bulk"
        params = {"workspaceId": self.config.workspace_id} if self.config.workspace_id else None

        try:
            response = await self._client.post(
                url,
                params=params,
                headers=self.headers,
                content=json.dumps(self.build_payload(items)),
            )
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timeout: {e}") from e
        except httpx.TransportError as e:
            raise TransportError(f"Network error: {e}") from e

        logger.debug(f"POST {url} with {len(items)} URLs -> {response.status_code}")

        if not response.is_success:
            raise U301ApiError(response.status_code, response.reason_phrase, response.text)

        if not response.content.strip():
            raise EmptyResponseError("No response from U301 API")
        try:
            data = response.json()
        except ValueError as e:
            raise UnexpectedResponseError(f"U301 API returned invalid JSON: {e}") from e

        if data is None:
            raise EmptyResponseError("No response from U301 API")
        if not isinstance(data, list):
            raise UnexpectedResponseError(f"Expected a list of results from U301 API, got {type(data).__name__}")

        return [parse_result(raw) for raw in data]

    async def close(self):
        """Gracefully close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
