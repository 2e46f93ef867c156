"""Shared aiohttp plumbing for the read-only JSON clients."""

import asyncio
from typing import Any, Dict, Optional, Type

import aiohttp
from loguru import logger

from .errors import UpstreamAPIError


class JSONClient:
    """Base for clients that GET JSON from a single base URL.

    Non-2xx responses and transport failures raise ``error_class`` carrying
    the endpoint, HTTP status and reason phrase. No retries.
    """

    error_class: Type[UpstreamAPIError] = UpstreamAPIError

    def __init__(
        self,
        base_url: str,
        timeout_seconds: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.headers = headers or {}
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            kwargs: Dict[str, Any] = {"headers": self.headers}
            if self.timeout_seconds is not None:
                kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout_seconds)
            self._session = aiohttp.ClientSession(**kwargs)
        return self._session

    async def close(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    async def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET ``{base_url}/{endpoint}`` and decode the JSON body."""
        url = f"{self.base_url}/{endpoint}"
        session = self._get_session()
        logger.debug(f"GET {url} params={params}")

        try:
            async with session.get(url, params=params, headers=self.headers) as response:
                if response.status < 200 or response.status >= 300:
                    logger.error(f"{self.error_class.service} API error {response.status} for {endpoint}")
                    raise self.error_class(endpoint, response.status, response.reason)
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    logger.error(f"Invalid JSON from {self.error_class.service} for {endpoint}: {e}")
                    raise self.error_class(endpoint, response.status, "invalid JSON body") from e
        except UpstreamAPIError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error fetching {endpoint} from {self.error_class.service}: {e}")
            raise self.error_class(endpoint, None, str(e) or type(e).__name__) from e
