#!/usr/bin/env python3
"""
HTTP fetching for dictionary pages and the translation endpoint.
One GET per call, browser-like headers, per-call timeout, no retries.
"""

import asyncio
import logging
from typing import Dict, Optional

import aiohttp

from ..core.config import ScraperConfig, get_scraper_config
from ..core.errors import HttpStatusError, NetworkError, NetworkTimeout

logger = logging.getLogger(__name__)


class HttpFetcher:
    """Stateless GET client around a single lazily-created aiohttp session"""

    def __init__(self, config: Optional[ScraperConfig] = None):
        self.config = config or get_scraper_config()
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry"""
        self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(headers=self.config.request_headers())
        return self.session

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None

    async def fetch(self, url: str, timeout: Optional[float] = None,
                    params: Optional[Dict[str, str]] = None) -> str:
        """
        GET url and return the response body.

        Raises NetworkTimeout, HttpStatusError or NetworkError (including an
        undecodable body); retry and
        fallback decisions belong to the caller.
        """
        timeout = timeout if timeout is not None else self.config.fetch_timeout
        session = self._get_session()
        logger.debug(f"GET {url} (timeout {timeout:g}s)")

        try:
            async with session.get(
                url,
                params=params,
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as response:
                if response.status != 200:
                    raise HttpStatusError(url, response.status)
                return await response.text()
        except asyncio.TimeoutError as e:
            raise NetworkTimeout(url, timeout) from e
        except aiohttp.ClientError as e:
            raise NetworkError(url, f"Request to {url} failed: {e}") from e
        except (UnicodeDecodeError, LookupError) as e:
            # body bytes do not decode in the declared charset, or the charset is unknown
            raise NetworkError(url, f"Undecodable response from {url}: {e}") from e
