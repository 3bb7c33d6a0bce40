#!/usr/bin/env python3
"""
Best-effort English to Vietnamese machine translation.

translate() never raises: any failure degrades to an empty string so a
missing translation cannot fail a word.
"""

import json
import logging
from typing import Any, Optional

from ..core.config import ScraperConfig, get_scraper_config
from ..core.errors import ScraperError, TranslationFailure
from .http_fetcher import HttpFetcher

logger = logging.getLogger(__name__)


def parse_translation(body: str) -> str:
    """Pull the first translated segment out of the nested-array response"""
    try:
        data: Any = json.loads(body)
        segment = data[0][0][0]
    except (ValueError, TypeError, IndexError, KeyError) as e:
        raise TranslationFailure(f"Malformed translation response: {e}") from e

    if not isinstance(segment, str) or not segment.strip():
        raise TranslationFailure("Empty translation result")
    return segment.strip()


class Translator:
    """Translation client that shares the pipeline's HTTP fetcher"""

    def __init__(self, fetcher: HttpFetcher, config: Optional[ScraperConfig] = None):
        self.fetcher = fetcher
        self.config = config or get_scraper_config()

    async def translate(self, text: str) -> str:
        if not text or not text.strip():
            return ''

        params = {
            'client': 'gtx',
            'sl': self.config.source_language,
            'tl': self.config.target_language,
            'dt': 't',
            'q': text,
        }

        try:
            body = await self.fetcher.fetch(
                self.config.translate_url,
                timeout=self.config.translation_timeout,
                params=params,
            )
            return parse_translation(body)
        except ScraperError as e:
            logger.warning(f"Translation failed for '{text[:40]}': {e}")
            return ''
        except Exception as e:
            logger.error(f"Unexpected translation error for '{text[:40]}': {e}")
            return ''
