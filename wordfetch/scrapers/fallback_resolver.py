#!/usr/bin/env python3
"""
Primary-then-secondary resolution of a single word.

    START -> try primary --ok--> FOUND (primary)
                         --fail--> try secondary --ok--> FOUND (secondary)
                                                 --fail--> BothSourcesFailed
"""

import logging
from dataclasses import replace
from typing import Optional

from ..core.config import ScraperConfig, get_scraper_config
from ..core.errors import BothSourcesFailed, NetworkError, ScraperError, HttpStatusError
from ..core.models import WordRecord
from ..core.word_validator import validate_word_strict
from .base_source import SourceExtractor
from .cambridge_source import CambridgeSource
from .http_fetcher import HttpFetcher
from .longman_source import LongmanSource

logger = logging.getLogger(__name__)


class FallbackResolver:
    """Tries the primary source first and the secondary only after it fails"""

    def __init__(self, fetcher: HttpFetcher,
                 primary: Optional[SourceExtractor] = None,
                 secondary: Optional[SourceExtractor] = None,
                 config: Optional[ScraperConfig] = None):
        self.fetcher = fetcher
        self.config = config or get_scraper_config()
        self.primary = primary or LongmanSource(self.config.max_senses, self.config.max_examples)
        self.secondary = secondary or CambridgeSource(self.config.max_senses, self.config.max_examples)

    async def fetch_from(self, source: SourceExtractor, word: str) -> WordRecord:
        """Fetch and normalize one word from one source; sets source_origin on success"""
        url = source.build_url(word)
        logger.info(f"{source.name} scraping: {url}")
        markup = await self.fetcher.fetch(url, timeout=self.config.fetch_timeout)
        record = source.extract(markup, word)
        return replace(record, source_origin=source.source_origin)

    async def _try_primary(self, word: str) -> WordRecord:
        retries_left = self.config.primary_network_retries
        while True:
            try:
                return await self.fetch_from(self.primary, word)
            except NetworkError as e:
                # status errors are answers, not transient transport failures
                if isinstance(e, HttpStatusError) or retries_left <= 0:
                    raise
                retries_left -= 1
                logger.info(f"Retrying {self.primary.name} for '{word}' after network error: {e}")

    async def resolve(self, word: str) -> WordRecord:
        """Resolve a headword; raises InvalidWordFormat before any fetch for a malformed word"""
        word = validate_word_strict(word)

        try:
            record = await self._try_primary(word)
            logger.info(f"{self.primary.name} success for: {word}")
            return record
        except ScraperError as primary_error:
            primary_reason = str(primary_error)
            logger.warning(f"{self.primary.name} failed for '{word}': {primary_reason}")

        try:
            logger.info(f"Trying {self.secondary.name} for: {word}")
            record = await self.fetch_from(self.secondary, word)
            logger.info(f"{self.secondary.name} success for: {word}")
            return record
        except ScraperError as secondary_error:
            secondary_reason = str(secondary_error)
            logger.warning(f"{self.secondary.name} also failed for '{word}': {secondary_reason}")
            raise BothSourcesFailed(
                word,
                primary_reason,
                secondary_reason,
                primary_name=self.primary.name,
                secondary_name=self.secondary.name,
            ) from secondary_error
