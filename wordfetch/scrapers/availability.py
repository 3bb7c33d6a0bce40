#!/usr/bin/env python3
"""
Source availability probes: which dictionary has a word, whether a source
is reachable at all, and spelling suggestions for misses.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, List, Optional

from ..core.config import ScraperConfig, get_scraper_config
from ..core.errors import ScraperError
from ..core.models import SourceOrigin
from .base_source import SourceExtractor
from .cambridge_source import CambridgeSource
from .http_fetcher import HttpFetcher
from .longman_source import LongmanSource

logger = logging.getLogger(__name__)

DEFAULT_BATCH_CHECK_LIMIT = 10


@dataclass
class WordAvailability:
    """Per-source presence of one word and the source to prefer"""
    word: str
    primary: bool = False
    secondary: bool = False
    recommended: Optional[SourceOrigin] = None
    error: Optional[str] = None


class AvailabilityChecker:
    """Probes both dictionary sources without translating or enriching"""

    def __init__(self, fetcher: HttpFetcher,
                 primary: Optional[SourceExtractor] = None,
                 secondary: Optional[CambridgeSource] = None,
                 config: Optional[ScraperConfig] = None,
                 sleep: Optional[Callable[[float], Awaitable[None]]] = None):
        self.fetcher = fetcher
        self.config = config or get_scraper_config()
        self.primary = primary or LongmanSource(self.config.max_senses, self.config.max_examples)
        self.secondary = secondary or CambridgeSource(self.config.max_senses, self.config.max_examples)
        self._sleep = sleep or asyncio.sleep

    async def has_word(self, source: SourceExtractor, word: str) -> bool:
        """True when the source serves a real entry page with at least one sense"""
        try:
            markup = await self.fetcher.fetch(
                source.build_url(word), timeout=self.config.availability_timeout
            )
            source.extract(markup, word)
            return True
        except ScraperError as e:
            logger.debug(f"{source.name} check failed for '{word}': {e}")
            return False

    async def check_word_availability(self, word: str) -> WordAvailability:
        availability = WordAvailability(word=word)
        availability.primary = await self.has_word(self.primary, word)
        availability.secondary = await self.has_word(self.secondary, word)

        if availability.primary:
            availability.recommended = self.primary.source_origin
        elif availability.secondary:
            availability.recommended = self.secondary.source_origin

        return availability

    async def batch_check_availability(self, words: Iterable[str],
                                       limit: int = DEFAULT_BATCH_CHECK_LIMIT) -> List[WordAvailability]:
        """Check up to limit words, one at a time with a short pause after each"""
        results: List[WordAvailability] = []

        for word in list(words)[:limit]:
            try:
                results.append(await self.check_word_availability(word))
            except Exception as e:
                logger.error(f"Error checking availability for {word}: {e}")
                results.append(WordAvailability(word=word, error=str(e)))

            await self._sleep(self.config.availability_delay)

        return results

    async def is_accessible(self, source: SourceExtractor) -> bool:
        """Whether the source's dictionary root answers 200"""
        try:
            await self.fetcher.fetch(source.dictionary_root, timeout=self.config.accessibility_timeout)
            return True
        except ScraperError as e:
            logger.error(f"{source.name} accessibility check failed: {e}")
            return False

    async def get_word_suggestions(self, word: str) -> List[str]:
        """Spelling suggestions from the secondary source's results page"""
        try:
            markup = await self.fetcher.fetch(
                self.secondary.build_url(word), timeout=self.config.availability_timeout
            )
        except ScraperError as e:
            logger.error(f"Failed to get suggestions for '{word}': {e}")
            return []
        return self.secondary.extract_suggestions(markup)
