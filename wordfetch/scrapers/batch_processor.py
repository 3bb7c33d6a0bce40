#!/usr/bin/env python3
"""
Sequential batch scraping with per-word isolation and request pacing.

Words are processed strictly one at a time with a fixed pause between
consecutive words and none after the last.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Iterable, Optional

from ..core.config import ScraperConfig, get_scraper_config
from ..core.errors import EmptyBatchError, ScraperError
from ..core.models import BatchFailure, BatchOutcome
from ..core.word_validator import clean_words
from .fallback_resolver import FallbackResolver
from .http_fetcher import HttpFetcher
from .record_enricher import RecordEnricher
from .translator import Translator

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class BatchProcessor:
    """Runs a list of words through resolution and enrichment"""

    def __init__(self, resolver: FallbackResolver, enricher: RecordEnricher,
                 config: Optional[ScraperConfig] = None,
                 sleep: Optional[SleepFunc] = None):
        self.resolver = resolver
        self.enricher = enricher
        self.config = config or get_scraper_config()
        self._sleep = sleep or asyncio.sleep

    @classmethod
    def create(cls, fetcher: HttpFetcher, config: Optional[ScraperConfig] = None) -> 'BatchProcessor':
        """Wire the default Longman -> Cambridge pipeline around one fetcher"""
        config = config or fetcher.config
        resolver = FallbackResolver(fetcher, config=config)
        enricher = RecordEnricher(Translator(fetcher, config=config))
        return cls(resolver, enricher, config=config)

    async def process_batch(self, words: Iterable[Optional[str]]) -> BatchOutcome:
        """
        Resolve and enrich every valid word, collecting failures per word.

        Invalid or empty entries are dropped before processing and never
        reported. Raises EmptyBatchError only when nothing valid remains.
        """
        submitted = list(words)
        cleaned = clean_words(submitted, max_words=self.config.max_batch_size)
        if not cleaned:
            raise EmptyBatchError(len(submitted))

        logger.info(f"Processing {len(cleaned)} words ({len(submitted)} submitted)")
        outcome = BatchOutcome(processed=len(cleaned))

        for i, word in enumerate(cleaned):
            logger.info(f"Processing word {i + 1}/{len(cleaned)}: {word}")

            try:
                record = await self.resolver.resolve(word)
                record = await self.enricher.enrich(record)
                outcome.records.append(record)
                source = record.source_origin.value if record.source_origin else "unknown"
                logger.info(f"Successfully scraped: {word} (source: {source})")
            except ScraperError as e:
                logger.error(f"Error processing {word}: {e}")
                outcome.failures.append(BatchFailure(word=word, reason=str(e)))
            except Exception as e:
                logger.exception(f"Unexpected error processing {word}")
                outcome.failures.append(BatchFailure(word=word, reason=f"Unexpected error: {e}"))

            if i < len(cleaned) - 1 and self.config.pacing_delay > 0:
                await self._sleep(self.config.pacing_delay)

        self._log_summary(outcome)
        return outcome

    def _log_summary(self, outcome: BatchOutcome):
        counts = outcome.source_counts()
        logger.info("Scraping Summary:")
        for source, count in counts.items():
            logger.info(f"   - {source}: {count} words")
        logger.info(f"   - Errors: {len(outcome.failures)} words")


async def scrape_words(words: Iterable[Optional[str]],
                       config: Optional[ScraperConfig] = None) -> BatchOutcome:
    """Convenience entry point: one fetcher session for the whole batch"""
    async with HttpFetcher(config) as fetcher:
        processor = BatchProcessor.create(fetcher, config=config)
        return await processor.process_batch(words)
