"""
Dictionary scraping pipeline.

This package contains the components that turn submitted words into
normalized, translated dictionary records:
- HTTP fetching with identity headers and timeouts
- Longman (primary) and Cambridge (secondary) extractors
- Fallback resolution, translation enrichment and paced batch processing
- Source availability probes
"""

from .http_fetcher import HttpFetcher
from .base_source import SourceExtractor
from .longman_source import LongmanSource
from .cambridge_source import CambridgeSource
from .translator import Translator
from .fallback_resolver import FallbackResolver
from .record_enricher import RecordEnricher
from .batch_processor import BatchProcessor, scrape_words
from .availability import AvailabilityChecker, WordAvailability

__all__ = [
    'HttpFetcher',
    'SourceExtractor',
    'LongmanSource',
    'CambridgeSource',
    'Translator',
    'FallbackResolver',
    'RecordEnricher',
    'BatchProcessor',
    'scrape_words',
    'AvailabilityChecker',
    'WordAvailability',
]
