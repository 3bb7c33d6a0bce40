"""
Core building blocks shared by the scraping pipeline.

- Configuration and logging setup
- WordRecord / BatchOutcome data models
- Error taxonomy
- Input word validation
"""

from .config import ScraperConfig, get_scraper_config, reset_scraper_config
from .errors import (
    ScraperError,
    NetworkError,
    NetworkTimeout,
    HttpStatusError,
    WordNotFound,
    BothSourcesFailed,
    InvalidWordFormat,
    EmptyBatchError,
    TranslationFailure,
)
from .logging_config import configure_logging
from .models import (
    BatchFailure,
    BatchOutcome,
    DialectPair,
    Sense,
    SourceOrigin,
    WordRecord,
)
from .word_validator import clean_words, is_valid_word, validate_word_strict

__all__ = [
    'ScraperConfig',
    'get_scraper_config',
    'reset_scraper_config',
    'ScraperError',
    'NetworkError',
    'NetworkTimeout',
    'HttpStatusError',
    'WordNotFound',
    'BothSourcesFailed',
    'InvalidWordFormat',
    'EmptyBatchError',
    'TranslationFailure',
    'configure_logging',
    'BatchFailure',
    'BatchOutcome',
    'DialectPair',
    'Sense',
    'SourceOrigin',
    'WordRecord',
    'clean_words',
    'is_valid_word',
    'validate_word_strict',
]
