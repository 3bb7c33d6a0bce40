#!/usr/bin/env python3
"""
Error taxonomy for the scraping pipeline.

Every failure the pipeline knows how to recover from derives from
ScraperError, so callers can catch one type at each recovery boundary.
"""

from typing import Optional


class ScraperError(Exception):
    """Base class for all pipeline errors"""


class NetworkError(ScraperError):
    """Transport-level failure of a single HTTP call"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class NetworkTimeout(NetworkError):
    """HTTP call exceeded its timeout"""

    def __init__(self, url: str, timeout: float):
        self.timeout = timeout
        super().__init__(url, f"Timeout after {timeout:g}s fetching {url}")


class HttpStatusError(NetworkError):
    """Server answered with a non-200 status"""

    def __init__(self, url: str, status: int):
        self.status = status
        super().__init__(url, f"HTTP {status} fetching {url}")


class WordNotFound(ScraperError):
    """Source responded but holds no valid entry for the word"""

    def __init__(self, word: str, source_name: str):
        self.word = word
        self.source_name = source_name
        super().__init__(f'Word "{word}" not found in {source_name}')


class BothSourcesFailed(ScraperError):
    """Primary and secondary sources both failed for one word"""

    def __init__(self, word: str, primary_reason: str, secondary_reason: str,
                 primary_name: str = "primary", secondary_name: str = "secondary"):
        self.word = word
        self.primary_reason = primary_reason
        self.secondary_reason = secondary_reason
        super().__init__(
            f'Both {primary_name} and {secondary_name} failed for "{word}" '
            f"({primary_name}: {primary_reason}; {secondary_name}: {secondary_reason})"
        )


class InvalidWordFormat(ScraperError):
    """Word does not match the accepted headword format"""

    def __init__(self, word: Optional[str]):
        self.word = word
        super().__init__(f"Invalid word format: {word!r}")


class EmptyBatchError(ScraperError):
    """No valid words remained after batch pre-filtering"""

    def __init__(self, submitted: int):
        self.submitted = submitted
        super().__init__(f"No valid words found among {submitted} submitted")


class TranslationFailure(ScraperError):
    """Translation endpoint returned nothing usable; absorbed by the translator"""
