#!/usr/bin/env python3
"""
Headword validation applied before any word reaches a dictionary source.
"""

import re
import logging
from typing import Iterable, List, Optional

from .errors import InvalidWordFormat

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r'^[a-zA-Z\s-]+$')
DEFAULT_MAX_WORDS = 50


def normalize_word(word: Optional[str]) -> str:
    """Trim and lowercase a raw input word"""
    if not word or not isinstance(word, str):
        return ''
    return word.strip().lower()


def is_valid_word(word: Optional[str]) -> bool:
    """Check the trimmed word against the accepted headword format"""
    if not word or not isinstance(word, str):
        return False
    return bool(WORD_PATTERN.match(word.strip()))


def validate_word_strict(word: Optional[str]) -> str:
    """Return the normalized word or raise InvalidWordFormat"""
    normalized = normalize_word(word)
    if not normalized or not is_valid_word(normalized):
        raise InvalidWordFormat(word)
    return normalized


def clean_words(words: Iterable[Optional[str]], max_words: int = DEFAULT_MAX_WORDS) -> List[str]:
    """
    Normalize a list of submitted words.

    Empty and invalid entries are dropped silently; the result keeps input
    order and is capped at max_words.
    """
    cleaned = []
    dropped = 0
    for word in words:
        normalized = normalize_word(word)
        if normalized and is_valid_word(normalized):
            cleaned.append(normalized)
        else:
            dropped += 1

    if dropped:
        logger.debug(f"Dropped {dropped} invalid or empty words")
    if len(cleaned) > max_words:
        logger.info(f"Capping batch at {max_words} words ({len(cleaned)} submitted)")

    return cleaned[:max_words]
