#!/usr/bin/env python3
"""
Dictionary source contract.

Each source knows its own URL scheme, its existence signature and its own
markup layout; the sources share only this interface and the small text
helpers below.
"""

import re
from abc import ABC, abstractmethod
from typing import List, Optional
from urllib.parse import quote

from bs4 import BeautifulSoup, Tag

from ..core.models import SourceOrigin, WordRecord

CROSS_REFERENCE_MARKER = '→'


def clean_text(text: Optional[str]) -> str:
    """Collapse internal whitespace and trim"""
    if not text:
        return ''
    return re.sub(r'\s+', ' ', text).strip()


def element_text(element: Optional[Tag]) -> str:
    if element is None:
        return ''
    return clean_text(element.get_text())


def absolute_url(url: Optional[str], origin: str) -> str:
    """Prefix scheme-less URLs with the source origin; empty stays empty"""
    url = (url or '').strip()
    if not url:
        return ''
    if url.startswith('http'):
        return url
    if url.startswith('//'):
        return f"https:{url}"
    if not url.startswith('/'):
        url = f"/{url}"
    return f"{origin}{url}"


def collect_examples(nodes: List[Tag], limit: int) -> List[str]:
    """Up to limit non-empty example strings, skipping cross-references"""
    examples: List[str] = []
    for node in nodes:
        if len(examples) >= limit:
            break
        text = element_text(node)
        if text and CROSS_REFERENCE_MARKER not in text:
            examples.append(text)
    return examples


class SourceExtractor(ABC):
    """One dictionary provider: page URL plus markup-to-WordRecord extraction"""

    name: str
    origin: str
    source_origin: SourceOrigin

    def __init__(self, max_senses: int = 3, max_examples: int = 2):
        self.max_senses = max_senses
        self.max_examples = max_examples

    @property
    @abstractmethod
    def dictionary_root(self) -> str:
        """Base URL that word slugs are appended to"""

    def build_url(self, word: str) -> str:
        return f"{self.dictionary_root}/{quote(word.strip())}"

    @abstractmethod
    def is_entry_page(self, soup: BeautifulSoup) -> bool:
        """Positive signature present and negative signature absent"""

    @abstractmethod
    def extract(self, markup: str, word: str) -> WordRecord:
        """Normalize one page into a WordRecord or raise WordNotFound"""
