#!/usr/bin/env python3
"""
Cambridge Dictionary (secondary source)
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ..core.errors import WordNotFound
from ..core.models import DialectPair, Sense, SourceOrigin, WordRecord
from .base_source import SourceExtractor, absolute_url, collect_examples, element_text

logger = logging.getLogger(__name__)

CONTENT_SELECTOR = '.pr.dictionary, .entry-body, .di-title'
ERROR_SELECTOR = '.no-results, .error-page, .not-found'
SENSE_SELECTOR = '.entry-body .sense-body .def-block, .entry-body .pr.dsense .def-block'
EXAMPLE_SELECTOR = '.examp .eg, .dexamp .deg'
SUGGESTION_SELECTOR = '.spell-suggestion a, .did-you-mean a, .suggestions a'
MAX_SUGGESTIONS = 5


def _is_entry_container(tag: Tag) -> bool:
    classes = tag.get('class') or []
    return 'entry' in classes or ('pr' in classes and 'di' in classes)


class CambridgeSource(SourceExtractor):
    """Cambridge page layout: .entry-body with .def-block sense blocks"""

    name = 'Cambridge'
    origin = 'https://dictionary.cambridge.org'
    source_origin = SourceOrigin.SECONDARY

    @property
    def dictionary_root(self) -> str:
        return f"{self.origin}/dictionary/english"

    def is_entry_page(self, soup: BeautifulSoup) -> bool:
        has_content = soup.select_one(CONTENT_SELECTOR) is not None
        has_error = soup.select_one(ERROR_SELECTOR) is not None
        return has_content and not has_error

    def extract(self, markup: str, word: str) -> WordRecord:
        soup = BeautifulSoup(markup, 'html.parser')

        if not self.is_entry_page(soup):
            raise WordNotFound(word, self.name)

        senses = self._extract_senses(soup)
        if not senses:
            logger.info(f"Cambridge: entry page for '{word}' has no usable senses")
            raise WordNotFound(word, self.name)

        return WordRecord(
            headword=word.strip().lower(),
            pronunciation=self._extract_pronunciation(soup),
            audio=self._extract_audio(soup),
            level=element_text(soup.select_one('.level, .cef-level, .level-indicator')),
            # Cambridge pages carry no frequency band
            frequency='',
            senses=senses,
        )

    def extract_suggestions(self, markup: str) -> List[str]:
        """Spelling suggestions shown on a no-results page"""
        soup = BeautifulSoup(markup, 'html.parser')
        suggestions: List[str] = []
        for link in soup.select(SUGGESTION_SELECTOR):
            text = element_text(link)
            if text and text not in suggestions:
                suggestions.append(text)
            if len(suggestions) >= MAX_SUGGESTIONS:
                break
        return suggestions

    def _extract_pronunciation(self, soup: BeautifulSoup) -> DialectPair:
        uk = element_text(soup.select_one('.uk .pron .ipa'))
        us = element_text(soup.select_one('.us .pron .ipa'))
        return DialectPair(uk=uk, us=us or uk)

    def _extract_audio(self, soup: BeautifulSoup) -> DialectPair:
        return DialectPair(
            uk=self._audio_src(soup, 'uk'),
            us=self._audio_src(soup, 'us'),
        )

    def _audio_src(self, soup: BeautifulSoup, dialect: str) -> str:
        source = soup.select_one(f'.{dialect} .daud audio source[type="audio/mpeg"]')
        return absolute_url(source.get('src') if source else '', self.origin)

    def _part_of_speech(self, block: Tag) -> str:
        entry: Optional[Tag] = block.find_parent(_is_entry_container)
        if entry is None:
            return ''
        return element_text(entry.select_one('.pos, .dpos'))

    def _extract_senses(self, soup: BeautifulSoup) -> List[Sense]:
        senses: List[Sense] = []

        for block in soup.select(SENSE_SELECTOR):
            if len(senses) >= self.max_senses:
                break

            definition = element_text(block.select_one('.def, .ddef_d'))
            # Cambridge definitions end with a colon that introduces the examples
            definition = definition.rstrip(':').strip()
            if not definition:
                continue

            senses.append(Sense(
                part_of_speech=self._part_of_speech(block),
                definition=definition,
                examples=collect_examples(block.select(EXAMPLE_SELECTOR), self.max_examples),
            ))

        return senses
