#!/usr/bin/env python3
"""
Longman Dictionary of Contemporary English (primary source)
"""

import logging
from typing import List

from bs4 import BeautifulSoup

from ..core.errors import WordNotFound
from ..core.models import DialectPair, Sense, SourceOrigin, WordRecord
from .base_source import SourceExtractor, absolute_url, collect_examples, element_text

logger = logging.getLogger(__name__)


class LongmanSource(SourceExtractor):
    """Longman page layout: .Entry > .Sense blocks with .DEF and .EXAMPLE"""

    name = 'Longman'
    origin = 'https://www.ldoceonline.com'
    source_origin = SourceOrigin.PRIMARY

    @property
    def dictionary_root(self) -> str:
        return f"{self.origin}/dictionary"

    def is_entry_page(self, soup: BeautifulSoup) -> bool:
        has_content = soup.select_one('.dictionary') is not None
        has_error = soup.select_one('.Error') is not None
        return has_content and not has_error

    def extract(self, markup: str, word: str) -> WordRecord:
        soup = BeautifulSoup(markup, 'html.parser')

        if not self.is_entry_page(soup):
            raise WordNotFound(word, self.name)

        senses = self._extract_senses(soup)
        if not senses:
            logger.info(f"Longman: entry page for '{word}' has no usable senses")
            raise WordNotFound(word, self.name)

        freq = soup.select_one('.FREQ')

        return WordRecord(
            headword=word.strip().lower(),
            pronunciation=self._extract_pronunciation(soup),
            audio=self._extract_audio(soup),
            level=element_text(soup.select_one('.LEVEL')),
            frequency=(freq.get('title') or '').strip() if freq else '',
            senses=senses,
        )

    def _extract_pronunciation(self, soup: BeautifulSoup) -> DialectPair:
        uk = element_text(soup.select_one('.PRON'))
        us = element_text(soup.select_one('.AMEVARPRON'))
        return DialectPair(uk=uk, us=us or uk)

    def _extract_audio(self, soup: BeautifulSoup) -> DialectPair:
        uk = soup.select_one('.speaker.brefile')
        us = soup.select_one('.speaker.amefile')
        return DialectPair(
            uk=absolute_url(uk.get('data-src-mp3') if uk else '', self.origin),
            us=absolute_url(us.get('data-src-mp3') if us else '', self.origin),
        )

    def _extract_senses(self, soup: BeautifulSoup) -> List[Sense]:
        senses: List[Sense] = []

        for block in soup.select('.Sense'):
            if len(senses) >= self.max_senses:
                break

            definition = element_text(block.select_one('.DEF'))
            if not definition:
                continue

            entry = block.find_parent(class_='Entry')
            part_of_speech = element_text(entry.select_one('.POS')) if entry else ''

            senses.append(Sense(
                part_of_speech=part_of_speech,
                definition=definition,
                examples=collect_examples(block.select('.EXAMPLE'), self.max_examples),
            ))

        return senses
