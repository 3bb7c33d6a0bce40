#!/usr/bin/env python3
"""
Post-fetch enrichment: Vietnamese translations of the headword and definitions.
"""

import logging
from dataclasses import replace

from ..core.models import WordRecord
from .translator import Translator

logger = logging.getLogger(__name__)


class RecordEnricher:
    """Fills translated fields; an empty translation is accepted as-is"""

    def __init__(self, translator: Translator):
        self.translator = translator

    async def enrich(self, record: WordRecord) -> WordRecord:
        translated_headword = await self.translator.translate(record.headword)

        senses = []
        for sense in record.senses:
            translated = await self.translator.translate(sense.definition) if sense.definition else ''
            senses.append(replace(sense, examples=list(sense.examples), translated_definition=translated))

        missing = sum(1 for s in senses if not s.translated_definition)
        if not translated_headword or missing:
            logger.info(f"Enrichment for '{record.headword}' incomplete: "
                        f"headword {'ok' if translated_headword else 'missing'}, "
                        f"{missing}/{len(senses)} definitions untranslated")

        return replace(record, translated_headword=translated_headword, senses=senses)
