#!/usr/bin/env python3
"""
Data models for normalized dictionary entries and batch results.

WordRecord is the one canonical shape both dictionary sources normalize into.
BatchOutcome collects the successes and per-word failures of one batch run.
"""

from collections import Counter
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class SourceOrigin(Enum):
    """Dictionary source that produced a record, in fallback priority order"""
    PRIMARY = "longman"
    SECONDARY = "cambridge"


@dataclass
class DialectPair:
    """British (primary dialect) and American (secondary dialect) values"""
    uk: str = ''
    us: str = ''


@dataclass
class Sense:
    """One dictionary meaning of a word"""
    part_of_speech: str
    definition: str
    examples: List[str] = field(default_factory=list)
    translated_definition: str = ''


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class WordRecord:
    """Canonical normalized dictionary entry"""
    headword: str
    pronunciation: DialectPair = field(default_factory=DialectPair)
    audio: DialectPair = field(default_factory=DialectPair)
    level: str = ''
    frequency: str = ''
    senses: List[Sense] = field(default_factory=list)
    translated_headword: str = ''
    source_origin: Optional[SourceOrigin] = None
    fetched_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        """Document shape handed to the persistence layer (keyed by word)"""
        return {
            'word': self.headword,
            'pronunciation': asdict(self.pronunciation),
            'audio': asdict(self.audio),
            'level': self.level,
            'frequency': self.frequency,
            'meanings': [
                {
                    'partOfSpeech': sense.part_of_speech,
                    'definition': sense.definition,
                    'examples': list(sense.examples),
                    'vietnamese': sense.translated_definition,
                }
                for sense in self.senses
            ],
            'vietnamese': self.translated_headword,
            'createdAt': self.fetched_at.isoformat(),
            'source': self.source_origin.value if self.source_origin else None,
        }


@dataclass
class BatchFailure:
    """A word that could not be resolved, with the reason reported to the user"""
    word: str
    reason: str


@dataclass
class BatchOutcome:
    """Result of one batch invocation; partial success is the normal case"""
    records: List[WordRecord] = field(default_factory=list)
    failures: List[BatchFailure] = field(default_factory=list)
    processed: int = 0

    def source_counts(self) -> Dict[str, int]:
        counts = Counter(
            record.source_origin.value for record in self.records if record.source_origin
        )
        return {origin.value: counts.get(origin.value, 0) for origin in SourceOrigin}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'processed': self.processed,
            'scraped': len(self.records),
            'errors': [{'word': f.word, 'error': f.reason} for f in self.failures],
        }
