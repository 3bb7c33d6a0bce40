"""Tests for primary-then-secondary word resolution."""

import asyncio

import pytest

from fakes import (
    CAMBRIDGE,
    CAMBRIDGE_MISSING,
    LONGMAN,
    LONGMAN_MISSING,
    FakeFetcher,
    cambridge_page,
    longman_page,
    make_config,
)
from wordfetch.core.errors import BothSourcesFailed, InvalidWordFormat, NetworkError, NetworkTimeout
from wordfetch.core.models import SourceOrigin
from wordfetch.scrapers.fallback_resolver import FallbackResolver


def _resolve(fetcher, word, **config):
    resolver = FallbackResolver(fetcher, config=make_config(**config))
    return asyncio.run(resolver.resolve(word))


class TestFallbackOrder:
    """Test which source answers"""

    def test_primary_success_skips_secondary(self):
        """Test the secondary is never fetched when the primary succeeds"""
        fetcher = FakeFetcher(pages={
            LONGMAN.build_url("cat"): longman_page("a small animal"),
            CAMBRIDGE.build_url("cat"): cambridge_page("a small furry animal"),
        })
        record = _resolve(fetcher, "cat")

        assert record.source_origin is SourceOrigin.PRIMARY
        assert record.senses[0].definition == "a small animal"
        assert fetcher.calls == [LONGMAN.build_url("cat")]

    def test_falls_back_to_secondary_when_primary_has_no_entry(self):
        """Test a missing primary entry moves on to the secondary"""
        fetcher = FakeFetcher(pages={
            LONGMAN.build_url("zeitgeist"): LONGMAN_MISSING,
            CAMBRIDGE.build_url("zeitgeist"): cambridge_page("the general spirit of a period"),
        })
        record = _resolve(fetcher, "zeitgeist")

        assert record.source_origin is SourceOrigin.SECONDARY
        assert record.senses[0].definition == "the general spirit of a period"
        assert fetcher.calls == [LONGMAN.build_url("zeitgeist"), CAMBRIDGE.build_url("zeitgeist")]

    def test_falls_back_on_primary_network_failure(self):
        """Test a primary timeout moves on to the secondary"""
        fetcher = FakeFetcher(pages={
            LONGMAN.build_url("cat"): NetworkTimeout(LONGMAN.build_url("cat"), 15),
            CAMBRIDGE.build_url("cat"): cambridge_page("a small animal"),
        })
        assert _resolve(fetcher, "cat").source_origin is SourceOrigin.SECONDARY

    def test_resolving_twice_gives_equal_records(self):
        """Test repeated resolution of the same word is stable"""
        fetcher = FakeFetcher(pages={LONGMAN.build_url("cat"): longman_page("a small animal", "a lion")})
        resolver = FallbackResolver(fetcher, config=make_config())

        first = asyncio.run(resolver.resolve("cat"))
        second = asyncio.run(resolver.resolve("cat"))

        assert first.senses == second.senses
        assert first.pronunciation == second.pronunciation
        assert first.source_origin is second.source_origin


class TestBothSourcesFailing:
    """Test the combined failure"""

    def test_both_sources_failing_reports_both_reasons(self):
        """Test the error message names both sources"""
        fetcher = FakeFetcher(pages={
            LONGMAN.build_url("wordnotinanysource"): LONGMAN_MISSING,
            CAMBRIDGE.build_url("wordnotinanysource"): CAMBRIDGE_MISSING,
        })
        with pytest.raises(BothSourcesFailed) as exc_info:
            _resolve(fetcher, "wordnotinanysource")

        message = str(exc_info.value)
        assert "not found in Longman" in message
        assert "not found in Cambridge" in message
        assert exc_info.value.word == "wordnotinanysource"

    def test_network_and_absence_reasons_are_distinguishable(self):
        """Test each reason keeps its own failure kind"""
        fetcher = FakeFetcher(pages={
            LONGMAN.build_url("cat"): NetworkError(LONGMAN.build_url("cat"), "connection reset"),
        })
        with pytest.raises(BothSourcesFailed) as exc_info:
            _resolve(fetcher, "cat")

        assert "connection reset" in exc_info.value.primary_reason
        assert "HTTP 404" in exc_info.value.secondary_reason


class TestHeadwordValidation:
    """Test malformed headwords are rejected before fetching"""

    @pytest.mark.parametrize("word", ["cat123", "", "   ", "c++"])
    def test_invalid_word_raises_without_fetching(self, word):
        """Test InvalidWordFormat is raised and no page is requested"""
        fetcher = FakeFetcher()
        with pytest.raises(InvalidWordFormat):
            _resolve(fetcher, word)
        assert fetcher.calls == []

    def test_word_is_normalized_before_fetching(self):
        """Test surrounding spaces and capitals are dropped from the URL"""
        fetcher = FakeFetcher(pages={LONGMAN.build_url("cat"): longman_page("a small animal")})
        record = _resolve(fetcher, "  Cat ")

        assert record.headword == "cat"
        assert fetcher.calls == [LONGMAN.build_url("cat")]


class TestPrimaryRetry:
    """Test the opt-in primary retry"""

    def test_no_primary_retry_by_default(self):
        """Test one network error falls straight back by default"""
        url = LONGMAN.build_url("cat")
        fetcher = FakeFetcher(pages={
            url: [NetworkError(url, "reset"), longman_page("a small animal")],
            CAMBRIDGE.build_url("cat"): cambridge_page("a small animal"),
        })
        assert _resolve(fetcher, "cat").source_origin is SourceOrigin.SECONDARY

    def test_opt_in_primary_retry_on_network_error(self):
        """Test a configured retry recovers the primary"""
        url = LONGMAN.build_url("cat")
        fetcher = FakeFetcher(pages={
            url: [NetworkError(url, "reset"), longman_page("a small animal")],
            CAMBRIDGE.build_url("cat"): cambridge_page("a small animal"),
        })
        record = _resolve(fetcher, "cat", primary_network_retries=1)

        assert record.source_origin is SourceOrigin.PRIMARY
        assert fetcher.calls == [url, url]

    def test_retry_does_not_apply_to_missing_words(self):
        """Test a missing entry is never retried"""
        fetcher = FakeFetcher(pages={
            LONGMAN.build_url("cat"): LONGMAN_MISSING,
            CAMBRIDGE.build_url("cat"): cambridge_page("a small animal"),
        })
        _resolve(fetcher, "cat", primary_network_retries=3)
        assert fetcher.calls.count(LONGMAN.build_url("cat")) == 1
