"""
Tests for content_filter/profanity/classifier.py

Tests the hate -> severe -> mild priority cascade, the catch-all fallback,
and the empty-input short circuit.
"""

import pytest

from content_filter.profanity.classifier import classify, scan_terms
from content_filter.profanity.lexicon import DEFAULT_LEXICON, Category
from content_filter.profanity.models import CLEAN_CLASSIFICATION
from content_filter.profanity.severity import SeverityTier


class TestEmptyInput:
    @pytest.mark.parametrize("text", ["", None])
    def test_short_circuits_to_clean(self, text):
        assert classify(text) is CLEAN_CLASSIFICATION

    def test_clean_text(self):
        result = classify("Welcome to my cooking channel")
        assert result.severity_tier == SeverityTier.CLEAN
        assert result.contains_profanity is False
        assert result.contains_hate_speech is False
        assert result.flagged_terms == ()


class TestScanTerms:
    def test_declaration_order(self):
        """Hits follow lexicon order, not order of appearance in the text."""
        hits = scan_terms("kike and spic", DEFAULT_LEXICON, Category.HATE)
        assert hits == ["spic", "kike"]

    def test_substring_match(self):
        assert scan_terms("a classic video", DEFAULT_LEXICON, Category.SEVERE) == ["ass"]


class TestHateSpeechPass:
    def test_hate_term_blocks(self):
        result = classify("you towelhead")
        assert result.severity_tier == SeverityTier.BLOCKED
        assert result.contains_hate_speech is True
        assert result.contains_profanity is True
        assert result.flagged_terms == ("towelhead",)

    def test_hate_overrides_severe(self):
        """Severe and mild passes are skipped once blocked."""
        result = classify("shut up you fucking gook")
        assert result.severity_tier == SeverityTier.BLOCKED
        assert result.flagged_terms == ("gook",)

    def test_all_hate_terms_collected(self):
        result = classify("kike and spic")
        assert result.flagged_terms == ("spic", "kike")

    def test_case_insensitive(self):
        assert classify("CHINK").severity_tier == SeverityTier.BLOCKED


class TestSeverePass:
    def test_severe_term(self):
        result = classify("I will kill this fucking moron")
        assert result.severity_tier == SeverityTier.SEVERE
        assert result.contains_profanity is True
        assert result.contains_hate_speech is False
        assert result.flagged_terms == ("fuck",)

    def test_severe_skips_mild(self):
        result = classify("damn this shit")
        assert result.severity_tier == SeverityTier.SEVERE
        assert result.flagged_terms == ("shit",)

    def test_every_severe_hit_collected(self):
        result = classify("you asshole")
        assert result.flagged_terms == ("ass", "asshole")

    def test_embedded_substring_still_classified(self):
        """Classification is substring based: 'classic' contains 'ass'."""
        assert classify("a classic video").severity_tier == SeverityTier.SEVERE


class TestMildPass:
    def test_mild_terms(self):
        result = classify("You are an idiot and this sucks")
        assert result.severity_tier == SeverityTier.MILD
        assert result.contains_profanity is True
        assert result.flagged_terms == ("sucks", "idiot")

    def test_mild_term_outside_catch_all(self):
        result = classify("this sucks")
        assert result.severity_tier == SeverityTier.MILD
        assert result.flagged_terms == ("sucks",)

    def test_hello_contains_hell(self):
        assert classify("hello world").flagged_terms == ("hell",)


class TestFallback:
    def test_untiered_term_is_moderate(self):
        result = classify("what a retard")
        assert result.severity_tier == SeverityTier.MODERATE
        assert result.contains_profanity is True
        assert result.flagged_terms == ()

    def test_obfuscated_term_is_moderate(self):
        assert classify("sh!t happens").severity_tier == SeverityTier.MODERATE

    def test_fallback_does_not_downgrade(self):
        assert classify("what a retard, you bitch").severity_tier == SeverityTier.SEVERE

    def test_custom_lexicon(self):
        lexicon = DEFAULT_LEXICON.with_extra_terms(["frak"])
        assert classify("oh frak", lexicon).severity_tier == SeverityTier.MODERATE
        assert classify("oh frak").severity_tier == SeverityTier.CLEAN


class TestInvariants:
    @pytest.mark.parametrize("text", [
        "Welcome to my cooking channel",
        "You are an idiot and this sucks",
        "I will kill this fucking moron",
        "shut up you fucking gook",
        "what a retard",
        "hello world",
    ])
    def test_blocked_iff_hate_speech(self, text):
        result = classify(text)
        assert (result.severity_tier == SeverityTier.BLOCKED) == result.contains_hate_speech

    @pytest.mark.parametrize("text", [
        "Welcome to my cooking channel",
        "You are an idiot and this sucks",
        "what a retard",
    ])
    def test_clean_iff_no_profanity(self, text):
        result = classify(text)
        assert (result.severity_tier == SeverityTier.CLEAN) == (not result.contains_profanity)

    def test_deterministic(self):
        text = "You motherfucker, what the hell"
        assert classify(text) == classify(text)
