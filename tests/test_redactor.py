"""
Unit tests for whole-word redaction.
"""

import pytest

from content_filter.profanity.classifier import classify
from content_filter.profanity.lexicon import DEFAULT_LEXICON
from content_filter.profanity.redactor import redact, validate_mask_char


class TestRedact:
    """Tests for the redaction pass."""

    def test_masks_each_term_with_equal_length(self):
        """Each masked span is as long as the term it replaces."""
        assert redact("You are an idiot") == "You are an *****"
        assert redact("what the fuck") == "what the ****"

    def test_embedded_term_left_alone(self):
        assert redact("a classic video") == "a classic video"
        assert redact("hello world") == "hello world"

    def test_inflected_form_not_masked(self):
        """Only whole words are masked; 'fucking' is not the term 'fuck'."""
        assert redact("I will kill this fucking moron") == "I will kill this fucking *****"

    def test_masks_terms_never_flagged(self):
        """Redaction is a superset pass and may mask untiered terms."""
        text = "fck this"
        assert classify(text).flagged_terms == ()
        assert redact(text) == "*** this"

    def test_hate_term_masked(self):
        assert redact("shut up you fucking gook") == "shut up you fucking ****"

    def test_multiple_occurrences(self):
        assert redact("shit, Shit, SHIT!") == "****, ****, ****!"

    def test_surrounding_whitespace_preserved(self):
        assert redact("  damn\tcrap\n") == "  ****\t****\n"

    def test_custom_lexicon(self):
        lexicon = DEFAULT_LEXICON.with_extra_terms(["frak"])
        assert redact("oh frak", lexicon) == "oh ****"

    def test_custom_mask_char(self):
        assert redact("oh shit", mask_char="#") == "oh ####"

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text):
        assert redact(text) == text

    def test_length_always_preserved(self):
        for text in [
            "You motherfucker",
            "sh!t, f*ck and a$$",
            "Bitch please, what the hell",
        ]:
            assert len(redact(text)) == len(text)


class TestValidateMaskChar:
    def test_single_character(self):
        assert validate_mask_char("#") == "#"

    @pytest.mark.parametrize("mask_char", ["", "**", None])
    def test_invalid(self, mask_char):
        with pytest.raises(ValueError):
            validate_mask_char(mask_char)

    def test_redact_rejects_invalid_mask(self):
        with pytest.raises(ValueError):
            redact("oh shit", mask_char="##")
