"""
Tiered profanity classification.

Scans lower-cased text with raw substring matching in a fixed priority
cascade:

1. hate speech -> blocked (severe and mild passes are skipped)
2. severe profanity -> severe
3. mild profanity -> mild (only while still clean)
4. catch-all fallback -> moderate (only while still clean, adds no terms)

Within a pass every matching term is collected, in lexicon order.
"""

import logging
from typing import List, Optional

from .lexicon import DEFAULT_LEXICON, Category, Lexicon
from .models import CLEAN_CLASSIFICATION, Classification
from .severity import SeverityTier

logger = logging.getLogger(__name__)


def scan_terms(lowered_text: str, lexicon: Lexicon, category: Category) -> List[str]:
    """Return every `category` term that occurs as a substring of `lowered_text`."""
    return [term for term in lexicon.terms(category) if term in lowered_text]


def classify(text: Optional[str], lexicon: Lexicon = DEFAULT_LEXICON) -> Classification:
    """
    Assign a single severity tier to `text` and collect flagged terms.

    Args:
        text: Free text to classify; None or "" short-circuits to clean
        lexicon: Lexicon to scan against

    Returns:
        Classification with tier, hate/profanity flags and flagged terms
    """
    if not text:
        return CLEAN_CLASSIFICATION

    lowered = text.lower()
    flagged: List[str] = []
    contains_profanity = False
    contains_hate_speech = False
    tier = SeverityTier.CLEAN

    hate_hits = scan_terms(lowered, lexicon, Category.HATE)
    if hate_hits:
        contains_hate_speech = True
        contains_profanity = True
        tier = SeverityTier.BLOCKED
        flagged.extend(hate_hits)

    if tier != SeverityTier.BLOCKED:
        severe_hits = scan_terms(lowered, lexicon, Category.SEVERE)
        if severe_hits:
            contains_profanity = True
            tier = SeverityTier.SEVERE
            flagged.extend(severe_hits)

    if tier == SeverityTier.CLEAN:
        mild_hits = scan_terms(lowered, lexicon, Category.MILD)
        if mild_hits:
            contains_profanity = True
            tier = SeverityTier.MILD
            flagged.extend(mild_hits)

    # Tiered lists and the catch-all are maintained separately and can diverge.
    if lexicon.contains_any(text):
        contains_profanity = True
        if tier == SeverityTier.CLEAN:
            logger.debug("Catch-all matched an untiered term, classifying as moderate")
            tier = SeverityTier.MODERATE

    return Classification(
        contains_profanity=contains_profanity,
        contains_hate_speech=contains_hate_speech,
        severity_tier=tier,
        flagged_terms=tuple(flagged),
    )
