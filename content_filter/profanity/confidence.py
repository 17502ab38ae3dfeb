"""Heuristic confidence score for a classification."""

from typing import Optional, Sequence

CONFIDENCE_FLOOR = 0.1
FLAG_WEIGHT = 0.5


def confidence(text: Optional[str], flagged_terms: Sequence[str]) -> float:
    """
    Confidence in [0.1, 1.0] from the share of flagged terms per word.

    Only tiered hits count; the catch-all fallback contributes nothing.
    """
    total_words = len(text.split()) if text else 0
    if total_words == 0:
        return 1.0

    ratio = len(flagged_terms) / total_words
    return max(CONFIDENCE_FLOOR, 1.0 - ratio * FLAG_WEIGHT)
