"""
Text moderation entry point.

`analyze` chains the independent passes:
classify -> redact -> confidence -> ClassificationResult
"""

import logging
from typing import Optional

from .classifier import classify
from .confidence import confidence
from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import ClassificationResult
from .redactor import DEFAULT_MASK_CHAR, redact
from .severity import SeverityTier

logger = logging.getLogger(__name__)


def analyze(
    text: Optional[str],
    lexicon: Lexicon = DEFAULT_LEXICON,
    mask_char: str = DEFAULT_MASK_CHAR,
) -> ClassificationResult:
    """
    Classify, redact and score a piece of free text.

    Args:
        text: Title, description, comment, ... (None is treated as empty)
        lexicon: Lexicon to match against
        mask_char: Character used to mask redacted terms

    Returns:
        A fresh ClassificationResult
    """
    if not text:
        return ClassificationResult.clean(text)

    classification = classify(text, lexicon)
    redacted = redact(text, lexicon, mask_char)
    score = confidence(text, classification.flagged_terms)

    if classification.severity_tier != SeverityTier.CLEAN:
        logger.debug(
            f"Classified text as {classification.severity_tier.value}: "
            f"{len(classification.flagged_terms)} flagged term(s), confidence {score:.2f}"
        )

    return ClassificationResult(
        contains_profanity=classification.contains_profanity,
        contains_hate_speech=classification.contains_hate_speech,
        severity_tier=classification.severity_tier,
        flagged_terms=classification.flagged_terms,
        redacted_text=redacted,
        confidence=score,
    )
