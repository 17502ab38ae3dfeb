"""
Moderation of multi-field content items.

A video is judged on its title and description together (and, where
present, the descriptions of its generated highlights). This module runs
`analyze` over every field and folds the per-field results into one.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .profanity.analyzer import analyze
from .profanity.lexicon import DEFAULT_LEXICON, Lexicon
from .profanity.models import ClassificationResult
from .profanity.policy import should_block, should_require_review
from .profanity.redactor import DEFAULT_MASK_CHAR
from .profanity.severity import worst_tier

logger = logging.getLogger(__name__)

FILTER_LEVELS = ("all", "flagged", "clean")


def combine_results(results: Iterable[ClassificationResult]) -> ClassificationResult:
    """
    Fold several results into one.

    Flags are OR-ed, the worst tier wins (by rank), flagged terms are
    concatenated, confidence is the minimum and the redacted text is the
    first result's.
    """
    results = list(results)
    if not results:
        return ClassificationResult.clean()

    flagged: List[str] = []
    for result in results:
        flagged.extend(result.flagged_terms)

    return ClassificationResult(
        contains_profanity=any(r.contains_profanity for r in results),
        contains_hate_speech=any(r.contains_hate_speech for r in results),
        severity_tier=worst_tier(r.severity_tier for r in results),
        flagged_terms=tuple(flagged),
        redacted_text=results[0].redacted_text,
        confidence=min(r.confidence for r in results),
    )


@dataclass
class ContentReview:
    """Per-field moderation results for one content item."""
    fields: Dict[str, ClassificationResult] = field(default_factory=dict)
    label: str = ""

    @property
    def combined(self) -> ClassificationResult:
        return combine_results(self.fields.values())

    @property
    def flagged(self) -> bool:
        combined = self.combined
        return combined.contains_profanity or combined.contains_hate_speech

    @property
    def blocked(self) -> bool:
        return should_block(self.combined)

    @property
    def needs_review(self) -> bool:
        return should_require_review(self.combined)

    def redacted_fields(self) -> Dict[str, Optional[str]]:
        return {name: result.redacted_text for name, result in self.fields.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "combined": self.combined.to_dict(),
            "blocked": self.blocked,
            "needs_review": self.needs_review,
            "fields": {name: result.to_dict() for name, result in self.fields.items()},
        }


def review_fields(
    fields: Mapping[str, Optional[str]],
    label: str = "",
    lexicon: Lexicon = DEFAULT_LEXICON,
    mask_char: str = DEFAULT_MASK_CHAR,
) -> ContentReview:
    """
    Analyze every named text field of one content item.

    Args:
        fields: Field name -> text, e.g. {"title": ..., "description": ...}
        label: Identifier for the item (video id, file line, ...)
        lexicon: Lexicon to match against
        mask_char: Character used to mask redacted terms

    Returns:
        ContentReview holding one result per field, in the given order
    """
    review = ContentReview(
        fields={name: analyze(text, lexicon, mask_char) for name, text in fields.items()},
        label=label,
    )
    if review.blocked:
        logger.info(f"Content '{label or '<unlabelled>'}' blocked")
    elif review.needs_review:
        logger.info(f"Content '{label or '<unlabelled>'}' requires review")
    return review


def filter_reviews(reviews: Iterable[ContentReview], level: str = "all") -> List[ContentReview]:
    """
    Select reviews by filter level.

    "flagged" keeps items with profanity or hate speech, "clean" keeps the
    rest, "all" keeps everything.
    """
    if level not in FILTER_LEVELS:
        raise ValueError(f"Unknown filter level {level!r}, expected one of {', '.join(FILTER_LEVELS)}")

    reviews = list(reviews)
    if level == "flagged":
        return [r for r in reviews if r.flagged]
    if level == "clean":
        return [r for r in reviews if not r.flagged]
    return reviews
