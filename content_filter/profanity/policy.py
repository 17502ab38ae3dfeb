"""Blocking and review decisions over a moderation result."""

from .models import ClassificationResult
from .severity import SeverityTier


def should_block(result: ClassificationResult) -> bool:
    """Content must be refused outright."""
    return result.severity_tier == SeverityTier.BLOCKED or result.contains_hate_speech


def should_require_review(result: ClassificationResult) -> bool:
    """Content must go to a human reviewer before it is stored or published."""
    return result.severity_tier == SeverityTier.SEVERE or result.contains_hate_speech
