"""Data models for text moderation results."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .severity import SeverityTier


@dataclass(frozen=True)
class Classification:
    """Tier and flagged terms from the tiered classification passes."""
    contains_profanity: bool
    contains_hate_speech: bool
    severity_tier: SeverityTier
    flagged_terms: Tuple[str, ...] = ()


CLEAN_CLASSIFICATION = Classification(
    contains_profanity=False,
    contains_hate_speech=False,
    severity_tier=SeverityTier.CLEAN,
)


@dataclass(frozen=True)
class ClassificationResult:
    """Complete moderation result for one piece of text."""
    contains_profanity: bool
    contains_hate_speech: bool
    severity_tier: SeverityTier
    flagged_terms: Tuple[str, ...]
    redacted_text: Optional[str]
    confidence: float

    @classmethod
    def clean(cls, text: Optional[str] = None) -> "ClassificationResult":
        """Terminal result for empty input; the text is echoed unchanged."""
        return cls(
            contains_profanity=False,
            contains_hate_speech=False,
            severity_tier=SeverityTier.CLEAN,
            flagged_terms=(),
            redacted_text=text,
            confidence=1.0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contains_profanity": self.contains_profanity,
            "contains_hate_speech": self.contains_hate_speech,
            "severity_tier": self.severity_tier.value,
            "flagged_terms": list(self.flagged_terms),
            "redacted_text": self.redacted_text,
            "confidence": self.confidence,
        }
