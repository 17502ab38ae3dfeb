"""Profanity and hate-speech moderation subpackage."""

from .lexicon import (
    Category,
    LexiconEntry,
    Lexicon,
    DEFAULT_LEXICON,
    HATE_SPEECH_TERMS,
    SEVERE_TERMS,
    MILD_TERMS,
    load_lexicon,
)
from .severity import (
    SeverityTier,
    SEVERITY_STYLES,
    get_severity_color,
    get_severity_badge_color,
    tier_rank,
    worst_tier,
)
from .models import Classification, ClassificationResult
from .classifier import classify
from .redactor import redact
from .confidence import confidence
from .policy import should_block, should_require_review
from .analyzer import analyze

__all__ = [
    'Category',
    'LexiconEntry',
    'Lexicon',
    'DEFAULT_LEXICON',
    'HATE_SPEECH_TERMS',
    'SEVERE_TERMS',
    'MILD_TERMS',
    'load_lexicon',
    'SeverityTier',
    'SEVERITY_STYLES',
    'get_severity_color',
    'get_severity_badge_color',
    'tier_rank',
    'worst_tier',
    'Classification',
    'ClassificationResult',
    'classify',
    'redact',
    'confidence',
    'should_block',
    'should_require_review',
    'analyze',
]
