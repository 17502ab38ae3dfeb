"""
Content Filter
==============

Offline text moderation for user content: classifies titles, descriptions
and comments into a severity tier, flags and redacts offensive terms, and
scores the result.

No network calls and no persistence; callers own storage and scheduling.
"""

__version__ = "0.1.0"
__author__ = "Content Filter"

# Export key functions for convenience
from .profanity import (
    ClassificationResult,
    SeverityTier,
    analyze,
    should_block,
    should_require_review,
    get_severity_color,
    get_severity_badge_color,
)
from .review import ContentReview, review_fields, filter_reviews, combine_results
