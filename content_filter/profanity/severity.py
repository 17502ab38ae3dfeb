"""
Severity tiers for text moderation.
Also maps tiers to presentation hints used by review dashboards.
"""

from enum import Enum
from typing import Dict, Iterable, Union


class SeverityTier(str, Enum):
    """Overall severity assigned to a piece of text."""
    CLEAN = "clean"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    BLOCKED = "blocked"

    @property
    def rank(self) -> int:
        return TIER_RANKS[self]


TIER_RANKS: Dict[SeverityTier, int] = {
    SeverityTier.CLEAN: 0,
    SeverityTier.MILD: 1,
    SeverityTier.MODERATE: 2,
    SeverityTier.SEVERE: 3,
    SeverityTier.BLOCKED: 4,
}

SEVERITY_STYLES = {
    "clean": {
        "text": "text-green-400",
        "badge": "bg-green-500",
        "color": "#4ADE80",  # Green
    },
    "mild": {
        "text": "text-yellow-400",
        "badge": "bg-yellow-500",
        "color": "#FACC15",  # Yellow
    },
    "moderate": {
        "text": "text-orange-400",
        "badge": "bg-orange-500",
        "color": "#FB923C",  # Orange
    },
    "severe": {
        "text": "text-red-400",
        "badge": "bg-red-500",
        "color": "#F87171",  # Red
    },
    "blocked": {
        "text": "text-red-600",
        "badge": "bg-red-600",
        "color": "#DC2626",  # Dark red
    },
}

DEFAULT_STYLE = {
    "text": "text-gray-400",
    "badge": "bg-gray-500",
    "color": "#808080",  # Gray for unknown
}


def _style(severity: Union[str, SeverityTier, None]) -> Dict[str, str]:
    key = severity.value if isinstance(severity, SeverityTier) else severity
    return SEVERITY_STYLES.get(key, DEFAULT_STYLE)


def get_severity_color(severity: Union[str, SeverityTier, None]) -> str:
    """Text colour class for a tier, gray for anything unrecognised."""
    return _style(severity)["text"]


def get_severity_badge_color(severity: Union[str, SeverityTier, None]) -> str:
    """Badge background class for a tier, gray for anything unrecognised."""
    return _style(severity)["badge"]


def get_severity_hex(severity: Union[str, SeverityTier, None]) -> str:
    return _style(severity)["color"]


def tier_rank(severity: Union[str, SeverityTier, None]) -> int:
    """
    Rank of a tier (clean=0 ... blocked=4).

    Returns -1 for unknown values so they never outrank a real tier.
    """
    try:
        return SeverityTier(severity).rank
    except ValueError:
        return -1


def worst_tier(tiers: Iterable[Union[str, SeverityTier]]) -> SeverityTier:
    """
    Highest-ranked tier among `tiers`.

    Tiers are compared by rank, not alphabetically ("mild" sorts after
    "blocked" as a string). Unknown values are ignored.
    """
    worst = SeverityTier.CLEAN
    for tier in tiers:
        if tier_rank(tier) > worst.rank:
            worst = SeverityTier(tier)
    return worst
