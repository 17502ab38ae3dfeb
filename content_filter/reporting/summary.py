"""
Summary report generation.

Creates human-readable and JSON reports of a moderation batch.
"""

import json
import logging
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..profanity.models import ClassificationResult
from ..profanity.policy import should_block, should_require_review
from ..profanity.severity import SeverityTier

logger = logging.getLogger(__name__)

TOP_TERMS = 10


def generate_summary(
    results: Sequence[ClassificationResult],
    labels: Optional[Sequence[str]] = None,
) -> Dict[str, Any]:
    """
    Generate a summary report of a moderation batch.

    Args:
        results: One result per analysed item
        labels: Optional item labels, parallel to `results`

    Returns:
        Dictionary with summary data
    """
    if labels is not None and len(labels) != len(results):
        raise ValueError(f"Got {len(labels)} labels for {len(results)} results")

    tier_counts = {tier.value: 0 for tier in SeverityTier}
    term_counts: Counter = Counter()
    items: List[Dict[str, Any]] = []

    for i, result in enumerate(results):
        tier_counts[result.severity_tier.value] += 1
        term_counts.update(result.flagged_terms)
        item = result.to_dict()
        item["label"] = labels[i] if labels is not None else str(i + 1)
        item["blocked"] = should_block(result)
        item["needs_review"] = should_require_review(result)
        items.append(item)

    confidences = [r.confidence for r in results]

    return {
        "timestamp": datetime.now().isoformat(),
        "summary": {
            "total_items": len(results),
            "flagged_items": sum(1 for r in results if r.contains_profanity or r.contains_hate_speech),
            "blocked_items": sum(1 for item in items if item["blocked"]),
            "review_items": sum(1 for item in items if item["needs_review"]),
            "tiers": tier_counts,
            "mean_confidence": sum(confidences) / len(confidences) if confidences else 1.0,
            "min_confidence": min(confidences) if confidences else 1.0,
            "top_terms": [
                {"term": term, "count": count}
                for term, count in term_counts.most_common(TOP_TERMS)
            ],
        },
        "items": items,
    }


def print_summary(summary: Dict[str, Any]) -> None:
    """
    Print a human-readable summary to console.

    Args:
        summary: Dictionary produced by `generate_summary`
    """
    width = 50
    totals = summary["summary"]

    print()
    print("=" * width)
    print("CONTENT FILTER - MODERATION SUMMARY")
    print("=" * width)
    print()

    print(f"Items analysed: {totals['total_items']}")
    print(f"Flagged:        {totals['flagged_items']}")
    print(f"Blocked:        {totals['blocked_items']}")
    print(f"Needs review:   {totals['review_items']}")
    print()

    print("-" * width)
    print("SEVERITY")
    print("-" * width)
    for tier, count in totals["tiers"].items():
        print(f"  {tier:<10} {count}")
    print()

    if totals["top_terms"]:
        print("-" * width)
        print("MOST FLAGGED TERMS")
        print("-" * width)
        for i, entry in enumerate(totals["top_terms"], 1):
            print(f"    {i}. {entry['term']} ({entry['count']}x)")
        print()

    print("-" * width)
    print(f"Confidence: mean {totals['mean_confidence']:.2f}, min {totals['min_confidence']:.2f}")
    print("=" * width)
    print()


def save_summary_json(
    summary: Dict[str, Any],
    output_path: Path
) -> None:
    """
    Save summary to a JSON file.

    Args:
        summary: Summary dictionary
        output_path: Path for JSON output
    """
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(summary, f, indent=2)

    logger.info(f"Summary saved to {output_path}")
