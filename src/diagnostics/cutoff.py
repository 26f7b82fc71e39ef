"""
Cutoff diagnostics for a score sample.

This module partitions scores against a grade cutoff:
- Sample-level below/at/above counts and percentages
- Per-score band labels
- Scores grouped by band
"""

from typing import Sequence

from src.utils.types import Band, CutoffClassification


def classify_score(score: float, cutoff: float) -> Band:
    """
    Band of a single score relative to the cutoff.

    Comparisons are strict: only a score exactly equal to the cutoff is "at".

    Examples:
        >>> classify_score(74.9, 75)
        'below'
        >>> classify_score(75.0, 75)
        'at'
    """
    if score < cutoff:
        return "below"
    if score == cutoff:
        return "at"
    return "above"


def classify_sample(sample: Sequence[float], cutoff: float) -> CutoffClassification:
    """
    Count scores below, at and above a cutoff.

    Args:
        sample: Scores in any order
        cutoff: Threshold score

    Returns:
        CutoffClassification whose counts always add up to len(sample);
        an empty sample gives zero counts and 0.0 percentages
    """
    below = sum(1 for score in sample if score < cutoff)
    at = sum(1 for score in sample if score == cutoff)
    above = sum(1 for score in sample if score > cutoff)

    return CutoffClassification(
        cutoff=cutoff, below_count=below, at_count=at, above_count=above
    )


def scores_by_band(sample: Sequence[float], cutoff: float) -> dict[str, list[float]]:
    """Scores grouped by band, keeping sample order within each band."""
    groups: dict[str, list[float]] = {"below": [], "at": [], "above": []}
    for score in sample:
        groups[classify_score(score, cutoff)].append(score)
    return groups
