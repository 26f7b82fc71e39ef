"""
Descriptive statistics for a sample of scores.

Quartiles use the nearest-rank method (no interpolation) and the variance
uses Bessel's correction (n-1). Both choices are fixed so that results are
reproducible across surfaces.
"""

import logging
import math
from typing import Optional, Sequence

import numpy as np

from src.utils.constants import MEDIAN_RANK, NO_MODE_LABEL, Q1_RANK, Q3_RANK
from src.utils.types import SummaryStatistics

logger = logging.getLogger(__name__)


def _round_to_integer(score: float) -> int:
    """Nearest integer with halves rounded up (72.5 -> 73, -0.5 -> 0)."""
    return math.floor(score + 0.5)


def compute_mode(scores: Sequence[float]) -> str:
    """
    Most frequent score after rounding to whole points.

    Scores are tallied in sample order. The list of modes restarts when a
    value reaches a new highest frequency and grows when a value ties it,
    so tied modes appear in the order they reached that frequency.

    Args:
        scores: Scores in any order

    Returns:
        Comma-joined modes, or "No mode" when every distinct rounded value
        is a mode

    Examples:
        >>> compute_mode([5, 5, 5, 10])
        '5'
        >>> compute_mode([1, 2, 3, 4])
        'No mode'
    """
    frequency: dict[int, int] = {}
    max_freq = 0
    modes: list[int] = []

    for score in scores:
        rounded = _round_to_integer(score)
        frequency[rounded] = frequency.get(rounded, 0) + 1
        if frequency[rounded] > max_freq:
            max_freq = frequency[rounded]
            modes = [rounded]
        elif frequency[rounded] == max_freq and rounded not in modes:
            modes.append(rounded)

    if len(modes) == len(frequency):
        return NO_MODE_LABEL
    return ", ".join(str(mode) for mode in modes)


def compute_median(sorted_scores: Sequence[float]) -> float:
    """Median of an ascending sequence."""
    n = len(sorted_scores)
    middle = math.floor(n * MEDIAN_RANK)
    if n % 2 == 0:
        return (sorted_scores[middle - 1] + sorted_scores[middle]) / 2.0
    return float(sorted_scores[middle])


def compute_quartiles(sorted_scores: Sequence[float]) -> tuple[float, float]:
    """
    First and third quartiles by nearest rank.

    Index floor(0.25·n) and floor(0.75·n) of the ascending sequence.

    Examples:
        >>> compute_quartiles([10, 20, 30, 40])
        (20.0, 40.0)
    """
    n = len(sorted_scores)
    q1 = sorted_scores[math.floor(n * Q1_RANK)]
    q3 = sorted_scores[math.floor(n * Q3_RANK)]
    return float(q1), float(q3)


def sample_variance(scores: Sequence[float], mean: Optional[float] = None) -> float:
    """
    Sample variance with Bessel's correction.

    Returns nan for fewer than two scores, where the estimator is undefined.
    """
    n = len(scores)
    if n < 2:
        return math.nan
    if mean is None:
        mean = math.fsum(scores) / n
    values = np.asarray(scores, dtype=float)
    return float(np.sum((values - mean) ** 2) / (n - 1))


def summarize(sample: Sequence[float]) -> Optional[SummaryStatistics]:
    """
    Reduce a sample to its descriptive statistics.

    Args:
        sample: Scores; they are sorted internally, so order does not matter

    Returns:
        SummaryStatistics at full precision, or None for an empty sample

    Notes:
        With a single score the variance and standard deviation are nan;
        SummaryStatistics.display_rows() shows them as "undefined".
    """
    n = len(sample)
    if n == 0:
        return None

    sorted_scores = sorted(sample)
    mean = math.fsum(sorted_scores) / n
    variance = sample_variance(sorted_scores, mean)
    std_dev = math.sqrt(variance) if n >= 2 else math.nan

    minimum = float(sorted_scores[0])
    maximum = float(sorted_scores[-1])
    q1, q3 = compute_quartiles(sorted_scores)

    logger.debug("Summarized %d scores (mean=%.4f)", n, mean)
    return SummaryStatistics(
        count=n,
        mean=mean,
        median=compute_median(sorted_scores),
        mode=compute_mode(sample),
        minimum=minimum,
        maximum=maximum,
        range=maximum - minimum,
        q1=q1,
        q3=q3,
        iqr=q3 - q1,
        std_dev=std_dev,
        variance=variance,
    )
