"""
Fixed-width histogram of a score sample.
"""

import logging
import math
from typing import Sequence

from src.utils.constants import BIN_WIDTH
from src.utils.types import HistogramBin

logger = logging.getLogger(__name__)


def bin_bounds(minimum: float, maximum: float, bin_width: int = BIN_WIDTH) -> tuple[int, int]:
    """
    Outer edges of the histogram: multiples of the bin width around the data.

    Examples:
        >>> bin_bounds(2, 19)
        (0, 20)
    """
    lower = math.floor(minimum / bin_width) * bin_width
    upper = math.ceil(maximum / bin_width) * bin_width
    return lower, upper


def build_histogram(sample: Sequence[float], bin_width: int = BIN_WIDTH) -> tuple[HistogramBin, ...]:
    """
    Bucket scores into half-open bins [start, start + width).

    Bins run left to right from the largest multiple of the width at or
    below the minimum. The last bin is the one containing the maximum, so
    a maximum that sits exactly on a multiple of the width (the upper
    bound) still gets its own trailing bin and every score is counted once.

    Args:
        sample: Scores in any order
        bin_width: Width of each bin in score units

    Returns:
        Bins in ascending order; empty for an empty sample

    Examples:
        >>> [(b.range_label, b.count) for b in build_histogram([2, 7, 7, 19])]
        [('0-4', 1), ('5-9', 2), ('10-14', 0), ('15-19', 1)]
    """
    if bin_width <= 0:
        raise ValueError(f"Bin width must be positive, got bin_width={bin_width}")
    if len(sample) == 0:
        return ()

    minimum = min(sample)
    maximum = max(sample)
    lower, upper = bin_bounds(minimum, maximum, bin_width)

    bins = []
    start = lower
    while start <= maximum:
        end = start + bin_width
        count = sum(1 for score in sample if start <= score < end)
        bins.append(
            HistogramBin(
                range_label=f"{start}-{end - 1}",
                count=count,
                midpoint=start + bin_width / 2,
                start=float(start),
                end=float(end),
            )
        )
        start = end

    logger.debug("Built %d bins over [%d, %d]", len(bins), lower, upper)
    return tuple(bins)
