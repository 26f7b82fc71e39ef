"""
Data types and structures for score analytics.

This module defines the immutable value objects passed between the
sampler, the statistics calculator, the histogram and density builders,
and the cutoff classifier.
"""

import math
from dataclasses import dataclass
from typing import Literal, Optional

from src.utils.constants import (
    CENTER_DECIMALS,
    PERCENT_DECIMALS,
    POSITION_DECIMALS,
    SPREAD_DECIMALS,
)
from src.utils.formatting import format_fixed, round_half_up

Sample = tuple[float, ...]
Band = Literal["below", "at", "above"]


@dataclass(frozen=True)
class SampleParameters:
    """
    Immutable container for score generation parameters.

    Attributes:
        count: Number of scores to draw
        mean: Target mean of the underlying normal distribution
        std_dev: Target standard deviation of the underlying normal distribution
    """
    count: int
    mean: float
    std_dev: float

    def __post_init__(self) -> None:
        """Reject degenerate parameters before any sampling happens."""
        if not isinstance(self.count, int) or isinstance(self.count, bool):
            raise ValueError(f"Sample size must be an integer, got count={self.count!r}")
        if self.count < 1:
            raise ValueError(f"Sample size must be at least 1, got count={self.count}")
        if not math.isfinite(self.mean):
            raise ValueError(f"Mean must be finite, got mean={self.mean}")
        if not (math.isfinite(self.std_dev) and self.std_dev > 0):
            raise ValueError(f"Standard deviation must be positive, got std_dev={self.std_dev}")


@dataclass(frozen=True)
class SummaryStatistics:
    """
    Descriptive statistics of a sample, held at full precision.

    Attributes:
        count: Number of scores
        mean: Arithmetic mean
        median: Middle value (mean of the two middle values for even counts)
        mode: Comma-joined most frequent rounded scores, or "No mode"
        minimum: Smallest score
        maximum: Largest score
        range: maximum - minimum
        q1: First quartile (nearest rank)
        q3: Third quartile (nearest rank)
        iqr: q3 - q1
        std_dev: Sample standard deviation (n-1), nan for a single score
        variance: Sample variance (n-1), nan for a single score
    """
    count: int
    mean: float
    median: float
    mode: str
    minimum: float
    maximum: float
    range: float
    q1: float
    q3: float
    iqr: float
    std_dev: float
    variance: float

    @property
    def has_spread(self) -> bool:
        """Whether standard deviation and variance are defined (n >= 2)."""
        return math.isfinite(self.std_dev)

    def display_rows(self) -> list[tuple[str, str]]:
        """Label/value pairs in display order, formatted to display precision."""
        return [
            ("Count", str(self.count)),
            ("Mean", format_fixed(self.mean, CENTER_DECIMALS)),
            ("Median", format_fixed(self.median, CENTER_DECIMALS)),
            ("Mode", self.mode),
            ("Minimum", format_fixed(self.minimum, POSITION_DECIMALS)),
            ("Maximum", format_fixed(self.maximum, POSITION_DECIMALS)),
            ("Range", format_fixed(self.range, POSITION_DECIMALS)),
            ("Q1 (25th percentile)", format_fixed(self.q1, POSITION_DECIMALS)),
            ("Q3 (75th percentile)", format_fixed(self.q3, POSITION_DECIMALS)),
            ("IQR", format_fixed(self.iqr, POSITION_DECIMALS)),
            ("Standard Deviation", format_fixed(self.std_dev, SPREAD_DECIMALS)),
            ("Variance", format_fixed(self.variance, SPREAD_DECIMALS)),
        ]


@dataclass(frozen=True)
class HistogramBin:
    """
    One fixed-width histogram bucket covering [start, end).

    Attributes:
        range_label: Inclusive integer label, e.g. "70-74"
        count: Number of scores in the bucket
        midpoint: Center of the bucket
        start: Inclusive lower edge
        end: Exclusive upper edge
    """
    range_label: str
    count: int
    midpoint: float
    start: float
    end: float


@dataclass(frozen=True)
class DensityPoint:
    """
    One point of the fitted normal curve.

    Attributes:
        x: Score value
        y: Density scaled to histogram counts
        below_cutoff: Whether x <= cutoff
    """
    x: float
    y: float
    below_cutoff: bool


@dataclass(frozen=True)
class CutoffClassification:
    """
    Partition of a sample against a cutoff score.

    Percentages are rounded to one decimal independently, so the three
    of them need not add up to exactly 100.0.
    """
    cutoff: float
    below_count: int
    at_count: int
    above_count: int

    @property
    def total(self) -> int:
        return self.below_count + self.at_count + self.above_count

    def _percent(self, count: int) -> float:
        if self.total == 0:
            return 0.0
        return round_half_up(count / self.total * 100.0, PERCENT_DECIMALS)

    @property
    def below_percent(self) -> float:
        return self._percent(self.below_count)

    @property
    def at_percent(self) -> float:
        return self._percent(self.at_count)

    @property
    def above_percent(self) -> float:
        return self._percent(self.above_count)

    def formatted(self) -> dict[str, str]:
        """Percentages as fixed one-decimal strings keyed by band."""
        return {
            "below": format_fixed(self.below_percent, PERCENT_DECIMALS),
            "at": format_fixed(self.at_percent, PERCENT_DECIMALS),
            "above": format_fixed(self.above_percent, PERCENT_DECIMALS),
        }


@dataclass(frozen=True)
class AnalysisSnapshot:
    """
    Every derived output for one sample and one cutoff.

    Attributes:
        sample: Sorted scores the snapshot was derived from
        cutoff: Cutoff used for the density flags and the classification
        summary: Descriptive statistics (None for an empty sample)
        histogram: Histogram bins
        density: Fitted density curve (empty when the spread is undefined)
        classification: Below/at/above partition
        parameters: Generation parameters, when the sample was generated
    """
    sample: Sample
    cutoff: float
    summary: Optional[SummaryStatistics]
    histogram: tuple[HistogramBin, ...]
    density: tuple[DensityPoint, ...]
    classification: CutoffClassification
    parameters: Optional[SampleParameters] = None
