"""
End-to-end score analysis.

This module ties the sampler, statistics calculator, histogram builder,
density curve generator and cutoff classifier together. Each call derives
every output from the same sample and cutoff and returns them in a single
AnalysisSnapshot, so callers never mix outputs from different samples.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from src.core.distributions import density_curve, histogram_scale_factor, normal_pdf
from src.core.histogram import build_histogram
from src.core.sampler import generate_scores
from src.core.statistics import summarize
from src.diagnostics.cutoff import classify_sample
from src.utils.constants import BIN_WIDTH
from src.utils.types import AnalysisSnapshot, SampleParameters

logger = logging.getLogger(__name__)


def analyze_sample(
    sample: Sequence[float],
    cutoff: float,
    parameters: Optional[SampleParameters] = None,
) -> AnalysisSnapshot:
    """
    Derive statistics, histogram, density curve and cutoff split for a sample.

    Args:
        sample: Scores; stored sorted in the snapshot
        cutoff: Grade cutoff
        parameters: Generation parameters to record alongside, if any

    Returns:
        AnalysisSnapshot with all outputs computed from this sample

    Notes:
        The density curve is fitted to the computed mean and standard
        deviation, so it is empty when the spread is undefined (one score)
        or zero (all scores identical).
    """
    ordered = tuple(sorted(float(score) for score in sample))
    summary = summarize(ordered)

    density = ()
    if summary is not None and summary.has_spread and summary.std_dev > 0:
        density = density_curve(
            summary.mean,
            summary.std_dev,
            histogram_scale_factor(summary.count, BIN_WIDTH),
            cutoff,
        )

    snapshot = AnalysisSnapshot(
        sample=ordered,
        cutoff=cutoff,
        summary=summary,
        histogram=build_histogram(ordered, BIN_WIDTH),
        density=density,
        classification=classify_sample(ordered, cutoff),
        parameters=parameters,
    )
    logger.debug("Analyzed %d scores at cutoff %s", len(ordered), cutoff)
    return snapshot


def run_analysis(
    parameters: SampleParameters,
    cutoff: float,
    rng: Optional[np.random.Generator] = None,
) -> AnalysisSnapshot:
    """Generate a fresh sample and analyze it."""
    sample = generate_scores(parameters, rng)
    return analyze_sample(sample, cutoff, parameters)


def curve_peak(snapshot: AnalysisSnapshot) -> Optional[float]:
    """
    Height of the fitted curve at the mean, on the histogram's count scale.

    Returns None when the snapshot has no curve.
    """
    summary = snapshot.summary
    if summary is None or not snapshot.density:
        return None
    scale = histogram_scale_factor(summary.count, BIN_WIDTH)
    return scale * normal_pdf(summary.mean, summary.mean, summary.std_dev)
