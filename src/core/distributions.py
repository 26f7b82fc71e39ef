"""
Normal density evaluation and the fitted density curve.

This module provides the normal probability density function and builds
the curve that is drawn over the score histogram. The curve is scaled by
sample size times bin width so that it reads on the histogram's count
axis rather than on a probability axis.
"""

import logging
import math

import numpy as np
from scipy.stats import norm

from src.utils.constants import BIN_WIDTH, CURVE_SPAN_STD_DEVS, CURVE_STEP, PDF_NEGLIGIBLE_Z
from src.utils.types import DensityPoint

logger = logging.getLogger(__name__)


def _validate_spread(std_dev: float) -> None:
    if not (math.isfinite(std_dev) and std_dev > 0):
        raise ValueError(f"Standard deviation must be positive, got std_dev={std_dev}")


def normal_pdf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """
    Normal probability density function with overflow protection.

    For |z| > 10 the density is negligible (< 2e-22) and is returned as zero.

    Args:
        x: Value at which to evaluate the density
        mean: Distribution mean
        std_dev: Distribution standard deviation (must be positive)

    Returns:
        Probability density at x

    Examples:
        >>> abs(normal_pdf(0.0) - 0.3989) < 0.001  # Peak at zero
        True
        >>> normal_pdf(15.0)  # Effectively zero
        0.0

    Notes:
        The normal PDF is given by:
            f(x) = (1/(σ√(2π))) * exp(-((x-μ)/σ)²/2)
    """
    _validate_spread(std_dev)
    z = (x - mean) / std_dev
    if abs(z) > PDF_NEGLIGIBLE_Z:
        return 0.0
    return (1.0 / (std_dev * math.sqrt(2.0 * math.pi))) * math.exp(-0.5 * z * z)


def histogram_scale_factor(sample_size: int, bin_width: float = BIN_WIDTH) -> float:
    """Factor converting a probability density into expected counts per bin."""
    return float(sample_size * bin_width)


def curve_grid(mean: float, std_dev: float) -> np.ndarray:
    """
    Evenly spaced x values over mean ± 4σ in steps of 0.5.

    Points are computed from an integer step index, so accumulated
    floating point error never adds or drops the last point.
    """
    _validate_spread(std_dev)
    start = mean - CURVE_SPAN_STD_DEVS * std_dev
    # Small tolerance keeps an exact multiple of the step from being lost to rounding
    steps = math.floor(2.0 * CURVE_SPAN_STD_DEVS * std_dev / CURVE_STEP + 1e-9)
    return start + CURVE_STEP * np.arange(steps + 1)


def density_curve(
    mean: float, std_dev: float, scale_factor: float, cutoff: float
) -> tuple[DensityPoint, ...]:
    """
    Scaled normal density over mean ± 4σ.

    Args:
        mean: Mean of the fitted normal
        std_dev: Standard deviation of the fitted normal (must be positive)
        scale_factor: Multiplier for the density, usually sample size × bin width
        cutoff: Points with x <= cutoff are flagged as below the cutoff

    Returns:
        Curve points in ascending x order

    Raises:
        ValueError: If std_dev is not a positive finite number

    Formula:
        y = scale_factor × (1/(σ√(2π))) × exp(-0.5 × ((x-μ)/σ)²)
    """
    xs = curve_grid(mean, std_dev)
    ys = scale_factor * norm.pdf(xs, loc=mean, scale=std_dev)

    logger.debug("Density curve with %d points (mean=%.4f, std_dev=%.4f)", len(xs), mean, std_dev)
    return tuple(
        DensityPoint(x=float(x), y=float(y), below_cutoff=bool(x <= cutoff))
        for x, y in zip(xs, ys)
    )
