"""
Score sampler based on the Box-Muller transform.

Scores are drawn from a normal distribution, rounded to one decimal place,
clamped to the valid score range and returned in ascending order.
"""

import logging
import os
import secrets
from typing import Optional

import numpy as np

from src.utils.constants import SCORE_DECIMALS, SCORE_MAX, SCORE_MIN, SEED_ENV_VAR
from src.utils.types import Sample, SampleParameters

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Return a random generator, seeded from system entropy by default.

    An explicit seed wins; otherwise the SCORE_ANALYZER_SEED environment
    variable is honored so runs can be reproduced without code changes.

    Raises:
        ValueError: If the environment variable is not an integer
    """
    if seed is None:
        env_seed = os.environ.get(SEED_ENV_VAR)
        if env_seed is not None:
            try:
                seed = int(env_seed)
            except ValueError:
                raise ValueError(f"{SEED_ENV_VAR} must be an integer, got {env_seed!r}") from None
            logger.debug("Using seed %d from %s", seed, SEED_ENV_VAR)
    if seed is None:
        seed = secrets.randbits(63)
        logger.debug("Using entropy seed %d", seed)
    return np.random.default_rng(seed)


def box_muller(u1: np.ndarray, u2: np.ndarray) -> np.ndarray:
    """
    Turn two uniform samples into standard normal variates.

    Formula:
        z0 = √(-2·ln(u1)) · cos(2π·u2)

    Args:
        u1: Uniform values in (0, 1]; zero would make ln(u1) diverge
        u2: Uniform values in [0, 1)

    Returns:
        Standard normal variates, one per input pair
    """
    return np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)


def generate_scores(params: SampleParameters, rng: Optional[np.random.Generator] = None) -> Sample:
    """
    Draw a sorted sample of bounded scores.

    Args:
        params: Sample size, target mean and target standard deviation
        rng: Random generator; a fresh one from make_rng() when omitted

    Returns:
        Tuple of `params.count` scores in [0, 100], ascending

    Notes:
        Clamping at the score bounds means the realized mean and spread can
        differ from the requested ones when the mean is near 0 or 100 or the
        spread is large.
    """
    if rng is None:
        rng = make_rng()

    # Generator.random() draws from [0, 1), so 1 - u lies in (0, 1]
    u1 = 1.0 - rng.random(params.count)
    u2 = rng.random(params.count)
    raw = params.mean + params.std_dev * box_muller(u1, u2)

    scale = 10.0 ** SCORE_DECIMALS
    rounded = np.floor(raw * scale + 0.5) / scale
    scores = np.sort(np.clip(rounded, SCORE_MIN, SCORE_MAX))

    logger.debug(
        "Generated %d scores (mean=%s, std_dev=%s)", params.count, params.mean, params.std_dev
    )
    return tuple(float(score) for score in scores)
