"""
Numerical constants and limits for score analytics.

This module defines the score domain, the histogram and density curve
geometry, display precisions, and the input limits shared by the CLI and
the dashboard.
"""

# Score domain
SCORE_MIN = 0.0
SCORE_MAX = 100.0
SCORE_DECIMALS = 1  # Generated scores are rounded to one decimal place

# Histogram geometry
BIN_WIDTH = 5  # Fixed bin width in score units

# Density curve geometry
CURVE_SPAN_STD_DEVS = 4.0  # Curve spans mean ± 4σ
CURVE_STEP = 0.5  # Distance between consecutive curve points
PDF_NEGLIGIBLE_Z = 10.0  # Beyond ±10σ the density is treated as zero

# Display precision (decimal places)
CENTER_DECIMALS = 2  # mean, median
SPREAD_DECIMALS = 2  # standard deviation, variance
POSITION_DECIMALS = 1  # min, max, range, quartiles, IQR
PERCENT_DECIMALS = 1  # cutoff percentages

# Quartile ranks (nearest-rank method)
Q1_RANK = 0.25
MEDIAN_RANK = 0.5
Q3_RANK = 0.75

# Labels
NO_MODE_LABEL = "No mode"
UNDEFINED_LABEL = "undefined"

# Input limits for interactive surfaces
MIN_STUDENTS = 5
MAX_STUDENTS = 200
MIN_STD_DEV = 1.0
MAX_STD_DEV = 25.0
CUTOFF_STEP = 0.1

# Defaults
DEFAULT_STUDENTS = 30
DEFAULT_MEAN = 75.0
DEFAULT_STD_DEV = 12.0
DEFAULT_CUTOFF = 75.0

# Environment variable that pins the random seed
SEED_ENV_VAR = "SCORE_ANALYZER_SEED"

# Cache parameters
DEFAULT_CACHE_TTL = 300  # 5 minutes in seconds
