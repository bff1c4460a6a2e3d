"""
Tolerance tiers and numeric thresholds.

Comparison tiers used when checking results against a reference, plus
the thresholds read by the Gaussian pivot search and the factorial-cost
warning.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# General double-precision comparison
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Cross-algorithm comparison on random float input (different summation order)
CPU_FP64_CROSS_ALGORITHM = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='cpu_fp64_cross_algorithm',
    description='Two algorithms with different rounding paths',
)

# Relative pivot tolerance: a pivot no larger than this times the largest
# coefficient magnitude is treated as zero.
PIVOT_TOLERANCE = 1e-12

# Above this dimension the O(n!) determinants warn (10! = 3.6M terms).
FACTORIAL_WARNING_THRESHOLD = 9

