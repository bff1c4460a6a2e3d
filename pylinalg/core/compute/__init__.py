"""
Shared compute infrastructure for PyLinalg.

This module provides timing utilities and numeric tolerances that are
shared across all algorithm backends.

IMPORTANT: This is NOT where algorithm backends live. Those go in
{module}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and thresholds
"""

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_CROSS_ALGORITHM,
    PIVOT_TOLERANCE,
    FACTORIAL_WARNING_THRESHOLD,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_CROSS_ALGORITHM",
    "PIVOT_TOLERANCE",
    "FACTORIAL_WARNING_THRESHOLD",
]
