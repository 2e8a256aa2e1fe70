"""
Shared compute infrastructure for figfit.

Numeric infrastructure used by the fitting engine. Figure geometry does not
live here, only the kernels and constants the regressions are built on.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
    linalg: Linear algebra kernels (pseudo-inverse least squares)
"""

from figfit.core.compute.timing import Timer
from figfit.core.compute.tolerances import (
    ToleranceTier,
    FP64,
    FP64_NOISY,
    ORIGIN_PROXIMITY,
    SEGMENT_OVERHANG,
    ANGULAR,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "FP64",
    "FP64_NOISY",
    "ORIGIN_PROXIMITY",
    "SEGMENT_OVERHANG",
    "ANGULAR",
]
