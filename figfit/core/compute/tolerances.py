"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the different situations figfit
compares floating point values in:
- FP64: exact samples, results must match to machine precision
- FP64_NOISY: noisy samples, results must be statistically close
- ORIGIN_PROXIMITY: how close to the origin a fitted line may pass, relative
  to the sample extent, before the fit is flagged as unreliable
- SEGMENT_OVERHANG: how far past an endpoint a sample may project before a
  segment fit is flagged as built from unordered samples
- ANGULAR: parallel / perpendicular / collinear predicates on unit vectors

Used by the fitting engine, the figure predicates and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def is_close(self, actual: float, expected: float) -> bool:
        """Return True if |actual - expected| <= atol + rtol * |expected|."""
        return abs(actual - expected) <= self.atol + self.rtol * abs(expected)


# Exact samples: fitted parameters reproduce the generating figure
FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='fp64',
    description='double precision, samples exactly on the figure',
)

# Noisy samples (noise sigma around 1% of the figure scale)
FP64_NOISY = ToleranceTier(
    rtol=5e-2,
    atol=5e-2,
    name='fp64_noisy',
    description='double precision, samples perturbed by small noise',
)

# Distance from origin below rtol * sample extent
ORIGIN_PROXIMITY = ToleranceTier(
    rtol=1e-3,
    atol=0.0,
    name='origin_proximity',
    description='line passes close to the origin relative to sample extent',
)

# Parametric overhang, in units of segment length
SEGMENT_OVERHANG = ToleranceTier(
    rtol=0.0,
    atol=0.05,
    name='segment_overhang',
    description='sample projects past a segment endpoint',
)

# Cross or dot product of unit vectors treated as zero
ANGULAR = ToleranceTier(
    rtol=0.0,
    atol=1e-12,
    name='angular',
    description='unit vectors parallel or perpendicular',
)

