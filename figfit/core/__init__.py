"""
Core infrastructure for figfit.

Shared abstractions used by the geometry and fitting subpackages.

Key components:
    protocols: Figure protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from figfit.core.protocols import Figure
from figfit.core.result import Result
from figfit.core.exceptions import (
    FigFitError,
    ValidationError,
    DimensionError,
    InsufficientSamplesError,
    NumericalError,
    DegenerateInputError,
    UndefinedOperationError,
)

__all__ = [
    # Protocols
    "Figure",
    # Result
    "Result",
    # Exceptions
    "FigFitError",
    "ValidationError",
    "DimensionError",
    "InsufficientSamplesError",
    "NumericalError",
    "DegenerateInputError",
    "UndefinedOperationError",
]
