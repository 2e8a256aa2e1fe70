"""
Exception hierarchy for figfit.

All exceptions inherit from FigFitError so callers can catch any
library-specific failure with a single clause. Every failure is raised
synchronously at the call that detects it; nothing is retried and nothing
falls back to a default value.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state the actual vs expected values
    - NaN or infinite results are never returned in place of an error
"""


class FigFitError(Exception):
    """Base exception for all figfit errors."""
    pass


class ValidationError(FigFitError):
    """
    Input validation failed.

    Raised when caller-provided samples or arguments fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when sample coordinates are not shaped as (N, 2), or when
    parallel x and y arrays differ in length.
    """
    pass


class InsufficientSamplesError(ValidationError):
    """
    Too few samples to determine the requested figure.

    A point needs at least one sample, a line or segment two, a circle three.

    Attributes:
        figure: Name of the figure being fitted
        required: Minimum number of samples for that figure
        actual: Number of samples provided
    """

    def __init__(
        self,
        message: str,
        figure: str | None = None,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.figure = figure
        self.required = required
        self.actual = actual


class NumericalError(FigFitError):
    """
    Geometric computation failed.

    Base class for errors arising from the geometry of the input rather
    than from its shape or type.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    The input geometry cannot determine a figure.

    Raised for coincident points given to a Line or Segment, collinear
    points given to a Circle, zero-length segments, least-squares solves
    that are rank-deficient or yield a zero coefficient vector, and
    negative circle radicands.

    Attributes:
        reason: Short machine-readable tag, e.g. 'coincident_points',
                'collinear_points', 'rank_deficient', 'zero_coefficients',
                'negative_radicand', 'zero_length', 'parallel_lines'
    """

    def __init__(self, message: str, reason: str | None = None):
        super().__init__(message)
        self.reason = reason


class UndefinedOperationError(NumericalError):
    """
    Operation has no defined result for the given point.

    Raised when a direction is required but undefined, e.g. normalizing a
    zero-length vector or asking for the normal of a circle at its center.

    Attributes:
        operation: Name of the operation that was requested
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
