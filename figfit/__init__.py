"""
figfit: least squares fitting of 2D figures.

Fits a point, an infinite line, a line segment or a circle to a noisy set
of planar samples and reports the mean squared distance of the samples to
the fitted figure.

Submodules:
    geometry: Vec and the figures Point, Line, Segment, Circle
    fitting: Fitter regression engine and the fit() entry point
    core: exceptions, validation, result envelope, numeric kernels
"""

__version__ = "0.1.0"

from figfit import geometry
from figfit import fitting
from figfit.geometry import Vec, Point, Line, Segment, Circle
from figfit.fitting import Fitter, fit
from figfit.core.exceptions import (
    FigFitError,
    ValidationError,
    InsufficientSamplesError,
    DegenerateInputError,
    UndefinedOperationError,
)

__all__ = [
    "__version__",
    "geometry",
    "fitting",
    "Vec",
    "Point",
    "Line",
    "Segment",
    "Circle",
    "Fitter",
    "fit",
    "FigFitError",
    "ValidationError",
    "InsufficientSamplesError",
    "DegenerateInputError",
    "UndefinedOperationError",
]
