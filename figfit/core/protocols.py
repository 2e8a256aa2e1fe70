"""
Core protocols for figfit.

The Figure protocol is the geometric contract shared by Point, Line,
Segment and Circle. We use Protocol (structural typing) rather than an
ABC so that the figure types stay independent value classes: a Segment
owns a Line, it is not one.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from figfit.geometry.point import Point
    from figfit.geometry.vec import Vec


@runtime_checkable
class Figure(Protocol):
    """
    Capability set every fitted figure provides.

    The Fitter only ever talks to figures through this protocol, which is
    what lets a single variance routine serve every figure kind.
    """

    def distance_squared_to(self, p: 'Point') -> float:
        """
        Squared minimal Euclidean distance from the figure to p.

        Expected to be no more expensive than distance_to().
        """
        ...

    def distance_to(self, p: 'Point') -> float:
        """Minimal Euclidean distance from the figure to p."""
        ...

    def find_projection_of(self, p: 'Point') -> 'Point':
        """Point on the figure nearest to p."""
        ...

    def normal_to(self, p: 'Point') -> 'Vec':
        """
        Unit vector pointing from the figure towards p.

        Raises:
            UndefinedOperationError: If p coincides with its projection
        """
        ...
