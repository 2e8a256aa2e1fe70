"""
Least squares via the Moore-Penrose pseudo-inverse.

Every figure regression in figfit reduces to an overdetermined system
X @ beta = y with two or three unknowns. The pseudo-inverse returns the
minimum-norm least squares solution and, unlike a plain QR solve, does not
fail outright on rank-deficient designs; the numerical rank is reported so
callers can decide whether the geometry determined the figure.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import pinv, svdvals


@dataclass(frozen=True)
class PinvResult:
    """
    Result of a pseudo-inverse least squares solve.

    Attributes:
        coefficients: Least squares solution beta (p,)
        rank: Numerical rank of X used by the pseudo-inverse
        singular_values: Singular values of X in descending order
        condition_number: Ratio of largest to smallest singular value,
            inf when X is rank-deficient
    """
    coefficients: NDArray[np.floating[Any]]
    rank: int
    singular_values: NDArray[np.floating[Any]]
    condition_number: float

    @property
    def is_full_rank(self) -> bool:
        return self.rank == self.coefficients.shape[0]


def pinv_solve(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    rcond: float | None = None,
) -> PinvResult:
    """
    Solve min_beta ||y - X beta||^2 as beta = pinv(X) @ y.

    Args:
        X: Design matrix (n x p)
        y: Target vector (n,)
        rcond: Relative cutoff for small singular values. None uses
            scipy's default of max(n, p) * eps.

    Returns:
        PinvResult with coefficients and rank diagnostics
    """
    X_pinv, rank = pinv(X, rtol=rcond, return_rank=True)
    beta = X_pinv @ y

    sv = svdvals(X)
    if rank < X.shape[1] or sv[-1] == 0.0:
        cond = float('inf')
    else:
        cond = float(sv[0] / sv[-1])

    return PinvResult(
        coefficients=beta,
        rank=int(rank),
        singular_values=sv,
        condition_number=cond,
    )
