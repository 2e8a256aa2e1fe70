"""
Linear algebra kernels for figfit.

Submodules:
    pinv: Moore-Penrose pseudo-inverse least squares
"""

from figfit.core.compute.linalg.pinv import PinvResult, pinv_solve

__all__ = [
    "PinvResult",
    "pinv_solve",
]
