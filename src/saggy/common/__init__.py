"""
Common infrastructure shared by the geometry, load and solver modules.

Includes error types and physical constants.
"""

from .constants import GRAVITY, ICE_DENSITY
from .errors import (
    DegenerateLoadError,
    InvalidGeometryError,
    NonConvergentSolveError,
    SaggyError,
)

__all__ = [
    "GRAVITY",
    "ICE_DENSITY",
    "SaggyError",
    "InvalidGeometryError",
    "DegenerateLoadError",
    "NonConvergentSolveError",
]
