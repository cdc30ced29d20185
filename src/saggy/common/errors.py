"""Exception types raised by the sag-tension calculations."""

from __future__ import annotations

from typing import Any


class SaggyError(Exception):
    """Base class for all saggy calculation errors."""


class InvalidGeometryError(SaggyError, ValueError):
    """Span geometry cannot describe a catenary (bad span length, zero catenary constant)."""


class DegenerateLoadError(SaggyError, ValueError):
    """Combined transverse load is zero, so the catenary constant is undefined."""


class NonConvergentSolveError(SaggyError, ArithmeticError):
    """A tension solver failed to converge or produced a non-finite iterate.

    Attributes:
        solver: Name of the solver that failed ("initial" or "elastic")
        iterations: Number of Newton-Raphson steps taken before failing
        last_tension: Last horizontal tension estimate (may be non-finite)
        inputs: Input values of the solve, for diagnosis
    """

    def __init__(
        self,
        message: str,
        *,
        solver: str,
        iterations: int,
        last_tension: float,
        inputs: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.solver = solver
        self.iterations = iterations
        self.last_tension = last_tension
        self.inputs = dict(inputs or {})

    def __str__(self) -> str:
        base = super().__str__()
        details = ", ".join(f"{k}={v}" for k, v in self.inputs.items())
        return (
            f"{base} [solver={self.solver}, iterations={self.iterations}, "
            f"last_tension={self.last_tension}" + (f", {details}" if details else "") + "]"
        )


__all__ = [
    "SaggyError",
    "InvalidGeometryError",
    "DegenerateLoadError",
    "NonConvergentSolveError",
]
