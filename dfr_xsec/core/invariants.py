"""Numeric invariant checks.

Violations indicate a modeling or configuration defect upstream. They are
raised, never clamped, so that wrong values cannot leak into integrated
cross sections.
"""

import math


class InvariantViolationError(RuntimeError):
    """Raised when a computed quantity breaks a numeric invariant."""

    pass


def check_jacobian(J: float, description: str = "") -> float:
    """Require a finite, strictly positive Jacobian.

    Args:
        J: Jacobian value
        description: Transformation being checked, used in the error message

    Returns:
        J unchanged

    Raises:
        InvariantViolationError: If J is not finite or J <= 0
    """
    if not math.isfinite(J) or J <= 0.0:
        raise InvariantViolationError(f"Jacobian must be finite and positive: J={J} {description}".rstrip())
    return J


def check_xsec(xsec: float, description: str = "") -> float:
    """Require a finite, non-negative cross section.

    Raises:
        InvariantViolationError: If xsec is not finite or xsec < 0
    """
    if not math.isfinite(xsec) or xsec < 0.0:
        raise InvariantViolationError(
            f"Cross section must be finite and non-negative: xsec={xsec} {description}".rstrip()
        )
    return xsec
