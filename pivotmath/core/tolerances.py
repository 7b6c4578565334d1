"""
Tolerance tiers for approximate comparison.

Defines the precision expectations used by Vector.allclose and
Matrix.allclose:
- EXACT: bitwise agreement of finite values
- DEFAULT: float64 round-off from a handful of operations
- LOOSE: accumulated round-off from long elimination sequences

Used by the value types and by the test suite.
"""

from dataclasses import dataclass

from pivotmath.core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='No tolerance, values must be identical',
)

DEFAULT = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='default',
    description='Double precision round-off from a few operations',
)

LOOSE = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='loose',
    description='Double precision, long chains of row operations',
)

_TIERS = {tier.name: tier for tier in (EXACT, DEFAULT, LOOSE)}


def select_tolerance(name: str) -> ToleranceTier:
    """Look up a tolerance tier by name."""
    try:
        return _TIERS[name]
    except KeyError:
        raise InvalidArgumentError(
            f"tolerance: unknown tier {name!r}, expected one of {sorted(_TIERS)}"
        ) from None
