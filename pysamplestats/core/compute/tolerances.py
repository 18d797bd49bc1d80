"""
Tolerance tiers for floating-point checks.

Defines how close a normalized frequency table must sum to 1 before it is
considered valid.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Payloads produced by dividing float64 counts
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, summation of normalized counts',
)
