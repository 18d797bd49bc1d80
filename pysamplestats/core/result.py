"""
Generic result container for PySampleStats computations.

The Result class is the standardized envelope for batch computations
(the eager statistics pass of a Sample). It carries timing and non-fatal
warnings next to the payload so callers can inspect how a batch went.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (sample size, computed names)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (e.g. SampleStatistics)
        info: Structured metadata (sample size, computed statistic names)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SampleStatistics(values={'mean': 3.0}),
        ...     info={'n': 5, 'computed': ['mean']},
        ...     timing={'total_seconds': 0.0001, 'mean': 0.00005},
        ...     backend_name='python_eager',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
