"""
Descriptive statistics module.

Central tendency, dispersion, shape and rank-based measures over a single
numeric sample, with frequency-table derivatives.

Public API:
    Sample(values)         - Immutable sample with eagerly computed statistics
    StatisticsCalculator   - On-demand statistics bound to one Sample
    describe(data)         - Sample with every eager statistic computed
    frequencies(data)      - Count, PMF, CDF or binned table
    STATISTICS             - Registry of statistic names and kinds
"""

from pysamplestats.descriptive.calculator import (
    QuartilePair,
    StatisticsCalculator,
    ValueRange,
)
from pysamplestats.descriptive.registry import (
    DEFAULT_STATISTICS,
    LOCAL_STATISTICS,
    STATISTICS,
    StatisticSpec,
    resolve_statistics,
)
from pysamplestats.descriptive.sample import Sample
from pysamplestats.descriptive.solution import SampleStatistics
from pysamplestats.descriptive.solvers import describe, frequencies

__all__ = [
    "Sample",
    "StatisticsCalculator",
    "SampleStatistics",
    "QuartilePair",
    "ValueRange",
    "STATISTICS",
    "DEFAULT_STATISTICS",
    "LOCAL_STATISTICS",
    "StatisticSpec",
    "resolve_statistics",
    "describe",
    "frequencies",
]
