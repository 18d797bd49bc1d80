"""
Statistic registry: the explicit table of every named statistic.

Each entry maps a statistic name to the calculator call that produces it
and a kind tag:
    eager:    computed by default when a Sample is constructed
    local:    needs a caller-supplied argument (index, rank, percentile)
    reserved: declared but not implemented (central_moment, kurtosis)

Sample construction iterates this table instead of discovering calculator
methods by reflection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Literal, TYPE_CHECKING

from pysamplestats.core.exceptions import (
    InvalidArgumentError,
    NotImplementedFeatureError,
    ValidationError,
)

if TYPE_CHECKING:
    from pysamplestats.descriptive.calculator import StatisticsCalculator


StatisticKind = Literal['eager', 'local', 'reserved']


@dataclass(frozen=True)
class StatisticSpec:
    """One registry entry."""
    name: str
    compute: Callable[['StatisticsCalculator'], Any]
    kind: StatisticKind
    description: str = ''


def _call(method: str) -> Callable[['StatisticsCalculator'], Any]:
    def compute(calculator: 'StatisticsCalculator') -> Any:
        return getattr(calculator, method)()
    compute.__name__ = method
    return compute


def _needs_argument(name: str) -> Callable[['StatisticsCalculator'], Any]:
    def compute(calculator: 'StatisticsCalculator') -> Any:
        raise InvalidArgumentError(
            f"'{name}' requires an argument; call calculator.{name}(...) directly",
            argument=name,
        )
    compute.__name__ = name
    return compute


_ENTRIES = (
    StatisticSpec('pmf', _call('pmf'), 'eager', 'probability mass function'),
    StatisticSpec('cdf', _call('cdf'), 'eager', 'cumulative counts'),
    StatisticSpec('mean', _call('mean'), 'eager', 'arithmetic mean'),
    StatisticSpec('median', _call('median'), 'eager', 'value at rank round(n/2)'),
    StatisticSpec('interpolated_median', _call('interpolated_median'), 'eager',
                  'median, averaged for even n'),
    StatisticSpec('has_true_median', _call('has_true_median'), 'eager', 'n is odd'),
    StatisticSpec('modes', _call('modes'), 'eager', 'most frequent values'),
    StatisticSpec('is_multimodal', _call('is_multimodal'), 'eager', 'more than one mode'),
    StatisticSpec('mean_deviation', _call('mean_deviation'), 'eager',
                  'first-order deviation from the mean'),
    StatisticSpec('variance', _call('variance'), 'eager', 'population variance'),
    StatisticSpec('skewness', _call('skewness'), 'eager', 'moment skewness'),
    StatisticSpec('pearson_skewness', _call('pearson_skewness'), 'eager',
                  "Pearson's mean-median skewness"),
    StatisticSpec('stddev', _call('stddev'), 'eager', 'standard deviation'),
    StatisticSpec('range', _call('range'), 'eager', '(min, max)'),
    StatisticSpec('approximate_interquartile_range', _call('approximate_interquartile_range'),
                  'eager', 'nearest-rank quartile cuts'),
    StatisticSpec('interpolated_interquartile_range', _call('interpolated_interquartile_range'),
                  'eager', 'averaged quartile cuts'),
    StatisticSpec('interquartile_range', _call('interquartile_range'), 'eager',
                  'quartile cuts without interpolation'),
    StatisticSpec('count', _call('count'), 'eager', 'sample size'),
    StatisticSpec('index', _needs_argument('index'), 'local', '0-based sorted position'),
    StatisticSpec('rank', _needs_argument('rank'), 'local', '1-based sorted position'),
    StatisticSpec('percentile', _needs_argument('percentile'), 'local', 'percentile of a value'),
    StatisticSpec('central_moment', _needs_argument('central_moment'), 'reserved',
                  'k-th central moment'),
    StatisticSpec('kurtosis', _call('kurtosis'), 'reserved', 'kurtosis'),
)

STATISTICS: dict[str, StatisticSpec] = {spec.name: spec for spec in _ENTRIES}

DEFAULT_STATISTICS: tuple[str, ...] = tuple(
    spec.name for spec in _ENTRIES if spec.kind == 'eager'
)

LOCAL_STATISTICS: tuple[str, ...] = tuple(
    spec.name for spec in _ENTRIES if spec.kind == 'local'
)


def resolve_statistics(names: Iterable[str] | None) -> tuple[StatisticSpec, ...]:
    """
    Validate a statistic selection and return its registry entries.

    Parameters
    ----------
    names : iterable of str or None
        Statistic names to precompute. None selects DEFAULT_STATISTICS;
        an empty iterable selects nothing.

    Returns
    -------
    Tuple of StatisticSpec in registry order, duplicates removed.

    Raises
    ------
    ValidationError
        Unknown statistic name (message lists the available names).
    InvalidArgumentError
        A local statistic was requested; it needs an argument.
    NotImplementedFeatureError
        A reserved statistic was requested.
    """
    if names is None:
        return tuple(STATISTICS[name] for name in DEFAULT_STATISTICS)

    if isinstance(names, str):
        raise ValidationError(
            f"statistics: expected an iterable of names, got the string {names!r}"
        )

    requested = set()
    for name in names:
        if name not in STATISTICS:
            raise ValidationError(
                f"Unknown statistic '{name}'. Available: {list(DEFAULT_STATISTICS)}"
            )
        spec = STATISTICS[name]
        if spec.kind == 'local':
            raise InvalidArgumentError(
                f"'{name}' requires an argument and cannot be precomputed",
                argument=name,
            )
        if spec.kind == 'reserved':
            raise NotImplementedFeatureError(
                f"'{name}' is not implemented", feature=name
            )
        requested.add(name)

    return tuple(spec for spec in _ENTRIES if spec.name in requested)
