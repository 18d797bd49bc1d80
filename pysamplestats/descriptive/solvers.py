"""
Functional entry points for descriptive statistics.

Provides describe() as the comprehensive entry point, plus frequencies()
for direct access to count, PMF, CDF and binned tables.
"""

from __future__ import annotations

from typing import Iterable, Literal

from numpy.typing import ArrayLike

from pysamplestats.core.exceptions import InvalidArgumentError, ValidationError
from pysamplestats.descriptive.sample import Sample
from pysamplestats.frequency.table import FrequencyTable


FrequencyKind = Literal['counts', 'pmf', 'cdf', 'bins']


def _ensure_sample(data: ArrayLike | Sample, statistics: Iterable[str] | None) -> Sample:
    """Wrap raw data in a Sample if needed."""
    if isinstance(data, Sample):
        return data
    return Sample.from_array(data, statistics=statistics)


def describe(
    data: ArrayLike | Sample,
    *,
    statistics: Iterable[str] | None = None,
) -> Sample:
    """
    Compute descriptive statistics for a 1-D sample.

    Parameters
    ----------
    data : array-like or Sample
        Numeric observations. A Sample is returned unchanged.
    statistics : iterable of str, optional
        Statistic names to compute. Default: every eager statistic
        (see registry.DEFAULT_STATISTICS).

    Returns
    -------
    Sample with the selected statistics precomputed.
    """
    return _ensure_sample(data, statistics)


def frequencies(
    data: ArrayLike | Sample,
    *,
    kind: FrequencyKind = 'counts',
    interval: float | None = None,
) -> FrequencyTable:
    """
    Build a frequency table.

    Parameters
    ----------
    data : array-like or Sample
        Numeric observations.
    kind : str
        'counts' (raw), 'pmf' (normalized), 'cdf' (cumulated counts) or
        'bins' (PMF over bins of width ``interval``).
    interval : float, optional
        Bin width. Required for kind='bins', rejected otherwise.

    Returns
    -------
    FrequencyTable
    """
    if kind == 'bins' and interval is None:
        raise InvalidArgumentError("kind='bins' requires interval=", argument='interval')
    if kind != 'bins' and interval is not None:
        raise InvalidArgumentError(
            f"interval= only applies to kind='bins', got kind={kind!r}",
            argument='interval',
        )

    calculator = _ensure_sample(data, statistics=()).calculator

    if kind == 'counts':
        return calculator.frequency_table()
    if kind == 'pmf':
        return calculator.pmf()
    if kind == 'cdf':
        return calculator.cdf()
    if kind == 'bins':
        return calculator.histogram(interval)

    raise ValidationError(
        f"Unknown frequency kind: {kind!r}. "
        f"Must be 'counts', 'pmf', 'cdf', or 'bins'."
    )
