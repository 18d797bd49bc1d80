"""
StatisticsCalculator: the computation engine bound to one Sample.

Every operation reads the sample's values and never mutates them. Sorted
values and frequency tables are built on first use and cached per
calculator instance.

Rank conventions:
    rank(value=v)       1 + number of observations strictly less than v
    rank(percentile=p)  round_half_up(p / 100 * n + 0.5)
    index(...)          rank(...) - 1 (0-based position in sorted order)

Quartile positions that fall outside the sorted sample (only possible for
very small n) evaluate to NaN instead of wrapping around.
"""

from __future__ import annotations

import math
from functools import cached_property
from typing import Any, NamedTuple, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pysamplestats.core.compute.rounding import round_half_up_int
from pysamplestats.core.exceptions import (
    InvalidArgumentError,
    NotImplementedFeatureError,
)
from pysamplestats.frequency.table import FrequencyTable

if TYPE_CHECKING:
    from pysamplestats.descriptive.sample import Sample


class ValueRange(NamedTuple):
    """Smallest and largest observation."""
    low: float
    high: float


class QuartilePair(NamedTuple):
    """Lower and upper quartile cut values."""
    lower: float
    upper: float


class StatisticsCalculator:
    """
    Statistics over the values of a single Sample.

    Parameters
    ----------
    sample : Sample
        The sample to compute over. Only its ``values`` are read.
    """

    def __init__(self, sample: 'Sample'):
        self._sample = sample
        self._tables: dict[Any, FrequencyTable] = {}

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Raw observations, in input order."""
        return self._sample.values

    @property
    def n(self) -> int:
        """Sample size."""
        return int(self.values.shape[0])

    @cached_property
    def sorted_values(self) -> NDArray[np.floating[Any]]:
        """Observations in ascending order (computed once)."""
        ordered = np.sort(self.values, kind='stable')
        ordered.setflags(write=False)
        return ordered

    def _at(self, position: int) -> float:
        """Sorted value at a 0-based position, NaN outside the sample."""
        if position < 0 or position >= self.n:
            return math.nan
        return float(self.sorted_values[position])

    # --- Frequency tables ---

    def frequency_table(self) -> FrequencyTable:
        """Raw count table (cached)."""
        if 'counts' not in self._tables:
            self._tables['counts'] = FrequencyTable.from_values(self.values)
        return self._tables['counts']

    def pmf(self) -> FrequencyTable:
        """Probability mass function (cached)."""
        if 'pmf' not in self._tables:
            self._tables['pmf'] = self.frequency_table().normalize()
        return self._tables['pmf']

    def cdf(self) -> FrequencyTable:
        """Cumulative distribution of the raw counts (cached)."""
        if 'cdf' not in self._tables:
            self._tables['cdf'] = self.frequency_table().cumulate()
        return self._tables['cdf']

    def histogram(self, interval: float) -> FrequencyTable:
        """Binned PMF keyed by bin center (cached per interval)."""
        key = ('bin', float(interval))
        if key not in self._tables:
            self._tables[key] = self.frequency_table().bin(interval)
        return self._tables[key]

    # --- Central tendency ---

    def mean(self) -> float:
        """Arithmetic mean. Division by zero for an empty sample."""
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.sum(self.values) / self.n)

    def median(self) -> float:
        """
        Sorted value at 1-based rank round_half_up(n / 2).

        For even n this is the lower of the two central values, not their
        average; see interpolated_median().
        """
        rank = round_half_up_int(self.n / 2)
        return self._at(rank - 1)

    def interpolated_median(self) -> float:
        """Median; for even n, the average of the two central values."""
        if self.has_true_median():
            return self.median()
        half = self.n // 2
        return (self._at(half - 1) + self._at(half)) / 2

    def has_true_median(self) -> bool:
        """Whether n is odd, so that a single central value exists."""
        return self.n % 2 == 1

    def modes(self) -> list[float]:
        """All values sharing the maximum probability, ascending."""
        pmf = self.pmf()
        if not pmf:
            return []
        top = max(pmf.values())
        return [float(value) for value, p in pmf.items() if p == top]

    def is_multimodal(self) -> bool:
        """Whether more than one value ties for the highest frequency."""
        return len(self.modes()) > 1

    # --- Dispersion and shape ---

    def mean_deviation(self, mu: float | None = None, power: float = 1) -> float:
        """
        Mean of (x - mu) ** power over the sample.

        Parameters
        ----------
        mu : float, optional
            Reference point. Defaults to the sample mean.
        power : float
            Exponent applied to each deviation.
        """
        from pysamplestats.descriptive.sample import Sample

        if mu is None:
            mu = self.mean()
        # Large deviations may overflow to inf; the mean then reports it.
        with np.errstate(over='ignore', invalid='ignore'):
            deviations = (self.values - mu) ** power
        # No eager pass on the derived sample, otherwise this recurses.
        return Sample._from_computed(deviations, statistics=()).calculator.mean()

    def variance(self, mu: float | None = None) -> float:
        """Population variance (second mean deviation)."""
        return self.mean_deviation(mu, 2)

    def stddev(self, k: float = 1, *, mu: float | None = None) -> float:
        """
        k standard deviations.

        ``mu`` is forwarded unchanged to variance().
        """
        return k * math.sqrt(self.variance(mu=mu))

    def skewness(self, mu: float | None = None) -> float:
        """Moment coefficient m3 / m2 ** 1.5; NaN when m2 is zero."""
        m2 = np.float64(self.mean_deviation(mu, 2))
        m3 = np.float64(self.mean_deviation(mu, 3))
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return float(m3 / m2 ** 1.5)

    def pearson_skewness(self, mu: float | None = None) -> float:
        """Pearson's coefficient 3 * (mu - median) / stddev; NaN when stddev is zero."""
        if mu is None:
            mu = self.mean()
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return float(3 * np.float64(mu - self.median()) / np.float64(self.stddev()))

    def central_moment(self, k: int) -> float:
        """k-th central moment. Not implemented; always raises."""
        raise NotImplementedFeatureError(
            f"central_moment(k={k}) is not implemented", feature='central_moment'
        )

    def kurtosis(self) -> float:
        """Kurtosis. Not implemented; always raises."""
        raise NotImplementedFeatureError(
            "kurtosis() is not implemented", feature='kurtosis'
        )

    def range(self) -> ValueRange:
        """(min, max) of the sample."""
        return ValueRange(float(np.min(self.values)), float(np.max(self.values)))

    # --- Quartiles ---

    def approximate_interquartile_range(self) -> dict[float, float]:
        """
        Nearest-rank quartile cuts keyed by the fraction they cut at.

        left = round_half_up(0.25 * n), right = n - left. Returns
        {left / n: sorted[left - 1], right / n: sorted[right - 1]}.
        """
        n = self.n
        left = round_half_up_int(0.25 * n)
        right = n - left
        return {
            left / n: self._at(left - 1),
            right / n: self._at(right - 1),
        }

    def interpolated_interquartile_range(self) -> QuartilePair:
        """Quartiles averaged across the cut at the 25th percentile index."""
        left = self.index(percentile=25)
        right = self.n - left
        return QuartilePair(
            (self._at(left - 1) + self._at(left)) / 2,
            (self._at(right - 1) + self._at(right)) / 2,
        )

    def interquartile_range(self) -> QuartilePair:
        """Sorted values at the 25th and 75th percentile indices, no interpolation."""
        return QuartilePair(
            self._at(self.index(percentile=25)),
            self._at(self.index(percentile=75)),
        )

    # --- Rank-based (local: require an argument) ---

    def rank(self, *, value: float | None = None, percentile: float | None = None) -> int:
        """
        1-based rank of a value, or the rank implied by a percentile.

        Exactly one of ``value`` and ``percentile`` must be given.

        Parameters
        ----------
        value : float, optional
            Rank = 1 + number of observations strictly less than value.
        percentile : float, optional
            In [0, 100]. Rank = round_half_up(percentile / 100 * n + 0.5).

        Raises
        ------
        InvalidArgumentError
            If neither or both are given, or percentile is out of [0, 100].
        """
        if value is None and percentile is None:
            raise InvalidArgumentError(
                "rank() requires either value= or percentile=",
                argument='value|percentile',
            )
        if value is not None and percentile is not None:
            raise InvalidArgumentError(
                f"rank() takes value= or percentile=, not both "
                f"(got value={value}, percentile={percentile})",
                argument='value|percentile',
            )
        if value is not None:
            return int(np.searchsorted(self.sorted_values, value, side='left')) + 1
        if not 0 <= percentile <= 100:
            raise InvalidArgumentError(
                f"percentile must be in [0, 100], got {percentile}",
                argument='percentile',
            )
        return round_half_up_int(percentile / 100 * self.n + 0.5)

    def index(self, *, value: float | None = None, percentile: float | None = None) -> int:
        """0-based position: rank(...) - 1."""
        return self.rank(value=value, percentile=percentile) - 1

    def percentile(self, value: float) -> int:
        """Percentile of ``value``: ceil(rank / n * 100)."""
        # Integer ceiling division; 3 / 5 * 100 would give 60.00000000000001.
        return -(-self.rank(value=value) * 100 // self.n)

    def count(self, value: float | None = None) -> int:
        """Occurrences of ``value``, or the sample size when omitted."""
        if value is None:
            return self.n
        return int(np.count_nonzero(self.values == value))

    def __repr__(self) -> str:
        return f"StatisticsCalculator(n={self.n})"
