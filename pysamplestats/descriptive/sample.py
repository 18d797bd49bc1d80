"""
Sample: an immutable numeric dataset with eagerly computed statistics.

A Sample owns its values (a read-only 1-D float64 array), a
StatisticsCalculator bound to them, and the named results of the eager
pass run at construction. Transformations never mutate a Sample; each
returns a new one carrying the same statistic selection.
"""

from __future__ import annotations

import warnings
from typing import Any, Iterable, Iterator, Mapping

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysamplestats.core.compute.rounding import round_half_up_array
from pysamplestats.core.compute.timing import Timer
from pysamplestats.core.exceptions import (
    InvalidArgumentError,
    NotImplementedFeatureError,
    ValidationError,
)
from pysamplestats.core.result import Result
from pysamplestats.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_count,
    check_finite,
    check_min_samples,
)
from pysamplestats.descriptive.calculator import StatisticsCalculator
from pysamplestats.descriptive.registry import resolve_statistics
from pysamplestats.descriptive.solution import (
    SampleStatistics,
    format_summary,
    undefined_statistics,
)


class Sample:
    """
    A sample of real-valued observations.

    Parameters
    ----------
    values : array-like
        1-D numeric data, at least one observation, all finite. Samples
        returned by transformations may hold inf or NaN where the
        arithmetic overflowed or divided by zero.
    statistics : iterable of str, optional
        Statistic names to compute at construction. None (default) computes
        every eager statistic in the registry; an empty tuple computes
        nothing.

    Construction:
        Sample([1, 2, 3])
        Sample.from_array(series, statistics=('mean', 'stddev'))
    """

    def __init__(
        self,
        values: ArrayLike,
        statistics: Iterable[str] | None = None,
    ):
        data = check_array(values, "values")
        check_1d(data, "values")
        check_min_samples(data, 1, "values")
        check_finite(data, "values")
        self._build(data, statistics)

    @classmethod
    def _from_computed(
        cls,
        values: ArrayLike,
        statistics: Iterable[str] | None = None,
    ) -> Sample:
        """
        Sample over values produced by arithmetic on validated observations.

        Overflow or 0/0 in that arithmetic can yield inf or NaN; those are
        kept and surface as warnings of the eager pass instead of failing
        the finiteness check applied to caller data.
        """
        data = check_array(values, "values")
        check_1d(data, "values")
        check_min_samples(data, 1, "values")
        sample = cls.__new__(cls)
        sample._build(data, statistics)
        return sample

    def _build(self, data: NDArray[np.floating[Any]], statistics) -> None:
        data.setflags(write=False)

        specs = resolve_statistics(statistics)

        self._values: NDArray[np.floating[Any]] = data
        self._selection: tuple[str, ...] | None = (
            None if statistics is None else tuple(spec.name for spec in specs)
        )
        self._calculator = StatisticsCalculator(self)
        self._result = self._precalculate(specs)

    @classmethod
    def from_array(
        cls,
        data,
        statistics: Iterable[str] | None = None,
    ) -> Sample:
        """
        Build a Sample from array-like data.

        Accepts lists, numpy arrays, and pandas-like objects exposing a
        ``.values`` attribute.
        """
        if hasattr(data, 'values') and not isinstance(data, (np.ndarray, Mapping)):
            data = data.values
        return cls(np.asarray(data, dtype=np.float64).ravel(), statistics=statistics)

    def _precalculate(self, specs) -> Result[SampleStatistics]:
        """Run each selected statistic once and collect the results."""
        timer = Timer()
        timer.start()

        computed: dict[str, Any] = {}
        for spec in specs:
            with timer.section(spec.name):
                computed[spec.name] = spec.compute(self._calculator)

        timer.stop()

        warnings_list = [
            f"{name}: non-finite ({computed[name]}) for this sample"
            for name in undefined_statistics(computed)
        ]

        return Result(
            params=SampleStatistics(values=computed),
            info={'n': self.n, 'computed': list(computed)},
            timing=timer.result(),
            backend_name='python_eager',
            warnings=tuple(warnings_list),
        )

    def _derive(self, values: ArrayLike) -> Sample:
        """New Sample over ``values`` with this sample's statistic selection."""
        return Sample._from_computed(values, statistics=self._selection)

    # --- Accessors ---

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Observations in input order (read-only)."""
        return self._values

    @property
    def n(self) -> int:
        """Number of observations."""
        return int(self._values.shape[0])

    @property
    def calculator(self) -> StatisticsCalculator:
        """Calculator bound to this sample, for on-demand statistics."""
        return self._calculator

    @property
    def statistics(self) -> Mapping[str, Any]:
        """Read-only mapping of precomputed statistic name -> result."""
        return self._result.params.values

    @property
    def computed(self) -> tuple[str, ...]:
        """Names of the precomputed statistics."""
        return self._result.params.names

    @property
    def selection(self) -> tuple[str, ...] | None:
        """The statistic selection passed at construction (None = default)."""
        return self._selection

    @property
    def result(self) -> Result[SampleStatistics]:
        """Envelope of the eager pass, with timing and warnings."""
        return self._result

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __getitem__(self, name: str) -> Any:
        """
        Precomputed statistic by name.

        Raises:
            KeyError: If the statistic was not computed, listing what was
        """
        if name not in self.statistics:
            raise KeyError(
                f"Sample has no precomputed statistic '{name}'. "
                f"Available: {list(self.computed)}"
            )
        return self.statistics[name]

    def __contains__(self, name: str) -> bool:
        return name in self.statistics

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def __array__(self, dtype=None, copy=None) -> NDArray:
        return np.array(self._values, dtype=dtype, copy=True)

    # --- Transformations ---

    def normalize(self, *, top: float | None = None, bottom: float | None = None) -> Sample:
        """
        Rescale every value by one ratio.

        By default the maximum maps to ``top`` (1). If ``bottom`` is given
        instead, the minimum maps to ``bottom``.

        Raises
        ------
        InvalidArgumentError
            If both top and bottom are given.
        ValidationError
            If the anchoring max (or min) is zero.
        """
        if top is not None and bottom is not None:
            raise InvalidArgumentError(
                f"normalize() takes top= or bottom=, not both "
                f"(got top={top}, bottom={bottom})",
                argument='top|bottom',
            )
        if bottom is not None:
            anchor, target, label = float(np.min(self._values)), bottom, 'minimum'
        else:
            target = 1 if top is None else top
            anchor, label = float(np.max(self._values)), 'maximum'

        if anchor == 0:
            raise ValidationError(f"normalize(): sample {label} is 0, cannot rescale")
        with np.errstate(over='ignore'):
            scaled = self._values * (target / anchor)
        return self._derive(scaled)

    def round(self, digits: int = 0) -> Sample:
        """
        Round every value to ``digits`` decimal places, halves up.

        Values too large to scale by 10 ** digits come back as inf.
        """
        check_count(digits, "digits")
        with np.errstate(over='ignore', invalid='ignore'):
            rounded = round_half_up_array(self._values, digits)
        return self._derive(rounded)

    def difference(
        self,
        other: Sample | ArrayLike,
        *,
        relative: bool = False,
        absolute: bool = False,
    ) -> Sample:
        """
        Element-wise comparison against ``other``.

        Parameters
        ----------
        other : Sample or array-like
            Same length as this sample.
        relative : bool
            other[i] / self[i]. Takes precedence over ``absolute``.
        absolute : bool
            |other[i] - self[i]|.

        Default is the signed difference other[i] - self[i]. A relative
        difference against a zero in this sample is inf (NaN for 0 / 0);
        the resulting Sample reports it through its warnings.

        Raises
        ------
        ValidationError
            If ``other`` holds NaN or Inf.
        LengthMismatchError
            If the lengths differ.
        """
        if isinstance(other, Sample):
            other_values = other.values
        else:
            other_values = check_array(other, "other")
            check_finite(other_values, "other")
        check_1d(other_values, "other")
        check_consistent_length(self._values, other_values, names=("self", "other"))

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            if relative:
                diff = other_values / self._values
            elif absolute:
                diff = np.abs(other_values - self._values)
            else:
                diff = other_values - self._values
        return self._derive(diff)

    def partition(self, size: int) -> list[Sample]:
        """
        Split into consecutive Samples of ``size`` values each.

        Order is preserved; the last chunk holds the remainder and may be
        shorter than ``size``.
        """
        check_count(size, "size", minimum=1)
        return [
            self._derive(self._values[start:start + size])
            for start in range(0, self.n, size)
        ]

    def sample(
        self,
        n: int,
        *,
        replacement: bool = False,
        seed: int | None = None,
    ) -> Sample:
        """
        Draw ``n`` values at random.

        Parameters
        ----------
        n : int
            Number of values to draw, at least 1. Without replacement it
            cannot exceed the sample size.
        replacement : bool
            Draw with replacement.
        seed : int, optional
            Seed for numpy's default Generator.
        """
        check_count(n, "n", minimum=1)
        if not replacement and n > self.n:
            raise ValidationError(
                f"n: cannot draw {n} values without replacement from a sample of {self.n}"
            )
        rng = np.random.default_rng(seed)
        return self._derive(rng.choice(self._values, size=n, replace=replacement))

    def resample(
        self,
        n: int,
        *,
        replacement: bool = False,
        seed: int | None = None,
    ) -> Sample:
        raise NotImplementedFeatureError("resample() is not implemented", feature='resample')

    def trim(
        self,
        *,
        percentage: float | None = None,
        lt: float | None = None,
        gt: float | None = None,
        stddev: float | None = None,
    ) -> Sample:
        raise NotImplementedFeatureError("trim() is not implemented", feature='trim')

    # --- Reporting ---

    def summary(self) -> str:
        """Text report of the precomputed statistics."""
        if self.warnings:
            for message in self.warnings:
                warnings.warn(message, RuntimeWarning, stacklevel=2)
        return format_summary(self.n, self.statistics)

    def __repr__(self) -> str:
        stats_str = ", ".join(self.computed) if self.computed else "none"
        return f"Sample(n={self.n}, computed=[{stats_str}])"
