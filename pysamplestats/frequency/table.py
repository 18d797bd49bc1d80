"""
FrequencyTable: ordered numeric-keyed frequency mapping.

Three variants share one structure:
    counts: payload = occurrences of each distinct value (sums to n)
    pmf:    payload = probability of each key (sums to 1)
    cdf:    payload = running sum in ascending key order

Tables are immutable. normalize(), cumulate() and bin() copy the source
entries into a new ordered mapping before transforming them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysamplestats.core.compute.rounding import round_half_up_array
from pysamplestats.core.compute.tolerances import FP64, ToleranceTier
from pysamplestats.core.validation import check_array, check_1d, check_positive


TableKind = Literal['counts', 'pmf', 'cdf']


class FrequencyTable(Mapping):
    """
    Immutable mapping from a numeric key to a non-negative payload.

    Keys are unique and iterate in ascending order. The table remembers
    the raw sample it was derived from so that binning can regroup the
    original observations.

    Construction:
        FrequencyTable.from_values(values)
    """

    __slots__ = ('_entries', '_kind', '_values')

    def __init__(
        self,
        entries: Mapping[float, float],
        *,
        kind: TableKind,
        values: NDArray[np.floating[Any]],
    ):
        # Copy into a fresh, key-sorted dict; the source is never aliased.
        self._entries: dict[float, float] = {
            float(k): float(entries[k]) for k in sorted(entries)
        }
        self._kind = kind
        self._values = values

    @classmethod
    def from_values(cls, values: ArrayLike) -> FrequencyTable:
        """
        Count occurrences of each distinct value.

        Parameters
        ----------
        values : array-like
            1D numeric sample.

        Returns
        -------
        FrequencyTable of kind 'counts'.
        """
        arr = check_array(values, "values")
        check_1d(arr, "values")
        arr.setflags(write=False)
        keys, counts = np.unique(arr, return_counts=True)
        return cls(dict(zip(keys.tolist(), counts.tolist())), kind='counts', values=arr)

    # --- Derivations ---

    def normalize(self) -> FrequencyTable:
        """
        Divide every payload by the sample size (PMF).

        Returns
        -------
        New FrequencyTable of kind 'pmf'.
        """
        n = self.sample_size
        entries = dict(self._entries)
        for key in entries:
            entries[key] = entries[key] / n
        return FrequencyTable(entries, kind='pmf', values=self._values)

    def cumulate(self) -> FrequencyTable:
        """
        Replace each payload with the running sum in ascending key order (CDF).

        Works on count tables (final payload equals n) and PMFs (final
        payload equals 1) alike.

        Returns
        -------
        New FrequencyTable of kind 'cdf'.
        """
        keys = list(self._entries)
        running = np.cumsum([self._entries[k] for k in keys])
        return FrequencyTable(
            dict(zip(keys, running.tolist())), kind='cdf', values=self._values
        )

    def bin(self, interval: float) -> FrequencyTable:
        """
        Group the raw sample into bins of width ``interval`` (PMF).

        Each observation is assigned to the nearest multiple of
        ``interval``; halves round up.

        Parameters
        ----------
        interval : float
            Bin width, strictly positive.

        Returns
        -------
        New FrequencyTable of kind 'pmf' keyed by bin center.
        """
        check_positive(interval, "interval")
        centers = round_half_up_array(self._values / interval) * interval
        keys, counts = np.unique(centers, return_counts=True)
        grouped = FrequencyTable(
            dict(zip(keys.tolist(), counts.tolist())),
            kind='counts',
            values=self._values,
        )
        return grouped.normalize()

    # --- Properties ---

    @property
    def kind(self) -> TableKind:
        """'counts', 'pmf' or 'cdf'."""
        return self._kind

    @property
    def sample_size(self) -> int:
        """Number of raw observations the table was derived from."""
        return int(self._values.shape[0])

    @property
    def total(self) -> float:
        """Sum of all payloads."""
        return float(sum(self._entries.values()))

    @property
    def final(self) -> float:
        """Payload at the largest key (the total for a CDF)."""
        if not self._entries:
            return 0.0
        return next(reversed(self._entries.values()))

    def is_normalized(self, tolerance: ToleranceTier = FP64) -> bool:
        """Whether the payloads sum to 1 within ``tolerance``."""
        return bool(np.isclose(self.total, 1.0, rtol=tolerance.rtol, atol=tolerance.atol))

    def to_dict(self) -> dict[float, float]:
        """Copy of the entries as a plain dict, keys ascending."""
        return dict(self._entries)

    # --- Mapping protocol ---

    def __getitem__(self, key: float) -> float:
        if key not in self._entries:
            available = list(self._entries)
            raise KeyError(
                f"FrequencyTable has no key {key!r}. Available: {available}"
            )
        return self._entries[key]

    def __iter__(self) -> Iterator[float]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"FrequencyTable(kind={self._kind!r}, keys={len(self._entries)}, "
            f"n={self.sample_size}, total={self.total:.6g})"
        )
