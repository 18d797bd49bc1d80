"""
Eager-pass payload and text report for a Sample.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

import numpy as np

from pysamplestats.frequency.table import FrequencyTable


@dataclass(frozen=True)
class SampleStatistics:
    """
    Parameter payload of a Sample's eager pass.

    ``values`` maps each computed statistic name to its result, in
    registry order. Read-only.
    """
    values: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        if not isinstance(self.values, MappingProxyType):
            object.__setattr__(self, 'values', MappingProxyType(dict(self.values)))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self.values)


def undefined_statistics(values: Mapping[str, Any]) -> list[str]:
    """Names of scalar float results that came out NaN or infinite."""
    return [
        name for name, value in values.items()
        if isinstance(value, float) and not np.isfinite(value)
    ]


def _format_value(value: Any) -> str:
    if isinstance(value, FrequencyTable):
        return repr(value)
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        return f"{value:.6f}"
    if isinstance(value, tuple):
        return "(" + ", ".join(_format_value(v) for v in value) + ")"
    if isinstance(value, list):
        return "[" + ", ".join(_format_value(v) for v in value) + "]"
    if isinstance(value, dict):
        return "{" + ", ".join(
            f"{k:g}: {_format_value(v)}" for k, v in value.items()
        ) + "}"
    return str(value)


def format_summary(n: int, values: Mapping[str, Any]) -> str:
    """Two-column text report of computed statistics."""
    lines = [f"Sample (n={n})"]
    if not values:
        lines.append("  (no statistics computed)")
        return "\n".join(lines)

    label_width = max(len(name) for name in values)
    for name, value in values.items():
        lines.append(f"  {name.ljust(label_width)}  {_format_value(value)}")
    return "\n".join(lines)
