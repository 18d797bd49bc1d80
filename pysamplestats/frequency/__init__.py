"""
Frequency tables.

Public API:
    FrequencyTable.from_values(values)  - raw counts
    table.normalize()                   - PMF
    table.cumulate()                    - CDF
    table.bin(interval)                 - binned PMF keyed by bin center
"""

from pysamplestats.frequency.table import FrequencyTable, TableKind

__all__ = [
    "FrequencyTable",
    "TableKind",
]
