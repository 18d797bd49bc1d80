"""
PySampleStats: descriptive statistics over a finite numeric sample.

A consistent battery of summary values (central tendency, dispersion,
shape, rank-based measures) and frequency-table derivatives (PMF, CDF,
binned histograms) for exploratory analysis.

Submodules:
    descriptive: Sample, StatisticsCalculator, statistic registry
    frequency: FrequencyTable (counts, PMF, CDF, bins)
    core: exceptions, validation, Result envelope, numeric helpers
"""

__version__ = "0.1.0"

from pysamplestats import descriptive
from pysamplestats import frequency
from pysamplestats.descriptive import Sample, StatisticsCalculator, describe
from pysamplestats.frequency import FrequencyTable

__all__ = [
    "__version__",
    "descriptive",
    "frequency",
    "Sample",
    "StatisticsCalculator",
    "FrequencyTable",
    "describe",
]
