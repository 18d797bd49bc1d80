"""
Tests for Sample: construction, the eager pass, and transformations.
"""

import math

import numpy as np
import pytest

from pysamplestats.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    LengthMismatchError,
    NotImplementedFeatureError,
    ValidationError,
)
from pysamplestats.descriptive import DEFAULT_STATISTICS, Sample, SampleStatistics
from pysamplestats.frequency import FrequencyTable


class TestConstruction:

    def test_values_frozen(self, odd_values):
        sample = Sample(odd_values)
        assert sample.values.dtype == np.float64
        with pytest.raises(ValueError):
            sample.values[0] = 10.0

    def test_input_not_aliased(self):
        data = np.array([1.0, 2.0, 3.0])
        sample = Sample(data, statistics=())
        data[0] = 99.0
        assert sample.values[0] == 1.0

    def test_len_and_iter(self, odd_values):
        sample = Sample(odd_values, statistics=())
        assert len(sample) == 5
        assert sample.n == 5
        assert list(sample) == odd_values

    def test_rejects_empty(self):
        with pytest.raises(ValidationError, match="at least 1"):
            Sample([])

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Sample([1.0, np.nan])

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            Sample([[1, 2], [3, 4]])

    def test_from_array_pandas_like(self):
        class FakeSeries:
            values = np.array([[1.0], [2.0], [3.0]])

        sample = Sample.from_array(FakeSeries(), statistics=('mean',))
        assert sample['mean'] == 2.0

    def test_repr(self):
        r = repr(Sample([1, 2], statistics=('mean', 'count')))
        assert r == "Sample(n=2, computed=[mean, count])"


class TestEagerPass:

    def test_default_computes_every_eager_statistic(self, odd_values):
        sample = Sample(odd_values)
        assert sample.computed == DEFAULT_STATISTICS
        assert sample['mean'] == 3
        assert sample['median'] == 3
        assert sample['has_true_median'] is True
        assert sample['count'] == 5

    def test_local_statistics_not_precomputed(self, odd_values):
        sample = Sample(odd_values)
        for name in ('index', 'rank', 'percentile'):
            assert name not in sample

    def test_reserved_statistics_not_precomputed(self, odd_values):
        sample = Sample(odd_values)
        assert 'kurtosis' not in sample
        assert 'central_moment' not in sample

    def test_explicit_selection(self, odd_values):
        sample = Sample(odd_values, statistics=('variance', 'mean'))
        assert sample.computed == ('mean', 'variance')
        assert sample['variance'] == 2

    def test_empty_selection(self, odd_values):
        sample = Sample(odd_values, statistics=())
        assert sample.computed == ()
        assert dict(sample.statistics) == {}

    def test_missing_statistic_key_error(self, odd_values):
        sample = Sample(odd_values, statistics=('mean',))
        with pytest.raises(KeyError, match="Available"):
            sample['stddev']

    def test_statistics_read_only(self, odd_values):
        sample = Sample(odd_values, statistics=('mean',))
        with pytest.raises(TypeError):
            sample.statistics['mean'] = 0

    def test_pmf_and_cdf_cached_tables(self, bimodal_values):
        sample = Sample(bimodal_values)
        assert isinstance(sample['pmf'], FrequencyTable)
        assert sample['pmf'] is sample.calculator.pmf()
        assert sample['cdf'].final == 5
        assert sample['modes'] == [1, 2]
        assert sample['is_multimodal'] is True

    def test_result_envelope(self, odd_values):
        sample = Sample(odd_values, statistics=('mean', 'median'))
        result = sample.result
        assert isinstance(result.params, SampleStatistics)
        assert result.backend_name == 'python_eager'
        assert result.info == {'n': 5, 'computed': ['mean', 'median']}
        assert {'total_seconds', 'mean', 'median'} <= set(result.timing)

    def test_nan_statistics_become_warnings(self):
        sample = Sample([5, 5, 5])
        assert math.isnan(sample['skewness'])
        assert sample.result.has_warning('skewness')
        assert sample.result.has_warning('pearson_skewness')
        assert not sample.result.has_warning('mean:')

    def test_unknown_statistic(self, odd_values):
        with pytest.raises(ValidationError, match="Unknown statistic 'avg'"):
            Sample(odd_values, statistics=('avg',))

    def test_requesting_local_statistic(self, odd_values):
        with pytest.raises(InvalidArgumentError):
            Sample(odd_values, statistics=('rank',))

    def test_requesting_reserved_statistic(self, odd_values):
        with pytest.raises(NotImplementedFeatureError):
            Sample(odd_values, statistics=('kurtosis',))


class TestLargeMagnitude:
    """Finite input whose deviation powers overflow float64."""

    def test_cubed_deviations_overflow(self):
        sample = Sample([0.0, 2e103])
        assert sample['mean'] == pytest.approx(1e103)
        assert sample['variance'] == pytest.approx(1e206)
        assert math.isnan(sample['skewness'])
        assert sample.result.has_warning('skewness: non-finite')
        assert not sample.result.has_warning('variance')

    def test_variance_overflows_to_inf(self):
        sample = Sample([0.0, 1e155], statistics=('mean',))
        assert sample.calculator.variance() == math.inf
        assert sample.calculator.stddev() == math.inf

    def test_overflow_reported_by_eager_pass(self):
        sample = Sample([0.0, 1e155])
        assert sample['variance'] == math.inf
        assert sample.result.has_warning('variance: non-finite (inf)')

    def test_round_overflow_kept(self):
        rounded = Sample([1e307, 1.0]).round(2)
        assert math.isinf(rounded.values[0])
        assert rounded.values[1] == 1.0
        assert rounded.result.has_warning('mean')


class TestNormalize:

    def test_default_top(self):
        sample = Sample([2, 4, 8]).normalize()
        np.testing.assert_allclose(sample.values, [0.25, 0.5, 1.0])

    def test_explicit_top(self):
        sample = Sample([2, 4, 8]).normalize(top=100)
        np.testing.assert_allclose(sample.values, [25, 50, 100])

    def test_bottom(self):
        sample = Sample([2, 4, 8]).normalize(bottom=1)
        np.testing.assert_allclose(sample.values, [1, 2, 4])

    def test_both_raise(self):
        with pytest.raises(InvalidArgumentError, match="not both"):
            Sample([2, 4]).normalize(top=1, bottom=1)

    def test_zero_anchor(self):
        with pytest.raises(ValidationError, match="maximum is 0"):
            Sample([-2, 0]).normalize()

    def test_original_unchanged(self):
        sample = Sample([2, 4, 8])
        sample.normalize()
        np.testing.assert_array_equal(sample.values, [2, 4, 8])


class TestRound:

    def test_default_digits(self):
        np.testing.assert_array_equal(
            Sample([0.5, 1.5, 2.4, 2.6]).round().values, [1, 2, 2, 3]
        )

    def test_digits(self):
        np.testing.assert_allclose(
            Sample([3.14159, 2.71828]).round(2).values, [3.14, 2.72]
        )

    def test_rejects_float_digits(self):
        with pytest.raises(ValidationError):
            Sample([1.0]).round(1.5)


class TestDifference:

    def test_signed(self):
        a, b = Sample([2, 4]), Sample([3, 8])
        np.testing.assert_array_equal(a.difference(b).values, [1, 4])

    def test_signed_negative(self):
        a, b = Sample([3, 8]), Sample([2, 4])
        np.testing.assert_array_equal(a.difference(b).values, [-1, -4])

    def test_absolute(self):
        a, b = Sample([3, 8]), Sample([2, 4])
        np.testing.assert_array_equal(a.difference(b, absolute=True).values, [1, 4])

    def test_relative(self):
        a, b = Sample([2, 4]), Sample([3, 8])
        np.testing.assert_allclose(a.difference(b, relative=True).values, [1.5, 2])

    def test_relative_takes_precedence(self):
        a, b = Sample([2, 4]), Sample([3, 8])
        result = a.difference(b, relative=True, absolute=True)
        np.testing.assert_allclose(result.values, [1.5, 2])

    def test_accepts_array(self):
        np.testing.assert_array_equal(Sample([2, 4]).difference([3, 8]).values, [1, 4])

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError) as excinfo:
            Sample([1, 2, 3]).difference(Sample([1, 2]))
        assert excinfo.value.expected_length == 3
        assert excinfo.value.actual_length == 2

    def test_relative_with_zero_is_inf(self):
        result = Sample([0, 1]).difference(Sample([1, 1]), relative=True)
        assert result.values[0] == math.inf
        assert result.values[1] == 1.0
        assert result.result.has_warning('mean')

    def test_relative_zero_over_zero_is_nan(self):
        result = Sample([0, 2]).difference([0, 4], relative=True, absolute=True)
        assert math.isnan(result.values[0])
        assert result.values[1] == 2.0

    def test_rejects_non_finite_other(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Sample([1, 2]).difference([np.nan, 1])


class TestPartition:

    def test_chunk_size_with_remainder(self):
        parts = Sample([1, 2, 3, 4, 5]).partition(2)
        assert [list(p) for p in parts] == [[1, 2], [3, 4], [5]]

    def test_exact_division(self):
        parts = Sample([1, 2, 3, 4]).partition(2)
        assert [p.n for p in parts] == [2, 2]

    def test_size_larger_than_sample(self):
        parts = Sample([1, 2]).partition(10)
        assert len(parts) == 1
        assert list(parts[0]) == [1, 2]

    def test_rejects_zero(self):
        with pytest.raises(ValidationError):
            Sample([1, 2]).partition(0)


class TestSampling:

    def test_without_replacement_draws_distinct_positions(self):
        source = Sample(list(range(20)))
        drawn = source.sample(20, seed=1)
        assert sorted(drawn) == list(range(20))

    def test_with_replacement_may_exceed_size(self):
        drawn = Sample([1, 2, 3]).sample(10, replacement=True, seed=0)
        assert drawn.n == 10
        assert set(drawn) <= {1.0, 2.0, 3.0}

    def test_seed_reproducible(self):
        source = Sample(list(range(100)))
        a = source.sample(5, seed=7)
        b = source.sample(5, seed=7)
        np.testing.assert_array_equal(a.values, b.values)

    def test_too_many_without_replacement(self):
        with pytest.raises(ValidationError, match="without replacement"):
            Sample([1, 2]).sample(3)

    def test_rejects_zero(self):
        with pytest.raises(ValidationError):
            Sample([1, 2]).sample(0)


class TestNotImplemented:

    def test_resample(self):
        with pytest.raises(NotImplementedFeatureError) as excinfo:
            Sample([1, 2]).resample(2)
        assert excinfo.value.feature == 'resample'

    def test_trim(self):
        with pytest.raises(NotImplementedFeatureError) as excinfo:
            Sample([1, 2]).trim(percentage=10)
        assert excinfo.value.feature == 'trim'


class TestSelectionPropagates:

    @pytest.mark.parametrize("transform", [
        lambda s: s.normalize(),
        lambda s: s.round(1),
        lambda s: s.difference(Sample([1, 1, 1, 1])),
        lambda s: s.partition(2)[0],
        lambda s: s.sample(2, seed=3),
    ])
    def test_explicit_selection(self, transform):
        source = Sample([1, 2, 3, 4], statistics=('mean', 'range'))
        assert transform(source).computed == ('mean', 'range')

    def test_default_selection(self):
        derived = Sample([1, 2, 3, 4]).normalize()
        assert derived.selection is None
        assert derived.computed == DEFAULT_STATISTICS


class TestSummary:

    def test_lists_computed_statistics(self):
        text = Sample([1, 2, 3], statistics=('mean', 'range')).summary()
        assert text.splitlines()[0] == "Sample (n=3)"
        assert "mean" in text
        assert "2.000000" in text
        assert "(1.000000, 3.000000)" in text

    def test_empty_selection(self):
        assert "no statistics computed" in Sample([1], statistics=()).summary()

    def test_warns_on_undefined(self):
        with pytest.warns(RuntimeWarning, match="skewness"):
            Sample([5, 5]).summary()
