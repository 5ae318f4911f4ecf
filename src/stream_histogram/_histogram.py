from bisect import bisect_left
from collections import namedtuple
from math import isfinite, sqrt

from stream_histogram._format import format_histogram
from stream_histogram._report import HistogramReport

MIN_BINS = 10
DEFAULT_MAX_BINS = 100

Bin = namedtuple('Bin', 'value count')
Bin.__doc__ = """Zero or more samples collapsed into one (value, count) point"""


class Histogram:
    """
    Streaming histogram with a bounded number of bins

    Each sample is inserted into an ascending list of bins.  When the list
    exceeds `max_bins`, the two neighboring bins with the smallest gap are
    replaced by their count-weighted mean, so memory stays bounded while
    resolution is kept where samples are dense.

    Min and max are exact.  All other statistics are computed from the
    merged bins and are approximate once more than `max_bins` distinct
    values have been added.  No error bound is tracked.

        hist = Histogram(max_bins=20)
        for x in samples:
            hist.add(x)
        print(hist.quantile(.99), hist.report())

    Not thread safe:  `add()` must not run concurrently with any other call.
    """

    def __init__(self, max_bins=DEFAULT_MAX_BINS):
        """
        :param max_bins: maximum number of bins kept.  Values below
            MIN_BINS are raised to MIN_BINS.
        """
        self._max_bins = max(max_bins, MIN_BINS)
        self._bins = []
        self._gaps = []  # item i is _bins[i+1].value - _bins[i].value
        self._total = 0
        self._min = None
        self._max = None

    def __len__(self):
        return len(self._bins)

    def __repr__(self):
        return (f'{self.__class__.__name__}(max_bins={self._max_bins}) '
                f'<{self._total} samples in {len(self._bins)} bins>')

    def __str__(self):
        return format_histogram(self)

    @staticmethod
    def _update_gaps_for_insert(gaps, bins, i):
        """update gaps array to reflect bins.insert(i, ...)"""
        value = bins[i].value
        if i > 0:
            gaps.insert(i - 1, value - bins[i - 1].value)
            if i < len(gaps):
                gaps[i] = bins[i + 1].value - value
        elif len(bins) > 1:
            gaps.insert(0, bins[1].value - value)

    @staticmethod
    def _update_gaps_for_merge(gaps, bins, i):
        """update gaps array to reflect bins[i:i+2] = (merged, )"""
        value = bins[i].value
        if 0 < i < len(gaps) - 1:
            gaps[i - 1:i + 2] = value - bins[i - 1].value, bins[i + 1].value - value
        elif i > 0:
            gaps[i - 1:i + 1] = (value - bins[i - 1].value, )
        else:
            gaps[i:i + 2] = (bins[i + 1].value - value, )

    def _merge_closest(self):
        """Merge the closest pair of neighbors if over budget"""
        bins = self._bins
        if len(bins) <= self._max_bins:
            return
        gaps = self._gaps
        # first index wins on ties
        i = gaps.index(min(gaps))
        (v0, c0), (v1, c1) = bins[i:i + 2]
        count = c0 + c1
        bins[i:i + 2] = (Bin((v0 * c0 + v1 * c1) / count, count), )
        self._update_gaps_for_merge(gaps, bins, i)

    def add(self, point):
        """Add point to histogram

        :raises ValueError: if point is NaN or infinite
        """
        if not isfinite(point):
            raise ValueError(f'cannot add non-finite value {point!r}')
        self._total += 1
        if self._min is None or point < self._min:
            self._min = point
        if self._max is None or point > self._max:
            self._max = point
        bins = self._bins
        # (point, ) sorts before any bin with value == point
        i = bisect_left(bins, (point, ))
        if i < len(bins) and bins[i].value == point:
            bins[i] = Bin(point, bins[i].count + 1)
            return
        bins.insert(i, Bin(point, 1))
        self._update_gaps_for_insert(self._gaps, bins, i)
        self._merge_closest()

    @property
    def max_bins(self):
        """Return maximum number of bins kept."""
        return self._max_bins

    @property
    def bins(self):
        """Return snapshot of the bins in ascending order of value."""
        return tuple(self._bins)

    @property
    def total(self):
        """Return number of points represented by this histogram."""
        return self._total

    @property
    def min(self):
        """Return exact minimum point, or None if empty."""
        return self._min

    @property
    def max(self):
        """Return exact maximum point, or None if empty."""
        return self._max

    def sum(self):
        """Return sum of points;  O(max_bins) complexity."""
        # plain accumulation:  builtin sum() compensates rounding on 3.12+
        result = 0.0
        for value, count in self._bins:
            result += value * count
        return result

    def mean(self):
        """Return mean, or None if empty;  O(max_bins) complexity."""
        if not self._total:
            return None
        return self.sum() / self._total

    def variance(self):
        """Return population variance, or None if empty;  O(max_bins) complexity."""
        mean = self.mean()
        if mean is None:
            return None
        sum_squares = 0.0
        for value, count in self._bins:
            sum_squares += count * (value - mean) * (value - mean)
        return sum_squares / self._total

    def std(self):
        """Return standard deviation, or None if empty;  O(max_bins) complexity."""
        variance = self.variance()
        return None if variance is None else sqrt(variance)

    def quantile(self, q):
        """Return value at given quantile fraction, or None if empty.

        The result is the smallest bin value at or below which at least
        fraction q of the samples lie.  O(max_bins) complexity.

        :raises ValueError: if q is outside [0, 1]
        """
        if not 0 <= q <= 1:
            raise ValueError('quantile value must be in the range [0, 1]')
        remaining = q * self._total
        for value, count in self._bins:
            remaining -= count
            if remaining <= 0:
                return value
        return None

    def cdf(self, x):
        """Return fraction of points <= x, or None if empty."""
        if not self._total:
            return None
        count = 0
        for value, bin_count in self._bins:
            if value <= x:
                count += bin_count
        return count / self._total

    def report(self):
        """Return HistogramReport snapshot, or None if empty."""
        return HistogramReport.from_histogram(self)
