"""Measure and report the cost of Histogram.add() and HistogramTimer.

The typical duration of one call is reported for each case.

Synopsis:
    $ python add_overhead.py
    Histogram.add() by max_bins:
        10      1.9 µs
        20      2.0 µs
        ...

    HistogramTimer(max_bins=100):    3.1 µs
"""

import random
import timeit
from functools import partial

from stream_histogram import Histogram, HistogramTimer, measure_overhead
from stream_histogram._format import format_duration


def measure_add(max_bins):
    """Return average duration of Histogram.add() on uniform random input."""
    hist = Histogram(max_bins=max_bins)
    timeit_timer = timeit.Timer(
        globals={'add': hist.add, 'random': random.random},
        stmt='add(random())'
    )
    n, duration = timeit_timer.autorange()
    min_duration = min([duration] + timeit_timer.repeat(number=n))
    return min_duration / n


def main():
    _format = partial(format_duration, precision=2)
    print('Histogram.add() by max_bins:')
    for max_bins in (10, 20, 40, 60, 80, 100):
        print(f'    {max_bins:<8d}{_format(measure_add(max_bins))}')

    print()
    duration = measure_overhead(partial(HistogramTimer, max_bins=100))
    print(f'{"HistogramTimer(max_bins=100):":33s}{_format(duration)}')


if __name__ == '__main__':
    main()
