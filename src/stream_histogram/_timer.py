import atexit
import functools
import timeit
from inspect import iscoroutinefunction
from time import perf_counter
from weakref import WeakSet

from stream_histogram._format import format_duration
from stream_histogram._histogram import DEFAULT_MAX_BINS, Histogram

_timers = WeakSet()


class _BetterContextDecorator:
    """
    Equivalent to contextlib.ContextDecorator but supports decorating async
    functions.  The context manager itself is still non-async.
    """

    def __call__(self, func):
        if iscoroutinefunction(func):
            @functools.wraps(func)
            async def inner(*args, **kwargs):
                with self:
                    return await func(*args, **kwargs)
        else:
            @functools.wraps(func)
            def inner(*args, **kwargs):
                with self:
                    return func(*args, **kwargs)
        return inner


class HistogramTimer(_BetterContextDecorator):
    """Latency recorder backed by a streaming Histogram

    Use to track the duration distribution of a block of code.  The object
    will log a summary when it is destroyed (or at interpreter exit).

        timer = HistogramTimer('db query')
        ...
        with timer:
            # code under test
        ...

    It can also be used as a function decorator, including on async
    functions:

        @HistogramTimer('my function')
        def foo():
            ...

    output synopsis:
        timer "foo": avg 11.9 ms, min 10.2 ms, max 14.0 ms, 50% ≤ 11.8 ms, ... in 10 samples

    Not re-entrant, and not thread safe.
    """

    def __init__(self, name, *, max_bins=DEFAULT_MAX_BINS, time_fn=perf_counter,
                 log_fn=print):
        """
        :param name: string used to annotate the timer output
        :param max_bins: bin budget of the underlying Histogram
        :param time_fn: optional function which returns the current time
        :param log_fn: optional function which records the output string
        """
        self.name = name
        self._time_fn = time_fn
        self._log_fn = log_fn
        self._hist = Histogram(max_bins=max_bins)
        self._start_time = None
        self._reported = False
        _timers.add(self)

    @property
    def histogram(self):
        """Return the Histogram of observed durations."""
        return self._hist

    def _report(self):
        report = self._hist.report()
        if report is None:
            return
        if report.total > 1:
            summary = report.summary(format_duration)
        else:
            summary = format_duration(report.max)
        self._log_fn(f'timer "{self.name}": {summary}')

    def _report_once(self):
        if not self._reported:
            self._report()
            self._reported = True

    def __del__(self):
        self._report_once()

    def __enter__(self):
        if self._start_time is not None:
            raise RuntimeError('HistogramTimer is not re-entrant')
        self._start_time = self._time_fn()

    def __exit__(self, exc_type, exc_value, traceback):
        current_time = self._time_fn()
        start_time, self._start_time = self._start_time, None
        if exc_type is None:
            self._hist.add(current_time - start_time)


def measure_overhead(timer_factory):
    """Measure the overhead of a timer instance from the given factory.

    :param timer_factory: callable which returns a new timer instance
    :return: the average duration of one observation, in seconds
    """
    timeit_timer = timeit.Timer(
        globals={'timer': timer_factory('foo', log_fn=lambda x: x)},
        stmt='with timer: pass'
    )
    n, duration = timeit_timer.autorange()
    min_duration = min([duration] + timeit_timer.repeat(number=n))
    return min_duration / n


@atexit.register
def _atexit():
    while _timers:
        _timers.pop()._report_once()
