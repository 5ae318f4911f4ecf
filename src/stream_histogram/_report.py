from dataclasses import dataclass

from stream_histogram._format import format_value


@dataclass(frozen=True)
class HistogramReport:
    """Point-in-time summary of a Histogram"""
    total: int
    mean: float
    max: float
    min: float
    percent99: float
    percent90: float
    percent50: float

    @classmethod
    def from_histogram(cls, hist):
        """Return report of the histogram's current state, or None if empty."""
        values = dict(
            mean=hist.mean(),
            max=hist.max,
            min=hist.min,
            percent99=hist.quantile(.99),
            percent90=hist.quantile(.90),
            percent50=hist.quantile(.50),
        )
        if any(value is None for value in values.values()):
            return None
        return cls(total=hist.total, **values)

    def summary(self, format_fn=format_value):
        """Return one-line summary with values rendered by format_fn.

        output synopsis:
            avg 50.5, min 1.00, max 100, 50% ≤ 52.5, 90% ≤ 86.0, 99% ≤ 96.5 in 100 samples
        """
        percentiles = ((50, self.percent50), (90, self.percent90),
                       (99, self.percent99))
        return (f'avg {format_fn(self.mean)}, '
                f'min {format_fn(self.min)}, '
                f'max {format_fn(self.max)}, '
                f'{", ".join(f"{pct}% ≤ {format_fn(val)}" for pct, val in percentiles)} '
                f'in {self.total} samples')

    def __str__(self):
        return self.summary()
