from ._histogram import Bin, Histogram, MIN_BINS, DEFAULT_MAX_BINS
from ._report import HistogramReport
from ._format import format_histogram
from ._timer import HistogramTimer, measure_overhead
from ._version import __version__

def _metadata_fix():
    # don't do this for Sphinx case because it breaks "bysource" member ordering
    import sys  # pylint: disable=import-outside-toplevel
    if 'sphinx' in sys.modules:
        return

    for name, value in globals().items():
        if not name.startswith('_') and callable(value):
            value.__module__ = __name__

_metadata_fix()
