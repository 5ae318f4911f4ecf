import math


def format_value(value, precision=3):
    """Returns value with constant significant digits.

    >>> format_value(86.0)
    '86.0'
    """
    # keep trailing zeros but don't end in decimal point
    return f'{value:#.{precision}g}'.rstrip('.')


def format_duration(duration, precision=3, delimiter=' '):
    """Returns human readable duration.

    >>> format_duration(.0507)
    '50.7 ms'
    """
    units = (('s', 1), ('ms', 1e3), ('µs', 1e6), ('ns', 1e9))
    i = len(units) - 1
    if duration > 0:
        i = max(min(-int(math.floor(math.log10(duration)) // 3), i), 0)
    symbol, scale = units[i]
    return f'{format_value(duration * scale, precision)}{delimiter}{symbol}'


def format_histogram(hist):
    """Returns text rendering of the bins, one dotted bar per line.

    Output starts with a "Total: <n>" line.  A bin holding p percent of the
    samples is rendered as its value followed by p - 1 dots.
    """
    total = hist.total
    lines = [f'Total: {total}\n']
    for value, count in hist.bins:
        size = int(count / total * 100)
        lines.append(f'{value}{"." * (size - 1)}\n')
    return ''.join(lines)
