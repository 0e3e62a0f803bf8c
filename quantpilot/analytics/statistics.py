"""Population statistics over return series"""

import math
from typing import Sequence


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def covariance(a: Sequence[float], b: Sequence[float]) -> float:
    """Population covariance over the first min(len(a), len(b)) values."""
    n = min(len(a), len(b))
    if n == 0:
        return 0.0

    a, b = a[:n], b[:n]
    # Constant input is exactly zero, whatever rounding the mean picks up
    if min(a) == max(a) or min(b) == max(b):
        return 0.0

    mean_a = mean(a)
    mean_b = mean(b)
    return sum((x - mean_a) * (y - mean_b) for x, y in zip(a, b)) / n


def variance(values: Sequence[float]) -> float:
    """Population variance."""
    return covariance(values, values)


def stddev(values: Sequence[float]) -> float:
    """Population standard deviation."""
    return math.sqrt(variance(values))


def downside_deviation(values: Sequence[float], threshold: float = 0.0) -> float:
    """
    Root mean square of shortfalls below `threshold`

    sqrt(sum(min(0, x - threshold)^2) / n). Values above the threshold
    count as zero but stay in n.
    """
    if not values:
        return 0.0

    shortfall = sum(min(0.0, x - threshold) ** 2 for x in values)
    return math.sqrt(shortfall / len(values))


def correlation(a: Sequence[float], b: Sequence[float]) -> float:
    """Pearson correlation over aligned values; 0 when either side is flat."""
    n = min(len(a), len(b))
    a, b = a[:n], b[:n]

    var_a = variance(a)
    var_b = variance(b)
    if var_a == 0 or var_b == 0:
        return 0.0

    return covariance(a, b) / math.sqrt(var_a * var_b)


def tracking_error(a: Sequence[float], b: Sequence[float]) -> float:
    """Population standard deviation of a[i] - b[i] over the aligned window."""
    n = min(len(a), len(b))
    differences = [a[i] - b[i] for i in range(n)]
    return stddev(differences)
