"""
Empirical quantiles over an unsorted sample set.

The sample array is re-sorted on every call. At 10,000 draws and a handful of
lookups per recommendation this is nowhere near the dominant cost.
"""

import math
from typing import Dict

import numpy as np

from airport_timing.monte_carlo.config import PERCENTILES


def compute_quantile(samples, q: float) -> float:
    """
    Linearly interpolated empirical quantile.

    Args:
        samples: Sequence or numpy array of at least one sample
        q: Quantile in [0, 1]

    Returns:
        float value at quantile q

    Raises:
        ValueError: if q is outside [0, 1] or samples is empty
    """
    if q is None or math.isnan(q) or not 0.0 <= q <= 1.0:
        raise ValueError(f"quantile must be in [0, 1], got {q}")

    ordered = np.sort(np.asarray(samples, dtype=float).ravel())
    if ordered.size == 0:
        raise ValueError("samples must contain at least one value")

    position = q * (ordered.size - 1)
    lower_index = int(math.floor(position))
    upper_index = min(lower_index + 1, ordered.size - 1)
    fraction = position - lower_index

    lower = ordered[lower_index]
    upper = ordered[upper_index]
    return float(lower + fraction * (upper - lower))


def summarize_samples(samples) -> Dict[str, float]:
    """Mean, population standard deviation and the configured percentiles."""
    values = np.asarray(samples, dtype=float)
    if values.size == 0:
        raise ValueError("samples must contain at least one value")

    summary = {
        "count": int(values.size),
        "mean": float(np.mean(values)),
        "std": float(np.std(values)),
    }
    for percentile in PERCENTILES:
        summary[f"p{percentile}"] = compute_quantile(values, percentile / 100)
    return summary
