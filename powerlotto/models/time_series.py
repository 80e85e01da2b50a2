"""
AR(1) Time-Series Model for Power Lottery Prediction

For every number, the history becomes a binary indicator series x (1.0 when
the draw held the number). A lag-1 autoregression is fitted around the
sample mean:

    phi = sum((x[i-1] - mu) * (x[i] - mu)) / sum((x[i-1] - mu) ** 2)
    c   = mu * (1 - phi)
    p   = clamp(c + phi * x[-1], 0, 1)

phi is 0 when the denominator vanishes (constant series). Each number's value
is an independent conditional probability, so the output is NOT normalized
across numbers.
"""

import numpy as np

from powerlotto.records import NumberDomain, indicator_matrix, to_distribution


def ar1_fit(series):
    """
    Fit a lag-1 autoregression to a single series.

    Returns
    -------
    (phi, intercept) tuple; (0.0, mean) for series too short or constant.
    """
    x = np.asarray(series, dtype=np.float64)
    if x.size == 0:
        return 0.0, 0.0
    mu = x.mean()
    if x.size == 1:
        return 0.0, float(mu)

    prev = x[:-1] - mu
    curr = x[1:] - mu
    denom = float(np.sum(prev * prev))
    phi = float(np.sum(prev * curr)) / denom if denom != 0 else 0.0
    return phi, float(mu * (1 - phi))


def ar1_predict(series):
    """Next-step probability for one indicator series."""
    x = np.asarray(series, dtype=np.float64)
    if x.size == 0:
        return 0.0
    if x.size == 1:
        return float(x[0])
    phi, c = ar1_fit(x)
    return float(np.clip(c + phi * x[-1], 0.0, 1.0))


def time_series(records, domain):
    indicators = indicator_matrix(records, domain)
    predictions = np.array(
        [ar1_predict(indicators[:, j]) for j in range(domain.size)],
        dtype=np.float64,
    )
    return to_distribution(predictions, domain)


def time_series_main(records):
    return time_series(records, NumberDomain.MAIN)


def time_series_special(records):
    return time_series(records, NumberDomain.SPECIAL)
