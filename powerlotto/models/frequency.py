"""
Frequency Models for Power Lottery Prediction

Plain frequency: the share of observed slots taken by each number.

    main    : count[n] / (draws * 6)
    special : count[n] / draws that carried a special number

Windowed frequency applies the same estimate to the most recent W draws only
(W = 30 and W = 10 are the configured windows).
"""

import numpy as np

from powerlotto.records import (
    MAIN_SLOTS,
    NumberDomain,
    count_matrix,
    to_distribution,
    zero_distribution,
)

WINDOWS = (30, 10)
LONG_WINDOW, SHORT_WINDOW = WINDOWS


def _slot_total(records, domain):
    if domain is NumberDomain.MAIN:
        return len(records) * MAIN_SLOTS
    return sum(1 for r in records if r.has_special)


def frequency(records, domain):
    """Frequency distribution over `domain`; all zeros if nothing was observed."""
    if not records:
        return zero_distribution(domain)

    total = _slot_total(records, domain)
    if total == 0:
        return zero_distribution(domain)

    counts = count_matrix(records, domain).sum(axis=0)
    return to_distribution(counts / float(total), domain)


def windowed_frequency(records, domain, window):
    """Frequency over the last `window` draws (or all of them, if fewer)."""
    if int(window) != window or window < 1:
        raise ValueError(f"window must be a positive integer, got {window}")
    recent = list(records)[-int(window):]
    return frequency(recent, domain)


def frequency_main(records):
    return frequency(records, NumberDomain.MAIN)


def frequency_special(records):
    return frequency(records, NumberDomain.SPECIAL)


def last30_main(records):
    return windowed_frequency(records, NumberDomain.MAIN, LONG_WINDOW)


def last30_special(records):
    return windowed_frequency(records, NumberDomain.SPECIAL, LONG_WINDOW)


def last10_main(records):
    return windowed_frequency(records, NumberDomain.MAIN, SHORT_WINDOW)


def last10_special(records):
    return windowed_frequency(records, NumberDomain.SPECIAL, SHORT_WINDOW)


def observed_counts(records, domain):
    """Raw occurrence count per number, used for report tables."""
    if not records:
        return {n: 0 for n in domain.numbers}
    counts = count_matrix(records, domain).sum(axis=0).astype(np.int64)
    return {n: int(counts[n - domain.low]) for n in domain.numbers}
