"""
Recency-Weighted Model for Power Lottery Prediction

Walks the history from the newest draw back to the oldest. The newest draw
contributes weight 1.0 to every number it holds; each older draw contributes
DECAY times the weight of the draw after it (1.0, 0.95, 0.9025, ...).

Scores are normalized by the total accumulated score, so the result sums
to 1 whenever anything was observed.
"""

import numpy as np

from powerlotto.records import (
    NumberDomain,
    count_matrix,
    to_distribution,
    zero_distribution,
)

DECAY = 0.95


def _draw_weights(n_draws, decay=DECAY):
    """Weights aligned with the oldest-first history (last entry is 1.0)."""
    if n_draws == 0:
        return np.zeros(0, dtype=np.float64)
    # cumulative product keeps the exact step-by-step multiplication
    newest_first = np.concatenate(([1.0], np.cumprod(np.full(n_draws - 1, decay))))
    return newest_first[::-1]


def recency_weighted(records, domain, decay=DECAY):
    if not records:
        return zero_distribution(domain)

    counts = count_matrix(records, domain)
    scores = _draw_weights(len(records), decay) @ counts
    total = scores.sum()
    if total == 0:
        return zero_distribution(domain)
    return to_distribution(scores / total, domain)


def recency_weighted_main(records):
    return recency_weighted(records, NumberDomain.MAIN)


def recency_weighted_special(records):
    return recency_weighted(records, NumberDomain.SPECIAL)
