"""
Hybrid Model for Power Lottery Prediction

Equal blend of the full-history frequency and recency-weighted estimates:

    hybrid[n] = (frequency[n] + recency_weighted[n]) / 2
"""

from powerlotto.models.frequency import frequency
from powerlotto.models.recency import recency_weighted
from powerlotto.records import NumberDomain


def hybrid(records, domain):
    freq = frequency(records, domain)
    recent = recency_weighted(records, domain)
    return {n: (freq[n] + recent[n]) / 2 for n in domain.numbers}


def hybrid_main(records):
    return hybrid(records, NumberDomain.MAIN)


def hybrid_special(records):
    return hybrid(records, NumberDomain.SPECIAL)
