"""
Power Lottery Estimators

Available models:
- frequency: Share of observed slots per number (full history or a recent window)
- recency: Exponentially decayed counts, newest draw weighted highest
- hybrid: Equal blend of frequency and recency-weighted estimates
- time_series: Per-number AR(1) fit on the draw/no-draw indicator series

Every estimator maps (records, domain) -> {number: weight}.
"""

from . import frequency
from . import recency
from . import hybrid
from . import time_series

__all__ = [
    "frequency",
    "recency",
    "hybrid",
    "time_series",
]
