"""
Draw Records and Number Domains for the Power Lottery

A draw holds six main numbers (1-38) and an optional special number (1-8).
Records are immutable and ordered oldest-first wherever a sequence of them
is passed around.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np


MIN_MAIN = 1
MAX_MAIN = 38
MIN_SPECIAL = 1
MAX_SPECIAL = 8
MAIN_SLOTS = 6
DEFAULT_HISTORY = 100


@dataclass(frozen=True)
class DrawRecord:
    """One historical draw."""

    main_numbers: Tuple[int, ...]
    special_number: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "main_numbers", tuple(int(n) for n in self.main_numbers))
        if self.special_number is not None:
            object.__setattr__(self, "special_number", int(self.special_number))

    @property
    def has_special(self) -> bool:
        return self.special_number is not None

    def range_violations(self):
        """
        (column, value) for every number outside its domain, in sheet order.

        Columns 1-6 are the main numbers, column 7 the special number.
        """
        bad = [(i + 1, n) for i, n in enumerate(self.main_numbers)
               if not NumberDomain.MAIN.contains(n)]
        if self.has_special and not NumberDomain.SPECIAL.contains(self.special_number):
            bad.append((MAIN_SLOTS + 1, self.special_number))
        return bad


class NumberDomain(Enum):
    """The two closed number ranges of the game."""

    MAIN = (MIN_MAIN, MAX_MAIN)
    SPECIAL = (MIN_SPECIAL, MAX_SPECIAL)

    @property
    def low(self) -> int:
        return self.value[0]

    @property
    def high(self) -> int:
        return self.value[1]

    @property
    def size(self) -> int:
        return self.high - self.low + 1

    @property
    def numbers(self):
        return list(range(self.low, self.high + 1))

    def contains(self, n) -> bool:
        return self.low <= n <= self.high

    def observed(self, record: DrawRecord):
        """Numbers of this domain drawn in `record` (duplicates kept)."""
        if self is NumberDomain.MAIN:
            return list(record.main_numbers)
        return [record.special_number] if record.has_special else []


# ── Array helpers ────────────────────────────────────────────────────────

def count_matrix(records: Sequence[DrawRecord], domain: NumberDomain) -> np.ndarray:
    """
    Build a (len(records), domain.size) matrix of occurrence counts.

    Row i belongs to records[i]; column j belongs to number domain.low + j.
    """
    counts = np.zeros((len(records), domain.size), dtype=np.float64)
    for i, record in enumerate(records):
        for n in domain.observed(record):
            counts[i, n - domain.low] += 1
    return counts


def indicator_matrix(records: Sequence[DrawRecord], domain: NumberDomain) -> np.ndarray:
    """Same layout as count_matrix, but 1.0 where a number appeared at all."""
    return (count_matrix(records, domain) > 0).astype(np.float64)


def to_distribution(weights, domain: NumberDomain) -> dict:
    """Map a weight array indexed by `number - domain.low` to {number: weight}."""
    return {n: float(weights[n - domain.low]) for n in domain.numbers}


def zero_distribution(domain: NumberDomain) -> dict:
    return {n: 0.0 for n in domain.numbers}
