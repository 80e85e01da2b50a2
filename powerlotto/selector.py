"""
Number selection from a probability distribution.

Ties are always broken in favour of the lower number, so the same
distribution gives the same picks on every run.
"""

TOP_MAIN = 6
TOP_SPECIAL = 1


def rank(distribution):
    """(number, weight) pairs, highest weight first, lower number first on ties."""
    return sorted(distribution.items(), key=lambda kv: (-kv[1], kv[0]))


def top_k(distribution, k):
    """The k most likely numbers, returned in ascending order."""
    if k <= 0:
        return []
    return sorted(n for n, _ in rank(distribution)[:k])


def bottom_k(distribution, k):
    """The k least likely numbers, returned in ascending order."""
    if k <= 0:
        return []
    ordered = sorted(distribution.items(), key=lambda kv: (kv[1], kv[0]))
    return sorted(n for n, _ in ordered[:k])
