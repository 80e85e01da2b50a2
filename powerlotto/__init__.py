"""
Power Lottery probability estimation.

Turns a bounded history of draws into per-number probability distributions
and suggests main / special numbers from them.
"""

__version__ = "0.1.0"
