"""
Prediction Pipeline for the Power Lottery

Runs the chosen estimator over both number domains and derives the suggested
numbers:

    predicted main      : top 6 of the main distribution
    predicted special   : top 1 of the special distribution
    least likely main   : bottom 6 of the main distribution
    least likely special: bottom 1 of the special distribution
"""
from enum import IntEnum
from functools import partial

from powerlotto.models.frequency import (
    LONG_WINDOW,
    SHORT_WINDOW,
    frequency,
    windowed_frequency,
)
from powerlotto.models.hybrid import hybrid
from powerlotto.models.recency import recency_weighted
from powerlotto.models.time_series import time_series
from powerlotto.records import NumberDomain
from powerlotto.selector import TOP_MAIN, TOP_SPECIAL, bottom_k, rank, top_k


class AnalysisMethod(IntEnum):
    FREQUENCY = 1
    RECENCY_WEIGHTED = 2
    LAST30_FREQUENCY = 3
    LAST10_FREQUENCY = 4
    HYBRID = 5
    TIME_SERIES = 6


class InvalidMethodError(ValueError):
    """Raised for a method selection that is not an AnalysisMethod."""


METHOD_LABELS = {
    AnalysisMethod.FREQUENCY: "Frequency based probability",
    AnalysisMethod.RECENCY_WEIGHTED: "Recency weighted probability",
    AnalysisMethod.LAST30_FREQUENCY: f"Frequency over the last {LONG_WINDOW} draws",
    AnalysisMethod.LAST10_FREQUENCY: f"Frequency over the last {SHORT_WINDOW} draws",
    AnalysisMethod.HYBRID: "Hybrid (frequency + recency weighted)",
    AnalysisMethod.TIME_SERIES: "Time series (AR(1)) probability",
}

ESTIMATORS = {
    AnalysisMethod.FREQUENCY: frequency,
    AnalysisMethod.RECENCY_WEIGHTED: recency_weighted,
    AnalysisMethod.LAST30_FREQUENCY: partial(windowed_frequency, window=LONG_WINDOW),
    AnalysisMethod.LAST10_FREQUENCY: partial(windowed_frequency, window=SHORT_WINDOW),
    AnalysisMethod.HYBRID: hybrid,
    AnalysisMethod.TIME_SERIES: time_series,
}


def parse_method(value):
    """Turn a menu choice (e.g. "2", 2, "hybrid") into an AnalysisMethod."""
    if isinstance(value, AnalysisMethod):
        return value
    text = str(value).strip()
    try:
        return AnalysisMethod(int(text))
    except ValueError:
        pass
    try:
        return AnalysisMethod[text.upper().replace("-", "_")]
    except KeyError:
        raise InvalidMethodError(f"Invalid choice: {value!r}") from None


def estimate(records, method):
    """Return (main_distribution, special_distribution) for `method`."""
    if not isinstance(method, AnalysisMethod):
        raise InvalidMethodError(f"Unknown analysis method: {method!r}")
    estimator = ESTIMATORS[method]
    return (
        estimator(records, NumberDomain.MAIN),
        estimator(records, NumberDomain.SPECIAL),
    )


def predict(records, method=AnalysisMethod.FREQUENCY, verbose=False):
    """
    Estimate both distributions and derive the suggested numbers.

    Parameters
    ----------
    records : sequence of DrawRecord
        Validated history, oldest first.
    method : AnalysisMethod

    Returns
    -------
    dict with:
        'method', 'model_name'
        'main_probabilities', 'special_probabilities': {number: weight}
        'main_rankings', 'special_rankings': list of (number, weight)
        'predicted_main', 'least_likely_main': sorted lists of 6 numbers
        'predicted_special', 'least_likely_special': single numbers
    """
    main_probs, special_probs = estimate(records, method)

    predicted_main = top_k(main_probs, TOP_MAIN)
    predicted_special = top_k(special_probs, TOP_SPECIAL)[0]
    least_main = bottom_k(main_probs, TOP_MAIN)
    least_special = bottom_k(special_probs, TOP_SPECIAL)[0]

    if verbose:
        print(f"[Predictor] {METHOD_LABELS[method]} over {len(records)} draws")
        print(f"[Predictor] Predicted main: {predicted_main} + special {predicted_special}")

    return {
        "method": method,
        "model_name": METHOD_LABELS[method],
        "draws_used": len(records),
        "main_probabilities": main_probs,
        "special_probabilities": special_probs,
        "main_rankings": rank(main_probs),
        "special_rankings": rank(special_probs),
        "predicted_main": predicted_main,
        "predicted_special": predicted_special,
        "least_likely_main": least_main,
        "least_likely_special": least_special,
    }


def compare_methods(records, methods=None):
    """Run `predict` for each method; returns {AnalysisMethod: result}."""
    methods = list(AnalysisMethod) if methods is None else [parse_method(m) for m in methods]
    return {m: predict(records, m) for m in methods}
