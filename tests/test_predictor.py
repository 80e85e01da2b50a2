import pytest

from powerlotto.models.frequency import WINDOWS, windowed_frequency
from powerlotto.predictor import (
    AnalysisMethod,
    InvalidMethodError,
    compare_methods,
    estimate,
    parse_method,
    predict,
)
from powerlotto.records import NumberDomain


def test_frequency_prediction_for_two_draws(two_draws):
    result = predict(two_draws, AnalysisMethod.FREQUENCY)
    assert result["predicted_main"] == [1, 2, 3, 4, 5, 6]
    assert result["predicted_special"] == 1
    assert result["least_likely_main"] == [8, 9, 10, 11, 12, 13]
    assert result["least_likely_special"] == 3
    assert result["main_rankings"][0] == (1, pytest.approx(2 / 12))
    assert result["draws_used"] == 2


def test_recency_prefers_newest_draw(two_draws):
    result = predict(two_draws, AnalysisMethod.RECENCY_WEIGHTED)
    assert result["predicted_main"] == [1, 2, 3, 4, 5, 7]
    assert result["predicted_special"] == 2


@pytest.mark.parametrize("method", list(AnalysisMethod))
def test_every_method_handles_empty_history(method):
    main, special = estimate([], method)
    assert len(main) == 38
    assert len(special) == 8
    assert set(main.values()) == {0.0}
    result = predict([], method)
    assert result["predicted_main"] == [1, 2, 3, 4, 5, 6]
    assert result["predicted_special"] == 1


@pytest.mark.parametrize("method", list(AnalysisMethod))
def test_every_method_produces_full_domains(sample_history, method):
    result = predict(sample_history, method)
    assert sorted(result["main_probabilities"]) == list(range(1, 39))
    assert sorted(result["special_probabilities"]) == list(range(1, 9))
    assert len(result["predicted_main"]) == 6
    assert len(result["least_likely_main"]) == 6
    assert 1 <= result["predicted_special"] <= 8


def test_windowed_methods_use_recent_draws(sample_history):
    last10, _ = estimate(sample_history, AnalysisMethod.LAST10_FREQUENCY)
    full, _ = estimate(sample_history[-10:], AnalysisMethod.FREQUENCY)
    assert last10 == full


@pytest.mark.parametrize("value, expected", [
    ("1", AnalysisMethod.FREQUENCY),
    (2, AnalysisMethod.RECENCY_WEIGHTED),
    (" 6 ", AnalysisMethod.TIME_SERIES),
    ("hybrid", AnalysisMethod.HYBRID),
    ("last30-frequency", AnalysisMethod.LAST30_FREQUENCY),
    (AnalysisMethod.LAST10_FREQUENCY, AnalysisMethod.LAST10_FREQUENCY),
])
def test_parse_method(value, expected):
    assert parse_method(value) is expected


@pytest.mark.parametrize("value", ["0", "7", "", "abc", None])
def test_parse_method_rejects_unknown(value):
    with pytest.raises(InvalidMethodError):
        parse_method(value)


def test_estimate_rejects_raw_ints(two_draws):
    with pytest.raises(InvalidMethodError):
        estimate(two_draws, 1)


def test_compare_methods(sample_history):
    results = compare_methods(sample_history)
    assert list(results) == list(AnalysisMethod)
    subset = compare_methods(sample_history, ["1", "hybrid"])
    assert list(subset) == [AnalysisMethod.FREQUENCY, AnalysisMethod.HYBRID]


def test_verbose_prints(two_draws, capsys):
    predict(two_draws, AnalysisMethod.HYBRID, verbose=True)
    assert "[Predictor]" in capsys.readouterr().out


def test_window_methods_follow_configured_windows(sample_history):
    long_main, long_special = estimate(sample_history, AnalysisMethod.LAST30_FREQUENCY)
    short_main, _ = estimate(sample_history, AnalysisMethod.LAST10_FREQUENCY)
    assert long_main == windowed_frequency(sample_history, NumberDomain.MAIN, WINDOWS[0])
    assert long_special == windowed_frequency(sample_history, NumberDomain.SPECIAL, WINDOWS[0])
    assert short_main == windowed_frequency(sample_history, NumberDomain.MAIN, WINDOWS[1])
