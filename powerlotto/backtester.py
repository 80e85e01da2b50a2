"""
Backtesting Engine for the Power Lottery Predictor

Walk-forward validation: for each draw, every method predicts from the draws
that came before it only, and the prediction is scored against the actual
draw. A random 6-of-38 board gives the baseline.
"""
import os
import warnings

import numpy as np
import pandas as pd
from scipy import stats

from powerlotto.predictor import AnalysisMethod, parse_method, predict
from powerlotto.records import DEFAULT_HISTORY, MAIN_SLOTS, NumberDomain

DEFAULT_MIN_HISTORY = 10


def count_matches(predicted, actual):
    """Count how many numbers match between predicted board and actual draw."""
    return len(set(predicted) & set(actual))


def check_special(predicted_special, actual_special):
    """Check if the special number matches; a draw without one never matches."""
    return actual_special is not None and predicted_special == actual_special


def run_backtest(records, methods=None, min_history=DEFAULT_MIN_HISTORY,
                 history=DEFAULT_HISTORY, seed=None, verbose=True, save_path=None):
    """
    Run walk-forward backtesting.

    Args:
        records: Full history, oldest first
        methods: Methods to evaluate (default: all)
        min_history: Draws required before a draw is evaluated
        history: Maximum number of earlier draws each prediction sees
        seed: Seed for the random baseline
        verbose: Print progress and the summary
        save_path: Optional CSV path for the per-draw results

    Returns:
        Dict with per-method and baseline summaries
    """
    methods = list(AnalysisMethod) if methods is None else [parse_method(m) for m in methods]
    rng = np.random.default_rng(seed)
    records = list(records)

    test_indices = range(max(min_history, 1), len(records))
    if len(test_indices) < 5:
        warnings.warn(f"Only {len(test_indices)} test draws available. Results may be unreliable.")

    if verbose:
        print(f"\n{'='*60}")
        print("BACKTESTING ENGINE")
        print(f"{'='*60}")
        print(f"Total draws: {len(records)}")
        print(f"Minimum history: {min_history}")
        print(f"Test draws: {len(test_indices)}")
        print(f"{'='*60}\n")

    results = {m: [] for m in methods}
    results["random"] = []

    for i, t in enumerate(test_indices):
        train = records[max(0, t - history):t]
        actual = records[t]

        if verbose and i % 10 == 0:
            print(f"  [Backtest] draw {i+1}/{len(test_indices)} (record #{t+1})...")

        for method in methods:
            try:
                result = predict(train, method)
            except Exception as e:
                if verbose:
                    print(f"    [Backtest] {method.name} failed on record #{t+1}: {e}")
                continue
            results[method].append({
                "record": t + 1,
                "predicted": result["predicted_main"],
                "actual": list(actual.main_numbers),
                "matches": count_matches(result["predicted_main"], actual.main_numbers),
                "predicted_special": result["predicted_special"],
                "actual_special": actual.special_number,
                "special_match": check_special(result["predicted_special"], actual.special_number),
            })

        random_board = sorted(rng.choice(NumberDomain.MAIN.numbers, MAIN_SLOTS, replace=False).tolist())
        results["random"].append({
            "matches": count_matches(random_board, actual.main_numbers),
        })

    summary = _compute_summary(results, methods, verbose)
    if save_path:
        _save_results(results, methods, save_path, verbose)
    return summary


def _compute_summary(results, methods, verbose=True):
    """Compute aggregate backtest metrics."""
    summary = {"methods": {}}

    best_method = None
    best_avg = -1.0
    for method in methods:
        rows = results[method]
        if not rows:
            summary["methods"][method] = {"avg_matches": 0, "distribution": {}, "total_draws": 0}
            continue

        matches = [r["matches"] for r in rows]
        dist = {}
        for m in range(MAIN_SLOTS + 1):
            count = matches.count(m)
            dist[m] = {"count": count, "pct": 100 * count / len(matches)}

        avg = float(np.mean(matches))
        summary["methods"][method] = {
            "avg_matches": avg,
            "std_matches": float(np.std(matches)),
            "distribution": dist,
            "best_single": max(matches),
            "special_hits": sum(1 for r in rows if r["special_match"]),
            "total_draws": len(matches),
        }
        if avg > best_avg:
            best_avg = avg
            best_method = method
    summary["best_method"] = best_method

    random_matches = [r["matches"] for r in results["random"]]
    summary["random"] = {
        "avg_matches": float(np.mean(random_matches)) if random_matches else 0,
        "std_matches": float(np.std(random_matches)) if random_matches else 0,
        "total_draws": len(random_matches),
    }

    # Statistical significance: t-test best method vs random
    if best_method is not None:
        best_matches = [r["matches"] for r in results[best_method]]
        if len(best_matches) > 1 and len(random_matches) > 1:
            t_stat, p_value = stats.ttest_ind(best_matches, random_matches)
            diff = np.mean(best_matches) - np.mean(random_matches)
            se = np.sqrt(np.var(best_matches) / len(best_matches)
                         + np.var(random_matches) / len(random_matches))
            summary["significance"] = {
                "method": best_method,
                "t_statistic": round(float(t_stat), 4),
                "p_value": round(float(p_value), 6),
                "significant_at_005": bool(p_value < 0.05),
                "significant_at_010": bool(p_value < 0.10),
                "mean_diff": round(float(diff), 4),
                "ci_95": (round(float(diff - 1.96 * se), 4), round(float(diff + 1.96 * se), 4)),
            }

    if verbose:
        _print_summary(summary)

    return summary


def _print_summary(summary):
    """Print a formatted backtest report."""
    print(f"\n{'='*60}")
    print("BACKTEST RESULTS SUMMARY")
    print(f"{'='*60}")

    for method, s in summary["methods"].items():
        print(f"\n{method.name}:")
        print(f"  Average matches: {s.get('avg_matches', 0):.3f} / {MAIN_SLOTS}")
        print(f"  Best single draw: {s.get('best_single', 0)} matches")
        print(f"  Special hits: {s.get('special_hits', 0)} / {s.get('total_draws', 0)} draws")
        dist = s.get("distribution", {})
        for m in range(MAIN_SLOTS + 1):
            d = dist.get(m, {})
            print(f"    {m} matches: {d.get('count', 0)} ({d.get('pct', 0):.1f}%)")

    rs = summary.get("random", {})
    print(f"\nRANDOM BASELINE:")
    print(f"  Average matches: {rs.get('avg_matches', 0):.3f} / {MAIN_SLOTS}")

    best = summary.get("best_method")
    print(f"\nBest method: {best.name if best is not None else 'N/A'}")

    sig = summary.get("significance", {})
    if sig:
        print(f"\nSTATISTICAL SIGNIFICANCE ({sig['method'].name} vs Random):")
        print(f"  t-statistic: {sig['t_statistic']}")
        print(f"  p-value: {sig['p_value']}")
        print(f"  Mean difference: {sig['mean_diff']}")
        ci = sig["ci_95"]
        print(f"  95% CI: ({ci[0]}, {ci[1]})")
        if sig["significant_at_005"]:
            print("  Significant at p < 0.05")
        elif sig["significant_at_010"]:
            print("  Marginally significant at p < 0.10")
        else:
            print("  Not statistically significant")

    print(f"\n{'='*60}")


def _save_results(results, methods, path, verbose=True):
    """Save per-draw backtest rows to CSV."""
    rows = []
    for method in methods:
        for r in results[method]:
            rows.append({
                "method": method.name,
                "record": r["record"],
                "predicted": str(r["predicted"]),
                "actual": str(r["actual"]),
                "matches": r["matches"],
                "predicted_special": r["predicted_special"],
                "actual_special": r["actual_special"],
                "special_match": r["special_match"],
            })

    if rows:
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)
        pd.DataFrame(rows).to_csv(path, index=False)
        if verbose:
            print(f"\nBacktest results saved to {path}")


if __name__ == "__main__":
    import sys
    from powerlotto.loader import load_records

    run_backtest(load_records(sys.argv[1]), verbose=True)
