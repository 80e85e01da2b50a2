"""
Console front-end: method menu, prediction report, optional backtest.
"""
import argparse
import sys

from powerlotto.backtester import run_backtest
from powerlotto.loader import load_records
from powerlotto.predictor import (
    METHOD_LABELS,
    AnalysisMethod,
    InvalidMethodError,
    compare_methods,
    parse_method,
    predict,
)
from powerlotto.records import DEFAULT_HISTORY


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="run_prediction",
        description="Estimate Power Lottery number probabilities from draw history.",
    )
    parser.add_argument("excel_file", nargs="?", help="Workbook (or CSV) with the draw history")
    parser.add_argument("--method", help="Analysis method number or name (skips the menu)")
    parser.add_argument("--count", type=int, default=DEFAULT_HISTORY,
                        help=f"Maximum draws to load (default {DEFAULT_HISTORY})")
    parser.add_argument("--all", action="store_true", help="Summarize every method")
    parser.add_argument("--backtest", action="store_true", help="Run walk-forward backtest")
    return parser


def print_menu():
    print("Select analysis method:")
    for method in AnalysisMethod:
        print(f"{method.value}. {METHOD_LABELS[method]}")


def format_report(result):
    """Console lines for one prediction result."""
    lines = ["Main number probabilities:"]
    for n, p in sorted(result["main_probabilities"].items()):
        lines.append(f"Number {n}: {p:.2%}")
    lines.append("")
    lines.append("Special number probabilities:")
    for n, p in sorted(result["special_probabilities"].items()):
        lines.append(f"Number {n}: {p:.2%}")
    lines.append("")
    lines.append("Predicted main numbers: " + ", ".join(str(n) for n in result["predicted_main"]))
    lines.append(f"Predicted special number: {result['predicted_special']}")
    lines.append("Least likely main numbers: " + ", ".join(str(n) for n in result["least_likely_main"]))
    lines.append(f"Least likely special number: {result['least_likely_special']}")
    return lines


def format_comparison(results):
    lines = []
    for method, result in results.items():
        nums = ", ".join(f"{n:2d}" for n in result["predicted_main"])
        lines.append(f"{method.value}. {METHOD_LABELS[method]:<40} {nums} + {result['predicted_special']}")
    return lines


def main(argv=None, input_func=input):
    args = _build_parser().parse_args(argv)
    if not args.excel_file:
        print("Usage: run_prediction <excel-file>")
        return 2

    try:
        records = load_records(args.excel_file, count=args.count)
    except (OSError, ValueError) as e:
        print(f"Failed to load {args.excel_file}: {e}")
        return 1
    print(f"Loaded {len(records)} draws")

    if args.all:
        print("\n".join(format_comparison(compare_methods(records))))
    else:
        try:
            if args.method is not None:
                method = parse_method(args.method)
            else:
                print_menu()
                method = parse_method(input_func("Enter choice: "))
        except (InvalidMethodError, EOFError):
            print("Invalid choice")
            return 1
        print("\n".join(format_report(predict(records, method))))

    if args.backtest:
        run_backtest(records, verbose=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
