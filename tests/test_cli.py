import pandas as pd
import pytest

from powerlotto.cli import format_report, main
from powerlotto.predictor import AnalysisMethod, predict


@pytest.fixture
def workbook(tmp_path):
    path = tmp_path / "draws.xlsx"
    pd.DataFrame(
        [[1, 2, 3, 4, 5, 6, 1], [1, 2, 3, 4, 5, 7, 2]],
        columns=["N1", "N2", "N3", "N4", "N5", "N6", "Special"],
    ).to_excel(path, index=False)
    return str(path)


def test_usage_without_file(capsys):
    assert main([]) == 2
    assert "Usage:" in capsys.readouterr().out


def test_menu_choice_prints_report(workbook, capsys):
    assert main([workbook], input_func=lambda prompt: "1") == 0
    out = capsys.readouterr().out
    assert "Select analysis method:" in out
    assert "6. Time series (AR(1)) probability" in out
    assert "Number 1: 16.67%" in out
    assert "Predicted main numbers: 1, 2, 3, 4, 5, 6" in out
    assert "Predicted special number: 1" in out


def test_invalid_menu_choice(workbook, capsys):
    assert main([workbook], input_func=lambda prompt: "9") == 1
    assert "Invalid choice" in capsys.readouterr().out


def test_method_flag_skips_menu(workbook, capsys):
    def no_input(prompt):
        raise AssertionError("menu should not be shown")

    assert main([workbook, "--method", "recency_weighted"], input_func=no_input) == 0
    assert "Predicted special number: 2" in capsys.readouterr().out


def test_load_error_exits_nonzero(tmp_path, capsys):
    path = tmp_path / "bad.xlsx"
    pd.DataFrame([[1, 2, 3, 4, 5, 40]]).to_excel(path, index=False)
    assert main([str(path), "--method", "1"]) == 1
    assert "out of range" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.xlsx"), "--method", "1"]) == 1


def test_all_methods_summary(workbook, capsys):
    assert main([workbook, "--all"]) == 0
    out = capsys.readouterr().out
    for method in AnalysisMethod:
        assert f"{method.value}. " in out


def test_format_report_lists_every_number(two_draws):
    lines = format_report(predict(two_draws, AnalysisMethod.FREQUENCY))
    assert sum(1 for line in lines if line.startswith("Number ")) == 38 + 8
    assert lines[-1] == "Least likely special number: 3"


def test_unreadable_workbook_exits_nonzero(tmp_path, capsys):
    path = tmp_path / "bad.xlsx"
    path.write_bytes(b"not a zip")
    assert main([str(path), "--method", "1"]) == 1
    assert "Failed to load" in capsys.readouterr().out
