"""
Historical Draw Loader

Reads draw history from the first worksheet of an Excel workbook (or a CSV
file with the same layout):

    row 1      : header (ignored)
    row 2..    : columns A-F = six main numbers, column G = special number

Reading stops at the first row with no used cells in any column, or once
`count` records have been collected. Any main number outside 1-38, or special
number outside 1-8, aborts the load with a DataRangeError naming the cell.
A file that cannot be read as a workbook or CSV raises DataFileError.
"""
import os
import zipfile

import numpy as np
import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from powerlotto.records import DEFAULT_HISTORY, MAIN_SLOTS, DrawRecord

FIRST_DATA_ROW = 2
SPECIAL_COLUMN = MAIN_SLOTS + 1
NUM_COLS = [f"num{i}" for i in range(1, MAIN_SLOTS + 1)]


class DataRangeError(ValueError):
    """A loaded number is missing or outside its domain."""


class DataFileError(ValueError):
    """The source is not a readable workbook or CSV file."""


def _as_int(value):
    """Return `value` as an int, or None if the cell does not hold an integer."""
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = float(value)
        except ValueError:
            return None
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    return None


def _is_blank_row(row) -> bool:
    for value in row:
        if value is None:
            continue
        if isinstance(value, float) and np.isnan(value):
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return False
    return True


def _parse_row(row, sheet_row):
    main = []
    for i in range(MAIN_SLOTS):
        raw = row[i] if i < len(row) else None
        val = _as_int(raw)
        if val is None:
            raise DataRangeError(
                f"Main number {raw!r} is not an integer at row {sheet_row}, column {i + 1}"
            )
        main.append(val)

    special = _as_int(row[SPECIAL_COLUMN - 1]) if len(row) >= SPECIAL_COLUMN else None
    record = DrawRecord(tuple(main), special)

    for column, val in record.range_violations():
        if column == SPECIAL_COLUMN:
            raise DataRangeError(f"Special number {val} out of range at row {sheet_row}")
        raise DataRangeError(
            f"Main number {val} out of range at row {sheet_row}, column {column}"
        )
    return record


def records_from_frame(frame: pd.DataFrame, count=DEFAULT_HISTORY, first_row=FIRST_DATA_ROW):
    """
    Map raw cells to validated draw records.

    Parameters
    ----------
    frame : pd.DataFrame
        Data cells only (header already removed), one row per spreadsheet row,
        columns in sheet order.
    count : int
        Maximum number of records to collect.
    first_row : int
        Spreadsheet row number of frame's first row, used in error messages.

    Returns
    -------
    list of DrawRecord, in sheet order.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    records = []
    for offset, row in enumerate(frame.itertuples(index=False, name=None)):
        if len(records) >= count or _is_blank_row(row):
            break
        records.append(_parse_row(row, first_row + offset))
    return records


def _source_name(source):
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return getattr(source, "name", "") or ""


def _read_raw(source):
    try:
        if _source_name(source).lower().endswith(".csv"):
            raw = pd.read_csv(source, header=None, skip_blank_lines=False)
        else:
            raw = pd.read_excel(source, header=None, sheet_name=0, engine="openpyxl")
    except (zipfile.BadZipFile, InvalidFileException, pd.errors.ParserError,
            pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DataFileError(f"Cannot read {_source_name(source) or 'buffer'}: {e}") from e
    # drop the header row; cells past G still count towards a used row
    return raw.iloc[FIRST_DATA_ROW - 1:].reset_index(drop=True)


def load_records(source, count=DEFAULT_HISTORY, verbose=False):
    """Load up to `count` draws from a workbook or CSV path / file object."""
    raw = _read_raw(source)
    records = records_from_frame(raw, count=count)
    if verbose:
        with_special = sum(1 for r in records if r.has_special)
        print(f"[Loader] Loaded {len(records)} draws from {_source_name(source) or 'buffer'} "
              f"({with_special} with a special number)")
    return records


def records_to_frame(records) -> pd.DataFrame:
    """Tidy DataFrame view of records: num1-num6 plus a nullable special column."""
    rows = []
    for i, r in enumerate(records, 1):
        row = {"draw": i}
        row.update({c: n for c, n in zip(NUM_COLS, r.main_numbers)})
        row["special"] = r.special_number
        rows.append(row)
    frame = pd.DataFrame(rows, columns=["draw"] + NUM_COLS + ["special"])
    frame["special"] = frame["special"].astype("Int64")
    return frame
