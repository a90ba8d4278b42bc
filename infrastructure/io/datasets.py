"""Dataset loading utilities."""

from pathlib import Path

import pandas as pd


def read_table(path: Path, text_columns: list[str] | None = None) -> pd.DataFrame:
    """
    Read tabular data file (Excel or CSV) based on file extension.

    Columns listed in `text_columns` are read as plain strings so that codes such as
    ``F0`` or ``0123`` are not coerced to numbers; empty cells become "".

    Supported formats:
    - Excel: .xlsx, .xls
    - CSV: .csv

    Raises:
        ValueError: If file format is not supported
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()
    dtype = {col: str for col in text_columns} if text_columns else None

    if suffix in [".xlsx", ".xls"]:
        df = pd.read_excel(path, dtype=dtype)
    elif suffix == ".csv":
        df = pd.read_csv(path, dtype=dtype)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .xlsx, .xls, .csv")

    for col in text_columns or []:
        if col in df.columns:
            df[col] = df[col].fillna("")
    return df
