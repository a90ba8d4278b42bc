"""Batch resolution of a CLC column in a tabular dataset."""

import logging

import pandas as pd

from application.constants import (
    CLC_CODE_COL,
    CLC_NAME_COL,
    CLC_NAME_PATH_COL,
    CLC_PATH_COL,
    CLC_PATHS_COL,
)
from domain.clc.parser import ClcParser
from infrastructure.observability.logging import clear_row_context, set_log_context

logger = logging.getLogger(__name__)


def check_code_column(df: pd.DataFrame, column: str) -> str:
    """
    Make sure the configured CLC column exists in the dataset.

    Raises:
        KeyError: If the column is not found in DataFrame
    """
    if column not in df.columns:
        raise KeyError(f"CLC column '{column}' not found in dataset columns: {list(df.columns)}")
    return column


def _primary_path(paths: dict[str, list[str]]) -> list[str]:
    # first segment that resolved to anything
    for path in paths.values():
        if path:
            return path
    return []


def resolve_table(df: pd.DataFrame, column: str, parser: ClcParser) -> pd.DataFrame:
    """
    Resolve every cell of `column` and attach the results as new columns.

    Added columns:
      - clc_paths: segment -> resolved path, for every segment in the cell
      - clc_path: path of the first segment that resolved (may be empty)
      - clc_code: deepest code of clc_path, or None
      - clc_name / clc_name_path: taken from the record of clc_code

    Args:
        df: Input DataFrame
        column: Name of the column holding CLC strings
        parser: Compiled ClcParser

    Returns:
        A copy of `df` with the result columns attached
    """
    check_code_column(df, column)
    df_out = df.copy()

    all_paths: list[dict[str, list[str]]] = []
    primary: list[list[str]] = []
    codes: list[str | None] = []
    names: list[str | None] = []
    name_paths: list[list[str] | None] = []

    n_unresolved = 0
    try:
        for idx, raw in df_out[column].items():
            set_log_context(row=idx)
            text = "" if raw is None or pd.isna(raw) else str(raw)

            paths = parser.resolve_all(text)
            path = _primary_path(paths)
            record = parser.describe(path[-1]) if path else None
            if not path:
                n_unresolved += 1
                logger.debug("Row %s: no CLC code resolved from %r", idx, text)

            all_paths.append(paths)
            primary.append(path)
            codes.append(record.code if record else None)
            names.append(record.name if record else None)
            name_paths.append(list(record.name_path) if record else None)
    finally:
        clear_row_context()

    # object Series keep list cells intact
    df_out[CLC_PATHS_COL] = pd.Series(all_paths, index=df_out.index, dtype=object)
    df_out[CLC_PATH_COL] = pd.Series(primary, index=df_out.index, dtype=object)
    df_out[CLC_CODE_COL] = pd.Series(codes, index=df_out.index, dtype=object)
    df_out[CLC_NAME_COL] = pd.Series(names, index=df_out.index, dtype=object)
    df_out[CLC_NAME_PATH_COL] = pd.Series(name_paths, index=df_out.index, dtype=object)

    logger.info("Resolved %d rows (%d without a CLC match)", len(df_out), n_unresolved)
    return df_out
