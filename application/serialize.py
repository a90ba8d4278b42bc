"""Result serialization utilities."""

import json
import logging
from pathlib import Path

import pandas as pd

from application.constants import (
    CLC_PATHS_COL,
    CONTEXT_KEY,
    INPUT_KEY,
    PATH_KEY,
    RECORD_KEY,
    ROW_KEY,
    SEGMENTS_KEY,
)
from domain.clc.parser import ClcParser
from infrastructure.observability.logging import clear_row_context, get_log_context, set_log_context

logger = logging.getLogger(__name__)


def segment_results(parser: ClcParser, paths: dict[str, list[str]]) -> dict[str, dict[str, object]]:
    """
    Pair each resolved segment path with the record of its deepest code.

    Records are dumped with their wire names (``namePath``).
    """
    out: dict[str, dict[str, object]] = {}
    for segment, path in paths.items():
        record = parser.describe(path[-1]) if path else None
        out[segment] = {
            PATH_KEY: list(path),
            RECORD_KEY: record.model_dump(by_alias=True) if record is not None else None,
        }
    return out


def serialize_table_results(
    parser: ClcParser,
    df_out: pd.DataFrame,
    column: str,
    results_path: Path,
) -> Path:
    """
    Write one JSON record per row of a table resolved by `resolve_table`.

    Each record carries the logging context (run tag, full run id, row) it was written under.
    """
    records: list[dict[str, object]] = []
    try:
        for idx, row in df_out.iterrows():
            set_log_context(row=idx)
            raw = row[column]
            records.append(
                {
                    ROW_KEY: idx if isinstance(idx, (int, str)) else str(idx),
                    INPUT_KEY: "" if raw is None or pd.isna(raw) else str(raw),
                    SEGMENTS_KEY: segment_results(parser, row[CLC_PATHS_COL]),
                    CONTEXT_KEY: get_log_context(),
                }
            )
    finally:
        clear_row_context()

    results_path.parent.mkdir(parents=True, exist_ok=True)
    with results_path.open("w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=2)

    logger.info("Saved CLC results JSON: %s", results_path)
    return results_path
