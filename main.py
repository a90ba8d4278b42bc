"""
CLI entrypoint for the CLC parser.

Two modes:
- codes: resolve CLC strings given as arguments (or one per line via --text-file) and
  print, for every segment, the resolved path and the record of its deepest code
- table: resolve a CLC column of a CSV/Excel file (--input/--column) and write JSON results

Steps:
- loads .env (if present) and configs/parser.yaml (if present)
- configures logging (console, plus a rotating log file in table mode)
- compiles the taxonomy once and runs the selected mode
"""

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import build_parser, resolve_table, segment_results, serialize_table_results
from application.constants import LOG_FILENAME, OUTPUT_ROOT, RESULTS_FILENAME
from domain.clc.parser import ClcParser
from infrastructure.config import load_parser_config
from infrastructure.constants import PARSER_CONFIG_FILE
from infrastructure.io import ensure_exists, read_lines, read_table
from infrastructure.observability import configure_logging, make_run_tag, set_log_context

logger = logging.getLogger(__name__)

LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Resolve Chinese Library Classification (CLC) codes")
    p.add_argument(
        "codes",
        nargs="*",
        help="CLC strings to resolve, e.g. 'K825.2；E251-53'",
    )
    p.add_argument(
        "--text-file",
        type=str,
        default=None,
        help="File with one CLC string per line",
    )
    p.add_argument("--input", type=str, default=None, help="CSV/Excel file to resolve in table mode")
    p.add_argument("--column", type=str, default=None, help="CLC column of --input")
    p.add_argument(
        "--output",
        type=str,
        default=None,
        help=f"JSON results path for table mode (default: {OUTPUT_ROOT}/<run_id>/{RESULTS_FILENAME})",
    )
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Path to parser.yaml (default: {PARSER_CONFIG_FILE} if it exists)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env, skipped if missing)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default=None,
        choices=LEVEL_CHOICES,
        help="Console log level (default: log_level from config)",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=LEVEL_CHOICES,
        help="File log level (table mode)",
    )
    args = p.parse_args(argv)

    if args.input and not args.column:
        p.error("--column is required with --input")
    if not (args.codes or args.text_file or args.input):
        p.error("nothing to resolve: pass CLC strings, --text-file or --input")
    return args


def _resolve_config_path(arg: str | None) -> Path | None:
    if arg is not None:
        path = Path(arg)
        ensure_exists(path, "parser.yaml")
        return path
    return PARSER_CONFIG_FILE if PARSER_CONFIG_FILE.exists() else None


def _print_codes(parser: ClcParser, texts: list[str]) -> None:
    for text in texts:
        print(f"\n===== {text} =====")
        results = segment_results(parser, parser.resolve_all(text))
        if not results:
            print("(no segments)")
        for segment, result in results.items():
            print(f"> {segment}:")
            print(json.dumps(result, ensure_ascii=False, indent=2))


def _run_table(parser: ClcParser, args: argparse.Namespace, run_id: str, run_dir: Path) -> None:
    input_path = Path(args.input)
    ensure_exists(input_path, "input table")

    logger.info("Loading table from %s...", input_path)
    df = read_table(input_path, text_columns=[args.column])
    logger.info("Table loaded: %d rows, %d columns", df.shape[0], df.shape[1])

    df_out = resolve_table(df, args.column, parser)

    results_path = Path(args.output) if args.output else run_dir / RESULTS_FILENAME
    serialize_table_results(parser, df_out, args.column, results_path)
    logger.info("Run %s finished", run_id)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    cfg = load_parser_config(_resolve_config_path(args.config))
    console_level = getattr(logging, args.console_level or cfg.log_level)

    run_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_clc"
    run_dir = OUTPUT_ROOT / run_id

    if args.input:
        log_path = run_dir / LOG_FILENAME
        configure_logging(
            log_file=log_path,
            console_level=console_level,
            file_level=getattr(logging, args.file_level),
        )
    else:
        configure_logging(console_level=console_level)

    set_log_context(run_id_full=run_id)
    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))

    parser = build_parser(cfg)

    texts = list(args.codes)
    if args.text_file:
        text_path = Path(args.text_file)
        ensure_exists(text_path, "text file")
        texts.extend(read_lines(text_path))
    if texts:
        _print_codes(parser, texts)

    if args.input:
        _run_table(parser, args, run_id, run_dir)


if __name__ == "__main__":
    main()
