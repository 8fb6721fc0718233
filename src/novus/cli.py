"""Command line helpers for solving puzzle files."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import List

from .batch import solve_batch
from .errors import BoardError, SolverError
from .loader import NamedPuzzle, load_batch
from .printer import render_board, render_candidates
from .result_log import ResultLog
from .settings import TRACE_LEVELS, LoaderSettings, LoggingSettings, SolverSettings
from .solver import Solver

_LOGGER = logging.getLogger(__name__)


def _load_puzzles(path: str) -> List[NamedPuzzle]:
    text = Path(path).read_text("utf-8")
    try:
        return load_batch(text, strict=LoaderSettings.load().strict)
    except (BoardError, ValueError) as exc:
        raise SystemExit(f"Cannot load puzzles from {path}: {exc}") from exc


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _solver_settings(args: argparse.Namespace) -> SolverSettings:
    settings = SolverSettings.load()
    if getattr(args, "trace", None):
        settings = replace(settings, trace_level=args.trace)
    if getattr(args, "max_updates", None) is not None:
        settings = replace(settings, max_updates=args.max_updates)
    return settings


def cmd_solve(args: argparse.Namespace) -> int:
    settings = _solver_settings(args)
    all_solved = True
    for puzzle in _load_puzzles(args.file):
        solver = Solver(puzzle.board, settings=settings)
        print(puzzle.name)
        print(render_board(solver.board))
        try:
            complete = solver.solve()
        except SolverError as exc:
            print(f"Failure: {exc}")
            all_solved = False
            continue

        stats = solver.statistics
        status = "Complete!" if complete else "Failure"
        print(
            f"{status} (with {solver.updates} updates, "
            f"{stats.get_stuck} got stuck, {stats.back_tracked} backtrack)"
        )
        if args.compact:
            print(solver.board.to_string(LoaderSettings.load().placeholder))
        else:
            print(render_board(solver.board))
        if args.show_candidates and not complete:
            print(render_candidates(solver.candidates))
        if solver.trace.enabled:
            print(solver.trace.to_json(indent=2))
        all_solved = all_solved and complete
    return 0 if all_solved else 1


def cmd_batch(args: argparse.Namespace) -> int:
    puzzles = _load_puzzles(args.file)
    summary = solve_batch(puzzles, _solver_settings(args))
    payload = summary.to_payload()

    if not args.no_log:
        logging_settings = LoggingSettings.load()
        result_log = ResultLog(
            args.log_dir or logging_settings.log_dir, max_bytes=logging_settings.max_bytes
        )
        written = result_log.write_results(args.file, summary.results)
        _LOGGER.info("%d results appended to %s", written, result_log.path)

    if args.json:
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        for result in summary.results:
            print(result.summary_line())
        print(f"solved: {summary.solved}/{summary.total} (failure:{summary.failed})")
        print(f"sum: {summary.checksum}")
    return 0 if summary.failed == 0 else 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Constraint-propagation Sudoku solver")
    parser.add_argument("--log-level", default=None, help="Logging level (default from config)")
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Solve puzzles and print the boards")
    solve.add_argument("file")
    solve.add_argument("--trace", choices=TRACE_LEVELS, default=None)
    solve.add_argument("--max-updates", type=_positive_int, default=None)
    solve.add_argument(
        "--compact",
        action="store_true",
        help="Print the final grid as one line, unknown cells as the loader placeholder",
    )
    solve.add_argument(
        "--show-candidates",
        action="store_true",
        help="Print the candidate grid of puzzles left incomplete",
    )
    solve.set_defaults(func=cmd_solve)

    batch = sub.add_parser("batch", help="Solve every puzzle of a file and summarise")
    batch.add_argument("file")
    batch.add_argument("--json", action="store_true", help="Print the JSON report")
    batch.add_argument("--log-dir", default=None, help="Directory for JSONL result logs")
    batch.add_argument("--no-log", action="store_true", help="Do not write JSONL result logs")
    batch.add_argument("--max-updates", type=_positive_int, default=None)
    batch.set_defaults(func=cmd_batch)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    level = args.log_level or LoggingSettings.load().level
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.WARNING))
    return args.func(args)


__all__ = ["main"]
