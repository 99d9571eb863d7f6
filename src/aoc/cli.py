# src/aoc/cli.py
"""
Command-line entrypoint: `aoc`.

  aoc run DAY [--year Y] [--test] [--submit]   solve both parts
  aoc fetch DAY [--year Y]                     download and cache input
  aoc new DAY                                  scaffold solutions/day_NN.py

Global flags: --config PATH, -v/--verbose.
"""

from __future__ import annotations

import argparse
import functools
import logging
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from solutions import load_solution

from .client import check_answer, get_input
from .config import AocConfig, load_config
from .errors import AoCClientError, AoCError
from .logging_config import configure_logging
from .runner import SolutionReport, run_solution
from .scaffold import create_day

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc",
        description="Run Advent of Code solutions and manage puzzle inputs.",
    )
    parser.add_argument("--config", default=None, help="Path to aoc.yaml")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable DEBUG logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Solve both parts for a day")
    run.add_argument("day", type=int)
    run.add_argument("--year", type=int, default=None)
    run.add_argument("--test", action="store_true", help="Use the module's TEST_INPUT")
    run.add_argument(
        "--submit", action="store_true", help="Submit both answers to the server"
    )

    fetch = sub.add_parser("fetch", help="Download and cache a day's input")
    fetch.add_argument("day", type=int)
    fetch.add_argument("--year", type=int, default=None)

    new = sub.add_parser("new", help="Create a solution module from the template")
    new.add_argument("day", type=int)

    return parser


def render_report(report: SolutionReport, console: Console) -> None:
    table = Table(title=f"Advent of Code {report.year} - Day {report.day}")
    table.add_column("Part", justify="right")
    table.add_column("Answer")
    table.add_column("Time (ms)", justify="right")
    table.add_column("Check")

    for part in report.parts:
        if part.check is None:
            verdict = "-"
        elif part.check.is_correct:
            verdict = "[green]correct[/green]"
        else:
            verdict = f"[red]{part.check.explanation or part.check.message}[/red]"
        table.add_row(str(part.part), str(part.answer), f"{part.elapsed_ms:.2f}", verdict)

    console.print(table)


def _cmd_run(args: argparse.Namespace, config: AocConfig, console: Console) -> int:
    year = args.year or config.year
    module = load_solution(args.day)

    test_input = getattr(module, "TEST_INPUT", None) if args.test else None
    format_options = getattr(module, "TEST_FORMAT_OPTIONS", None) if args.test else None
    check = None
    if args.submit and not args.test:
        check = functools.partial(check_answer, config=config)

    report = run_solution(
        year,
        args.day,
        module.format_input,
        module.solve_part1,
        module.solve_part2,
        test_input,
        fetch=functools.partial(get_input, config=config),
        format_options=format_options,
        check=check,
    )
    render_report(report, console)
    return 0


def _cmd_fetch(args: argparse.Namespace, config: AocConfig, console: Console) -> int:
    year = args.year or config.year
    text = get_input(year, args.day, config)
    console.print(
        f"Day {args.day} ({year}): {len(text.splitlines())} lines cached in {config.cache_dir}"
    )
    return 0


def _cmd_new(args: argparse.Namespace, config: AocConfig, console: Console) -> int:
    path = create_day(args.day)
    console.print(f"Solution module: {path}")
    return 0


COMMANDS = {
    "run": _cmd_run,
    "fetch": _cmd_fetch,
    "new": _cmd_new,
}


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    try:
        config = load_config(args.config)
        configure_logging("DEBUG" if args.verbose else config.log_level)
        return COMMANDS[args.command](args, config, console)
    except (AoCError, AoCClientError, LookupError, OSError, ValueError) as exc:
        log.error("Command %s failed: %r", args.command, exc)
        console.print(f"[red]Error:[/red] {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
