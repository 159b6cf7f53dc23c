from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .algorithms import ALGORITHMS, run_algorithm
from .config import DEFAULT_QUANTUM, DEFAULT_REPORT
from .errors import InvalidArgumentsError, SchedulerError
from .gantt import render_gantt
from .models import ScheduleResult
from .workload_io import load_workload

logger = logging.getLogger("schedsim")


class _ArgumentParser(argparse.ArgumentParser):
    """
    argparse exits with status 2 on bad input; raise instead so main() can
    report it and exit with 1 like every other fatal error.
    """

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentsError(message)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="schedsim",
        description="CPU scheduling simulator (FCFS, SJF, Priority, Round-robin).",
    )
    parser.add_argument(
        "workload",
        help="Path to the workload: CSV rows of pid,burst,arrival[,priority] or a .json list.",
    )
    parser.add_argument(
        "--quantum",
        "-q",
        type=_positive_int,
        default=DEFAULT_QUANTUM,
        help=f"Time quantum for round-robin (default: {DEFAULT_QUANTUM}).",
    )
    parser.add_argument(
        "--algorithm",
        "-a",
        action="append",
        choices=sorted(ALGORITHMS),
        help="Algorithm to report; repeat for several (default: fcfs sjf priority rr).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every dispatch, preemption and completion to stderr.",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _print_result(result: ScheduleResult, console: Console) -> None:
    console.rule(f"[bold]{result.algorithm}[/bold]")
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {result.quantum}")

    console.print(render_gantt(result.timeline), markup=False, highlight=False, soft_wrap=True)
    console.print()

    summary = result.system
    footers = {
        "Wait": f"Average\n{summary.avg_waiting:.2f}",
        "Turnaround": f"Average\n{summary.avg_turnaround:.2f}",
        "Exit": f"Throughput\n{summary.throughput:.2f}/t",
    }

    table = Table(title="Schedule table", box=box.SIMPLE_HEAVY, show_footer=True)
    for h in ["ID", "Priority", "Burst", "Arrival", "Wait", "Turnaround", "Exit"]:
        justify = "center" if h in {"ID", "Priority"} else "right"
        table.add_column(h, footer=footers.get(h, ""), justify=justify)

    for p in result.processes:
        table.add_row(
            str(p.pid),
            str(p.priority),
            str(p.burst_time),
            str(p.arrival_time),
            str(p.waiting_time),
            str(p.turnaround_time),
            str(p.completion_time),
        )

    console.print(table)
    console.print()


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except InvalidArgumentsError as exc:
        parser.print_usage(sys.stderr)
        logger.error("invalid args: %s", exc)
        return 1

    configure_logging(args.verbose)
    console = Console()

    try:
        processes = load_workload(args.workload)
        logger.debug("Loaded %d processes from %s", len(processes), args.workload)
        for alg in args.algorithm or DEFAULT_REPORT:
            result = run_algorithm(alg, processes, quantum=args.quantum)
            _print_result(result, console)
    except SchedulerError as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
