from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import structlog

from deadlinelab.histogram import DEFAULT_NUM_BINS, bin_result
from deadlinelab.io import (
    read_json,
    write_durations_csv,
    write_histogram_csv,
    write_summary_json,
)
from deadlinelab.metrics import interpretation, render_interpretation, summarize
from deadlinelab.model import Scenario
from deadlinelab.sim import simulate_scenario
from deadlinelab.sources import BACKENDS
from deadlinelab.validate import InvalidParameter, validate_inputs

logger = structlog.get_logger(__name__)

EXIT_INVALID = 2


def configure_logging(level: str = "WARNING") -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="deadlinelab",
        description="Monte Carlo estimate of finishing two tasks before a deadline",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sim = sub.add_parser("simulate", help="Run a simulation")
    sim.add_argument("--scenario", required=False, type=Path)
    sim.add_argument("--a-min", type=float)
    sim.add_argument("--a-max", type=float)
    sim.add_argument("--b-min", type=float)
    sim.add_argument("--b-max", type=float)
    sim.add_argument("--threshold", type=float, help="Hours available")
    sim.add_argument("--trials", type=int)
    sim.add_argument("--seed", type=int, default=None)
    sim.add_argument("--backend", choices=list(BACKENDS), default="stdlib")
    sim.add_argument("--bins", type=int, default=DEFAULT_NUM_BINS)
    sim.add_argument("--out-summary", type=Path)
    sim.add_argument("--out-durations", type=Path)
    sim.add_argument("--out-histogram", type=Path)

    init = sub.add_parser("init", help="Write the default scenario as JSON")
    init.add_argument("--out", required=True, type=Path)
    return p


def _load_scenario(args: argparse.Namespace) -> Scenario:
    base = Scenario.default()
    if args.scenario is not None:
        base = Scenario.from_json(read_json(args.scenario))
    return base.with_overrides(
        a_min=args.a_min,
        a_max=args.a_max,
        b_min=args.b_min,
        b_max=args.b_max,
        threshold=args.threshold,
        trials=args.trials,
    )


def _simulate(args: argparse.Namespace) -> int:
    try:
        scenario = _load_scenario(args)
        validate_inputs(
            scenario.task_a, scenario.task_b, scenario.threshold, scenario.trials
        )
        result = simulate_scenario(scenario, seed=args.seed, backend=args.backend)
        bins = bin_result(result, args.bins)
    except (InvalidParameter, TypeError, ValueError, KeyError, OSError) as e:
        logger.warning("invalid_parameters", error=str(e))
        sys.stderr.write(f"error: {e}\n")
        return EXIT_INVALID

    info = interpretation(result, task_a=scenario.task_a, task_b=scenario.task_b)
    sys.stdout.write(render_interpretation(info) + "\n")

    if args.out_summary:
        summary = summarize(result, num_bins=args.bins)
        summary["scenario"] = scenario.to_json()
        summary["seed"] = args.seed
        summary["backend"] = args.backend
        summary["interpretation"] = info
        write_summary_json(args.out_summary, summary)
    if args.out_durations:
        write_durations_csv(args.out_durations, result)
    if args.out_histogram:
        write_histogram_csv(args.out_histogram, bins)

    logger.info(
        "simulate_finished",
        trials=result.total_trials,
        probability=result.probability,
        seed=args.seed,
        backend=args.backend,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)
    configure_logging(args.log_level)

    if args.cmd == "simulate":
        return _simulate(args)

    if args.cmd == "init":
        write_summary_json(args.out, Scenario.default().to_json())
        return 0

    raise AssertionError(f"Unhandled command: {args.cmd}")
