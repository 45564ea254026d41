from __future__ import annotations

# Public simulation entrypoint.
#
# The engine is a pure function of its arguments plus the random source it is
# handed. Parameters are validated before the first draw.

import structlog

from deadlinelab.model import Scenario
from deadlinelab.sources import UniformSource, make_source
from deadlinelab.types import SimulationResult, TaskSpec
from deadlinelab.validate import validate_run_parameters

logger = structlog.get_logger(__name__)


def _draw(source: UniformSource, task: TaskSpec) -> float:
    if task.is_fixed:
        return float(task.min_duration)
    return float(source.uniform(task.min_duration, task.max_duration))


def run(
    task_a: TaskSpec,
    task_b: TaskSpec,
    threshold: float,
    trial_count: int,
    *,
    source: UniformSource | None = None,
) -> SimulationResult:
    """Estimate P(A + B <= threshold) with `trial_count` independent trials.

    A and B are drawn uniformly and independently from each task's
    [min_duration, max_duration]. Raises `InvalidParameter` before any
    sampling if the parameters are out of range.
    """

    validate_run_parameters(task_a, task_b, threshold, trial_count)
    if source is None:
        source = make_source()

    durations: list[float] = []
    success_count = 0
    for _ in range(trial_count):
        total = _draw(source, task_a) + _draw(source, task_b)
        durations.append(total)
        if total <= threshold:
            success_count += 1

    result = SimulationResult(
        durations=tuple(durations),
        success_count=success_count,
        total_trials=trial_count,
        probability=success_count / trial_count,
        threshold=float(threshold),
    )
    logger.debug(
        "simulation_completed",
        trials=trial_count,
        success_count=success_count,
        probability=result.probability,
    )
    return result


def simulate_scenario(
    scenario: Scenario,
    *,
    seed: int | None = None,
    backend: str = "stdlib",
) -> SimulationResult:
    return run(
        scenario.task_a,
        scenario.task_b,
        scenario.threshold,
        scenario.trials,
        source=make_source(seed=seed, backend=backend),
    )
