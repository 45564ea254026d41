from __future__ import annotations

import math

from deadlinelab.types import TaskSpec

MIN_TRIALS = 100
MAX_TRIALS = 10_000


class InvalidParameter(ValueError):
    pass


def _is_real(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_task(task: TaskSpec) -> None:
    lo = task.min_duration
    hi = task.max_duration
    if not (_is_real(lo) and _is_real(hi)):
        raise InvalidParameter(f"{task.name} durations must be numbers")
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise InvalidParameter(f"{task.name} durations must be finite")
    if lo < 0 or hi < 0:
        raise InvalidParameter(f"{task.name} durations must be positive")
    if lo > hi:
        raise InvalidParameter(
            f"{task.name} minimum duration must be less than or equal to maximum"
        )


def validate_threshold(threshold: float) -> None:
    if not _is_real(threshold) or not math.isfinite(threshold):
        raise InvalidParameter(f"Available hours must be a finite number (got {threshold!r})")
    if threshold <= 0:
        raise InvalidParameter("Available hours must be positive")


def validate_run_parameters(
    task_a: TaskSpec, task_b: TaskSpec, threshold: float, trial_count: int
) -> None:
    """Engine preconditions.

    Looser than `validate_inputs`: any trial count in [1, MAX_TRIALS] is
    accepted so that tests and library callers can run small simulations.
    """

    validate_task(task_a)
    validate_task(task_b)
    validate_threshold(threshold)

    if not isinstance(trial_count, int) or isinstance(trial_count, bool):
        raise InvalidParameter(
            f"Number of trials must be an integer (got {trial_count!r})"
        )
    if trial_count < 1:
        raise InvalidParameter(f"Number of trials must be >= 1 (got {trial_count})")
    if trial_count > MAX_TRIALS:
        raise InvalidParameter(
            f"Number of trials must be <= {MAX_TRIALS:,} (got {trial_count})"
        )


def validate_inputs(
    task_a: TaskSpec, task_b: TaskSpec, threshold: float, trials: int
) -> None:
    """Input checks applied before a user-facing run is handed to the engine."""

    validate_task(task_a)
    validate_task(task_b)
    validate_threshold(threshold)
    if _is_real(trials) and not (MIN_TRIALS <= trials <= MAX_TRIALS):
        raise InvalidParameter(
            f"Number of trials must be between {MIN_TRIALS} and {MAX_TRIALS:,}"
        )
    validate_run_parameters(task_a, task_b, threshold, trials)
