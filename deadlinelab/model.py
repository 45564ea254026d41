from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from deadlinelab.types import TaskSpec

DEFAULT_TASK_A = TaskSpec(name="Task A", min_duration=2.0, max_duration=4.0)
DEFAULT_TASK_B = TaskSpec(name="Task B", min_duration=3.0, max_duration=6.0)
DEFAULT_AVAILABLE_HOURS = 8.0
DEFAULT_TRIALS = 1000


def _hours(value: Any, key: str) -> float:
    try:
        return float(value)
    except OverflowError as exc:
        raise ValueError(f"{key} is out of range (got {value!r})") from exc


def _parse_task(obj: Any, default: TaskSpec) -> TaskSpec:
    if obj is None:
        return default
    if not isinstance(obj, dict):
        raise TypeError("task entries must be objects")
    return TaskSpec(
        name=str(obj.get("name", default.name)),
        min_duration=_hours(obj.get("min_duration", default.min_duration), "min_duration"),
        max_duration=_hours(obj.get("max_duration", default.max_duration), "max_duration"),
    )


def _task_to_json(task: TaskSpec) -> dict[str, Any]:
    return {
        "name": task.name,
        "min_duration": task.min_duration,
        "max_duration": task.max_duration,
    }


@dataclass(frozen=True)
class Scenario:
    task_a: TaskSpec
    task_b: TaskSpec
    threshold: float  # hours available before the event
    trials: int

    @staticmethod
    def default() -> "Scenario":
        return Scenario(
            task_a=DEFAULT_TASK_A,
            task_b=DEFAULT_TASK_B,
            threshold=DEFAULT_AVAILABLE_HOURS,
            trials=DEFAULT_TRIALS,
        )

    @staticmethod
    def from_json(obj: dict[str, Any]) -> "Scenario":
        if not isinstance(obj, dict):
            raise TypeError("scenario must be a JSON object")

        task_a = _parse_task(obj.get("task_a"), DEFAULT_TASK_A)
        task_b = _parse_task(obj.get("task_b"), DEFAULT_TASK_B)

        # "available_hours" is accepted as an alias for the threshold.
        threshold_raw = obj.get("threshold")
        if threshold_raw is None:
            threshold_raw = obj.get("available_hours")
        threshold = (
            _hours(threshold_raw, "threshold")
            if threshold_raw is not None
            else DEFAULT_AVAILABLE_HOURS
        )

        trials_raw = obj.get("trials", DEFAULT_TRIALS)
        if isinstance(trials_raw, bool) or not isinstance(trials_raw, (int, float)):
            raise TypeError(f"trials must be an integer (got {trials_raw!r})")
        if isinstance(trials_raw, float):
            # JSON numbers such as 1e400 parse as inf.
            if not math.isfinite(trials_raw) or not trials_raw.is_integer():
                raise ValueError(f"trials must be a whole number (got {trials_raw!r})")

        return Scenario(
            task_a=task_a,
            task_b=task_b,
            threshold=threshold,
            trials=int(trials_raw),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "task_a": _task_to_json(self.task_a),
            "task_b": _task_to_json(self.task_b),
            "threshold": self.threshold,
            "trials": self.trials,
        }

    def with_overrides(
        self,
        *,
        a_min: float | None = None,
        a_max: float | None = None,
        b_min: float | None = None,
        b_max: float | None = None,
        threshold: float | None = None,
        trials: int | None = None,
    ) -> "Scenario":
        """Return a copy with any non-None values replaced (CLI flags win)."""

        task_a = TaskSpec(
            name=self.task_a.name,
            min_duration=self.task_a.min_duration if a_min is None else float(a_min),
            max_duration=self.task_a.max_duration if a_max is None else float(a_max),
        )
        task_b = TaskSpec(
            name=self.task_b.name,
            min_duration=self.task_b.min_duration if b_min is None else float(b_min),
            max_duration=self.task_b.max_duration if b_max is None else float(b_max),
        )
        return Scenario(
            task_a=task_a,
            task_b=task_b,
            threshold=self.threshold if threshold is None else float(threshold),
            trials=self.trials if trials is None else int(trials),
        )
