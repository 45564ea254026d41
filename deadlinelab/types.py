from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskSpec:
    name: str
    min_duration: float  # hours
    max_duration: float  # hours

    @property
    def is_fixed(self) -> bool:
        return self.min_duration == self.max_duration

    @property
    def span(self) -> float:
        return self.max_duration - self.min_duration


@dataclass(frozen=True)
class SimulationResult:
    durations: tuple[float, ...]  # one total per trial, generation order
    success_count: int
    total_trials: int
    probability: float
    threshold: float


@dataclass(frozen=True)
class BinSummary:
    start: float
    end: float
    label: str
    count: int
    percentage: float
    is_success: bool  # whole bin range fits within the threshold
