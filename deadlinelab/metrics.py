from __future__ import annotations

import math
from typing import Any

from deadlinelab.histogram import DEFAULT_NUM_BINS, bin_result
from deadlinelab.types import SimulationResult, TaskSpec

HIGH_BAND = 0.8
MODERATE_BAND = 0.5

_HEADLINES = {
    "high": "High Probability of Success",
    "moderate": "Moderate Probability of Success",
    "low": "Low Probability of Success",
}

_ADVICE = {
    "high": "You have a good chance of completing both tasks before the event.",
    "moderate": (
        "You have about a 50/50 chance of completing both tasks in time. "
        "Consider allowing more time if possible."
    ),
    "low": (
        "It's unlikely you'll complete both tasks in time. Consider allocating "
        "more time or prioritizing one task over the other."
    ),
}


def _percentile_sorted(values_sorted: list[float], p: int) -> float:
    if not values_sorted:
        return math.nan
    if p <= 0:
        return float(values_sorted[0])
    if p >= 100:
        return float(values_sorted[-1])

    # Linear interpolation between closest ranks.
    n = len(values_sorted)
    pos = (p / 100.0) * (n - 1)
    lo = int(math.floor(pos))
    hi = int(math.ceil(pos))
    if lo == hi:
        return float(values_sorted[lo])
    frac = pos - lo
    return float(values_sorted[lo] * (1.0 - frac) + values_sorted[hi] * frac)


def _percentiles(values: list[float], ps: list[int]) -> dict[str, float]:
    values_sorted = sorted(float(x) for x in values)
    return {f"p{p}": _percentile_sorted(values_sorted, p) for p in ps}


def _fmt_hours(x: float) -> str:
    # 8.0 -> "8", 2.5 -> "2.5"
    return f"{x:g}"


def classify_probability(probability: float) -> str:
    if probability >= HIGH_BAND:
        return "high"
    if probability >= MODERATE_BAND:
        return "moderate"
    return "low"


def standard_error(probability: float, trials: int) -> float:
    if trials < 1:
        return math.nan
    return math.sqrt(max(0.0, probability * (1.0 - probability)) / trials)


def interpretation(
    result: SimulationResult, *, task_a: TaskSpec, task_b: TaskSpec
) -> dict[str, Any]:
    band = classify_probability(result.probability)
    pct = result.probability * 100.0
    return {
        "band": band,
        "headline": _HEADLINES[band],
        "advice": _ADVICE[band],
        "summary": (
            f"Based on {result.total_trials} simulation trials, there is a "
            f"{pct:.1f}% chance of completing both tasks within the available "
            f"{_fmt_hours(result.threshold)} hours."
        ),
        "tasks": [
            f"{t.name}: Takes between {_fmt_hours(t.min_duration)} and "
            f"{_fmt_hours(t.max_duration)} hours"
            for t in (task_a, task_b)
        ],
    }


def render_interpretation(info: dict[str, Any]) -> str:
    lines = [info["summary"], "", "Task Characteristics:"]
    lines.extend(f"  - {line}" for line in info["tasks"])
    lines.extend(["", info["headline"], info["advice"]])
    return "\n".join(lines)


def summarize(
    result: SimulationResult, *, num_bins: int = DEFAULT_NUM_BINS
) -> dict[str, Any]:
    durations = list(result.durations)
    return {
        "trials": result.total_trials,
        "success_count": result.success_count,
        "probability": result.probability,
        "probability_pct": round(result.probability * 100.0, 1),
        "standard_error": standard_error(result.probability, result.total_trials),
        "threshold": result.threshold,
        "band": classify_probability(result.probability),
        "duration_hours": {
            "min": min(durations) if durations else math.nan,
            "max": max(durations) if durations else math.nan,
            "mean": (sum(durations) / len(durations)) if durations else math.nan,
            **_percentiles(durations, [10, 50, 90]),
        },
        "histogram": [
            {
                "range": b.label,
                "start": b.start,
                "end": b.end,
                "count": b.count,
                "percentage": b.percentage,
                "is_success": b.is_success,
            }
            for b in bin_result(result, num_bins)
        ],
    }
