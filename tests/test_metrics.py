from __future__ import annotations

import math
import random

import pytest

from deadlinelab.metrics import (
    _percentile_sorted,
    classify_probability,
    interpretation,
    render_interpretation,
    standard_error,
    summarize,
)
from deadlinelab.sim import run
from deadlinelab.sources import StdlibUniformSource
from deadlinelab.types import SimulationResult, TaskSpec

_A = TaskSpec("Task A", 2.0, 4.0)
_B = TaskSpec("Task B", 3.0, 6.0)


@pytest.mark.parametrize(
    ("p", "band"),
    [(1.0, "high"), (0.8, "high"), (0.79, "moderate"), (0.5, "moderate"), (0.49, "low"), (0.0, "low")],
)
def test_classify_probability_bands(p: float, band: str) -> None:
    assert classify_probability(p) == band


def test_standard_error() -> None:
    assert standard_error(0.5, 100) == pytest.approx(0.05)
    assert standard_error(1.0, 100) == 0.0
    assert math.isnan(standard_error(0.5, 0))


def test_percentile_edges_p0_p100_and_interpolation() -> None:
    assert math.isnan(_percentile_sorted([], 50))
    vals = [1.0, 2.0, 3.0]
    assert _percentile_sorted(vals, 0) == 1.0
    assert _percentile_sorted(vals, 100) == 3.0
    assert _percentile_sorted(vals, 50) == 2.0
    assert _percentile_sorted(vals, 10) == pytest.approx(1.2)
    assert _percentile_sorted([7.0], 90) == 7.0


def test_interpretation_text_for_certain_success() -> None:
    a = TaskSpec("Task A", 1.0, 1.0)
    b = TaskSpec("Task B", 1.0, 1.0)
    result = run(a, b, 8.0, 1000)

    info = interpretation(result, task_a=a, task_b=b)

    assert info["band"] == "high"
    assert info["headline"] == "High Probability of Success"
    assert info["summary"] == (
        "Based on 1000 simulation trials, there is a 100.0% chance of completing "
        "both tasks within the available 8 hours."
    )
    assert info["tasks"] == [
        "Task A: Takes between 1 and 1 hours",
        "Task B: Takes between 1 and 1 hours",
    ]


def test_interpretation_low_band_and_rendering() -> None:
    result = SimulationResult(
        durations=(10.0,) * 100,
        success_count=0,
        total_trials=100,
        probability=0.0,
        threshold=7.5,
    )
    info = interpretation(result, task_a=_A, task_b=_B)
    text = render_interpretation(info)

    assert info["band"] == "low"
    assert "0.0% chance" in info["summary"]
    assert "available 7.5 hours" in info["summary"]
    assert "Task Characteristics:" in text
    assert "  - Task B: Takes between 3 and 6 hours" in text
    assert text.splitlines()[-2] == "Low Probability of Success"
    assert "prioritizing one task" in text


def test_summarize_reports_statistics_and_histogram() -> None:
    result = run(_A, _B, 8.0, 1000, source=StdlibUniformSource(rng=random.Random(8)))
    summary = summarize(result, num_bins=5)

    assert summary["trials"] == 1000
    assert summary["success_count"] == result.success_count
    assert summary["probability"] == result.probability
    assert summary["probability_pct"] == round(result.probability * 100.0, 1)
    assert summary["band"] == classify_probability(result.probability)
    assert summary["threshold"] == 8.0

    hours = summary["duration_hours"]
    assert 5.0 <= hours["min"] <= hours["p10"] <= hours["p50"] <= hours["p90"] <= hours["max"] <= 10.0
    assert hours["mean"] == pytest.approx(sum(result.durations) / 1000)

    assert len(summary["histogram"]) == 5
    assert sum(b["count"] for b in summary["histogram"]) == 1000
    assert set(summary["histogram"][0]) == {
        "range",
        "start",
        "end",
        "count",
        "percentage",
        "is_success",
    }
