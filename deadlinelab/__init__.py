"""Monte Carlo estimator for finishing two sequential tasks before a deadline.

The engine is headless and imports NumPy lazily; it is only needed
for the optional NumPy random source.

Run from source:

    python -m deadlinelab simulate --seed 1
"""

from __future__ import annotations

from deadlinelab.histogram import bin_durations, bin_result
from deadlinelab.sim import run, simulate_scenario
from deadlinelab.types import BinSummary, SimulationResult, TaskSpec
from deadlinelab.validate import InvalidParameter

__all__ = [
    "BinSummary",
    "InvalidParameter",
    "SimulationResult",
    "TaskSpec",
    "__version__",
    "bin_durations",
    "bin_result",
    "run",
    "simulate_scenario",
]

__version__ = "0.1.0"
