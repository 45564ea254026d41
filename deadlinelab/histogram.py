from __future__ import annotations

"""Histogram binning for simulated total durations.

Bins are equal-width over the observed [min, max] range. A bin is marked as a
success only if its whole range ends at or before the threshold, so a bin that
straddles the threshold counts as failing even when some of its samples fit.
"""

import math
from collections.abc import Sequence

from deadlinelab.types import BinSummary, SimulationResult
from deadlinelab.validate import InvalidParameter

DEFAULT_NUM_BINS = 10


def format_range(start: float, end: float) -> str:
    return f"{start:.1f} - {end:.1f}"


def bin_durations(
    durations: Sequence[float],
    threshold: float,
    num_bins: int = DEFAULT_NUM_BINS,
    *,
    total_trials: int | None = None,
) -> list[BinSummary]:
    if not durations:
        raise InvalidParameter("cannot bin an empty duration sequence")
    if isinstance(num_bins, bool) or not isinstance(num_bins, int) or num_bins < 1:
        raise InvalidParameter(f"num_bins must be a positive integer (got {num_bins!r})")
    if not math.isfinite(threshold) or threshold <= 0:
        raise InvalidParameter(f"threshold must be positive (got {threshold!r})")
    if total_trials is None:
        total_trials = len(durations)
    if total_trials < 1:
        raise InvalidParameter(f"total_trials must be >= 1 (got {total_trials})")

    min_d = float(min(durations))
    max_d = float(max(durations))
    span = max_d - min_d
    bin_size = span / num_bins

    counts = [0 for _ in range(num_bins)]
    for x in durations:
        if bin_size == 0:
            # All samples identical, or a span too small to split into bins.
            idx = 0
        else:
            idx = min(int(math.floor((float(x) - min_d) / bin_size)), num_bins - 1)
        counts[idx] += 1

    out: list[BinSummary] = []
    for i, c in enumerate(counts):
        start = min_d + i * bin_size
        end = start + bin_size
        out.append(
            BinSummary(
                start=start,
                end=end,
                label=format_range(start, end),
                count=c,
                percentage=(c / total_trials) * 100.0,
                is_success=end <= threshold,
            )
        )
    return out


def bin_result(
    result: SimulationResult, num_bins: int = DEFAULT_NUM_BINS
) -> list[BinSummary]:
    return bin_durations(
        result.durations,
        result.threshold,
        num_bins,
        total_trials=result.total_trials,
    )
