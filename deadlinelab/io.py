from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

from deadlinelab.types import BinSummary, SimulationResult


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def write_summary_json(path: Path, summary: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(summary, indent=2, sort_keys=True), encoding="utf-8")


def write_durations_csv(path: Path, result: SimulationResult) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["trial", "duration_hours", "success"])
        for i, d in enumerate(result.durations):
            w.writerow([i, d, int(d <= result.threshold)])


def write_histogram_csv(path: Path, bins: list[BinSummary]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["bin", "start", "end", "count", "percentage", "is_success"])
        for i, b in enumerate(bins):
            w.writerow([i, b.start, b.end, b.count, b.percentage, int(b.is_success)])
