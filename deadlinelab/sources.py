from __future__ import annotations

# Uniform random sources for the engine.
#
# The stdlib source is the default. The NumPy-backed source is isolated behind
# a lazy import so the engine stays importable without NumPy installed.

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from numpy.random import Generator

BACKENDS = ("stdlib", "numpy")


class UniformSource(Protocol):
    def uniform(self, lo: float, hi: float) -> float:
        raise NotImplementedError


def _clamp(x: float, lo: float, hi: float) -> float:
    # random.Random.uniform may round to hi + ulp; keep draws inside the interval.
    return min(max(x, lo), hi)


@dataclass(frozen=True)
class StdlibUniformSource:
    rng: random.Random

    def uniform(self, lo: float, hi: float) -> float:
        if lo == hi:
            return float(lo)
        return _clamp(float(self.rng.uniform(lo, hi)), lo, hi)


@dataclass(frozen=True)
class NumpyUniformSource:
    rng: "Generator"

    def uniform(self, lo: float, hi: float) -> float:
        if lo == hi:
            return float(lo)
        return _clamp(float(self.rng.uniform(lo, hi)), lo, hi)


def make_source(*, seed: int | None = None, backend: str = "stdlib") -> UniformSource:
    if backend == "stdlib":
        return StdlibUniformSource(rng=random.Random(seed))
    if backend == "numpy":
        try:
            import numpy as np
        except ModuleNotFoundError as exc:  # pragma: no cover
            raise ModuleNotFoundError(
                "NumPy is required for the numpy backend. Install with: pip install numpy"
            ) from exc
        return NumpyUniformSource(rng=np.random.default_rng(seed))
    raise ValueError(f"Unsupported random backend: {backend!r} (expected one of {BACKENDS})")
