"""Public package surface for the Monte Carlo pi estimators."""

from .estimators import (
    buffon_count,
    circle_count,
    coprime_count,
    estimate_buffon,
    estimate_circle,
    estimate_coprime,
)
from .models import Estimate
from .prng import XorShift32
from .sim import RunConfig, render_report, run_estimates

__all__ = [
    "Estimate",
    "RunConfig",
    "XorShift32",
    "buffon_count",
    "circle_count",
    "coprime_count",
    "estimate_buffon",
    "estimate_circle",
    "estimate_coprime",
    "render_report",
    "run_estimates",
]
