"""Deterministic driver running every estimator against one shared engine."""

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List

from .estimators import (
    buffon_count,
    circle_count,
    coprime_count,
    hit_probability,
    pi_from_buffon,
    pi_from_circle,
    pi_from_coprime,
)
from .models import METHODS, Estimate
from .prng import DEFAULT_SEED, XorShift32

logger = logging.getLogger(__name__)

_COUNTERS: Dict[str, Callable[[int, XorShift32], int]] = {
    "circle": circle_count,
    "coprime": coprime_count,
    "buffon": buffon_count,
}

_CONVERTERS: Dict[str, Callable[[float], float]] = {
    "circle": pi_from_circle,
    "coprime": pi_from_coprime,
    "buffon": pi_from_buffon,
}


@dataclass
class RunConfig:
    """Configuration for one deterministic pass over all methods."""

    seed: int = DEFAULT_SEED
    trial_counts: tuple[int, ...] = (100, 1000, 10000, 100000)
    methods: tuple[str, ...] = ("circle", "coprime", "buffon")


def _validate(cfg: RunConfig) -> None:
    unknown = [name for name in cfg.methods if name not in METHODS]
    if unknown:
        raise ValueError(f"Unknown estimation method(s): {', '.join(unknown)}")
    if len(set(cfg.methods)) != len(cfg.methods):
        raise ValueError("Each estimation method may only be listed once")
    negative = [n for n in cfg.trial_counts if n < 0]
    if negative:
        raise ValueError(f"Trial counts must be non-negative, received {negative}")


def run_estimates(cfg: RunConfig) -> Dict[str, Any]:
    """Run each method over every trial count, threading one engine through all calls.

    Call order is part of the result: methods run in ``cfg.methods`` order and,
    within a method, over ``cfg.trial_counts`` in order.
    """

    _validate(cfg)
    rng = XorShift32(cfg.seed)
    estimates: List[Estimate] = []

    for method in cfg.methods:
        count_fn = _COUNTERS[method]
        to_pi = _CONVERTERS[method]
        for trials in cfg.trial_counts:
            count = count_fn(trials, rng)
            p = hit_probability(count, trials)
            pi_est = to_pi(p)
            logger.debug("%s N=%d count=%d p=%g pi=%g", method, trials, count, p, pi_est)
            if math.isnan(pi_est):
                logger.warning("%s estimate undefined for N=%d (count=%d)", method, trials, count)
            estimates.append(
                Estimate(
                    method=method,
                    trials=trials,
                    count=count,
                    probability=p,
                    pi_estimate=pi_est,
                )
            )

    return {
        "config": asdict(cfg),
        "estimates": [asdict(entry) for entry in estimates],
    }


def _format_row(entry: Dict[str, Any]) -> str:
    method = METHODS[entry["method"]]
    row = f"  N={entry['trials']:>6}  {method.count_label}={entry['count']:>{method.count_width}}"
    if method.show_probability:
        row += f"  p={entry['probability']:g}"
    return row + f"  pi_est={entry['pi_estimate']:g}"


def render_report(result: Dict[str, Any]) -> str:
    """Render a ``run_estimates`` result as grouped text tables."""

    lines: List[str] = []
    for method in result["config"]["methods"]:
        lines.append(METHODS[method].title)
        for entry in result["estimates"]:
            if entry["method"] == method:
                lines.append(_format_row(entry))
        lines.append("")
    return "\n".join(lines) + "\n"


if __name__ == "__main__":
    print(render_report(run_estimates(RunConfig())), end="")
