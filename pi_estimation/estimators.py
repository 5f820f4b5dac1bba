"""Counting estimators and their closed-form pi conversions."""

import math
from typing import Tuple

from .prng import UINT32_MASK, XorShift32

NEEDLE_LENGTH = 1.0
LINE_SPACING = 1.0  # needle must not exceed spacing for the 2l/(pi t) relation


def _check_trials(trials: int) -> None:
    if trials < 0:
        raise ValueError(f"Trial count must be non-negative, received {trials}.")


def circle_count(trials: int, rng: XorShift32) -> int:
    """Count integer points of [0, MAX]^2 falling inside the quarter circle of radius MAX."""
    _check_trials(trials)
    max_sq = UINT32_MASK * UINT32_MASK
    hits = 0
    for _ in range(trials):
        x = rng.next_u32()
        y = rng.next_u32()
        if x * x + y * y <= max_sq:
            hits += 1
    return hits


def gcd(a: int, b: int) -> int:
    """Euclidean greatest common divisor."""
    while b:
        a, b = b, a % b
    return a


def draw_odd_pair(rng: XorShift32) -> Tuple[int, int]:
    # Forcing the low bit skews P(gcd == 1) to 8/pi^2 rather than 6/pi^2.
    a = rng.next_u32() | 1
    b = rng.next_u32() | 1
    return a, b


def coprime_count(trials: int, rng: XorShift32) -> int:
    """Count odd-forced random pairs whose gcd is 1."""
    _check_trials(trials)
    hits = 0
    for _ in range(trials):
        a, b = draw_odd_pair(rng)
        if gcd(a, b) == 1:
            hits += 1
    return hits


def draw_needle(rng: XorShift32) -> Tuple[float, float]:
    """Centre distance to the nearest line in [0, t/2) and angle in [0, pi/2)."""
    y = rng.next_double() * (LINE_SPACING / 2.0)
    theta = rng.next_double() * (math.pi / 2.0)
    return y, theta


def half_projection(theta: float) -> float:
    return (NEEDLE_LENGTH / 2.0) * math.sin(theta)


def buffon_count(trials: int, rng: XorShift32) -> int:
    """Count needle drops that cross a line."""
    _check_trials(trials)
    crosses = 0
    for _ in range(trials):
        y, theta = draw_needle(rng)
        if y <= half_projection(theta):
            crosses += 1
    return crosses


estimate_circle = circle_count
estimate_coprime = coprime_count
estimate_buffon = buffon_count


def hit_probability(count: int, trials: int) -> float:
    """count / trials, NaN when no trials were run."""
    if trials == 0:
        return math.nan
    return count / trials


def pi_from_circle(p: float) -> float:
    # quarter disc covers pi/4 of the square
    return 4.0 * p


def pi_from_coprime(p: float) -> float:
    """Invert P(gcd == 1) = 6/pi^2; undefined when nothing was coprime."""
    if math.isnan(p) or p <= 0.0:
        return math.nan
    return math.sqrt(6.0 / p)


def pi_from_buffon(p: float) -> float:
    """Invert P(cross) = 2l/(pi t); zero crossings map to 0.0."""
    if p > 0.0:
        return 2.0 * NEEDLE_LENGTH / (p * LINE_SPACING)
    return 0.0
