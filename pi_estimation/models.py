from dataclasses import dataclass


@dataclass(frozen=True)
class Method:
    title: str
    count_label: str
    count_width: int
    show_probability: bool = True


@dataclass
class Estimate:
    method: str
    trials: int
    count: int
    probability: float
    pi_estimate: float


METHODS = {
    "circle": Method(
        title="Method 1: Quarter-circle inside unit square (integer arithmetic, no floats)",
        count_label="hits",
        count_width=8,
        show_probability=False,
    ),
    "coprime": Method(
        title="Method 2: Probability that two integers are coprime (gcd==1)",
        count_label="coprime",
        count_width=6,
    ),
    "buffon": Method(
        title="Method 3: Buffon's needle (l=1, t=1)",
        count_label="crosses",
        count_width=6,
    ),
}
