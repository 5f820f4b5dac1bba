# Minimal xorshift32 PRNG for deterministic pi estimates (no external deps)
# Fast and fine for small runs, but too low quality for large simulations.
from dataclasses import dataclass

UINT32_MASK = 0xFFFFFFFF
DEFAULT_SEED = 123456789
ZERO_SEED_FALLBACK = 2463534242  # xorshift maps 0 -> 0 forever


@dataclass
class XorShift32:
    state: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        self.seed(self.state)

    def seed(self, value: int) -> None:
        value &= UINT32_MASK
        if value == 0:
            value = ZERO_SEED_FALLBACK
        self.state = value

    def next_u32(self) -> int:
        x = self.state
        x ^= (x << 13) & UINT32_MASK
        x ^= x >> 17
        x ^= (x << 5) & UINT32_MASK
        self.state = x
        return x

    def next_double(self) -> float:
        # 26 + 27 bits fill the 53-bit double mantissa
        hi = self.next_u32() >> 6
        lo = self.next_u32() >> 5
        return ((hi << 27) | lo) / 2**53
