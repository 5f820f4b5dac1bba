"""Engine tests: seeding, reference sequence and double range."""

from pi_estimation.prng import (
    DEFAULT_SEED,
    UINT32_MASK,
    ZERO_SEED_FALLBACK,
    XorShift32,
)


def test_seed_is_stored_verbatim():
    for seed in (1, 7, DEFAULT_SEED, UINT32_MASK):
        assert XorShift32(seed).state == seed


def test_zero_seed_uses_fallback():
    rng = XorShift32(0)
    assert rng.state == ZERO_SEED_FALLBACK

    rng.seed(0)
    assert rng.state == ZERO_SEED_FALLBACK


def test_seed_wraps_to_32_bits():
    assert XorShift32(1 << 32).state == ZERO_SEED_FALLBACK
    assert XorShift32((1 << 32) + 5).state == 5


def test_matches_reference_xorshift32_sequence():
    # Marsaglia's published stream for y = 2463534242
    rng = XorShift32(0)
    assert [rng.next_u32() for _ in range(3)] == [723471715, 2497366906, 2064144800]


def test_default_seed_sequence():
    rng = XorShift32()
    assert [rng.next_u32() for _ in range(4)] == [
        2714967881,
        2238813396,
        1250077441,
        3820100336,
    ]


def test_state_never_zero_and_stays_32_bit():
    rng = XorShift32(1)
    for _ in range(5000):
        value = rng.next_u32()
        assert value != 0
        assert 0 < value <= UINT32_MASK
        assert rng.state == value


def test_same_seed_same_stream():
    first = XorShift32(0xDEADBEEF)
    second = XorShift32(0xDEADBEEF)
    assert [first.next_u32() for _ in range(200)] == [second.next_u32() for _ in range(200)]


def test_next_double_composes_two_draws():
    rng = XorShift32()
    assert rng.next_double() == 5693700372663462 / 2**53
    # two words consumed
    assert rng.state == 2238813396


def test_next_double_in_unit_interval():
    for seed in (0, 1, DEFAULT_SEED, UINT32_MASK):
        rng = XorShift32(seed)
        for _ in range(2000):
            value = rng.next_double()
            assert 0.0 <= value < 1.0


def test_next_double_top_of_range_below_one():
    class _Saturated(XorShift32):
        def next_u32(self) -> int:
            return UINT32_MASK

    assert _Saturated().next_double() == (2**53 - 1) / 2**53
    assert _Saturated().next_double() < 1.0
