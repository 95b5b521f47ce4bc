import numpy as np

from logistic_lab.distributions.prng import INCREMENT, MASK32, Mulberry32


def test_same_seed_gives_identical_stream():
    a = Mulberry32(42)
    b = Mulberry32(42)
    assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]


def test_reseed_discards_previous_state():
    rng = Mulberry32(7)
    first = [rng.random() for _ in range(5)]
    rng.random_array(100)
    rng.seed(7)
    assert [rng.random() for _ in range(5)] == first


def test_random_array_matches_scalar_draws():
    scalar = Mulberry32(123)
    vector = Mulberry32(123)
    expected = np.array([scalar.random() for _ in range(257)])
    drawn = vector.random_array(257)
    assert np.array_equal(drawn, expected)
    assert vector.state == scalar.state
    assert vector.random() == scalar.random()


def test_state_advances_once_per_draw():
    rng = Mulberry32(0)
    rng.random_array(10)
    assert rng.state == (10 * INCREMENT) & MASK32


def test_draws_are_uniform_in_unit_interval():
    draws = Mulberry32(2024).random_array(50_000)
    assert draws.min() >= 0.0
    assert draws.max() < 1.0
    assert abs(draws.mean() - 0.5) < 0.01
    counts, _ = np.histogram(draws, bins=10, range=(0.0, 1.0))
    assert counts.min() > 4500


def test_negative_and_large_seeds_wrap_to_32_bits():
    assert Mulberry32(-1).state == MASK32
    assert Mulberry32(2**32 + 5).random() == Mulberry32(5).random()
