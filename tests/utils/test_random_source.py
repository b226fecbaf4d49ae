import pytest

from utils.random_source import RandomSource


def test_same_seed_reproduces_sequence():
    a = RandomSource(seed=42)
    b = RandomSource(seed=42)
    draws_a = [a.uniform() for _ in range(5)] + [a.normal(10.0, 2.0) for _ in range(5)]
    draws_b = [b.uniform() for _ in range(5)] + [b.normal(10.0, 2.0) for _ in range(5)]
    assert draws_a == draws_b


def test_different_seeds_diverge():
    assert RandomSource(seed=1).uniform() != RandomSource(seed=2).uniform()


def test_uniform_range_and_type():
    rng = RandomSource(seed=7)
    for _ in range(1000):
        u = rng.uniform()
        assert isinstance(u, float)
        assert 0.0 <= u < 1.0


def test_normal_zero_std_returns_mean():
    rng = RandomSource(seed=7)
    assert rng.normal(3.5, 0.0) == 3.5


def test_normal_sample_moments():
    rng = RandomSource(seed=123)
    samples = [rng.normal(5.0, 2.0) for _ in range(20000)]
    mean = sum(samples) / len(samples)
    var = sum((s - mean) ** 2 for s in samples) / len(samples)
    assert mean == pytest.approx(5.0, abs=0.1)
    assert var == pytest.approx(4.0, rel=0.1)


def test_normal_rejects_negative_std():
    with pytest.raises(ValueError):
        RandomSource(seed=0).normal(0.0, -1.0)


def test_instances_are_independent():
    a = RandomSource(seed=9)
    b = RandomSource(seed=9)
    a.uniform()
    a.uniform()
    first_b = b.uniform()
    assert first_b == RandomSource(seed=9).uniform()
