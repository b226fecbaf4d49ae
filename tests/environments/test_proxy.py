import pytest

from config.config import ProxyConfig
from environments.proxy import update_public_proxy
from mocks import StubRandomSource
from utils.random_source import RandomSource


def test_blend_formula_without_noise():
    rng = StubRandomSource()
    updated = update_public_proxy(50.0, [40, 20, 30], rng, ProxyConfig())
    assert updated == pytest.approx(0.70 * 50.0 + 0.30 * 30.0)
    assert rng.calls == [("normal", 3.0)]


def test_uses_only_last_three_periods():
    rng = StubRandomSource()
    updated = update_public_proxy(10.0, [1000, 3, 6, 9], rng, ProxyConfig())
    assert updated == pytest.approx(0.70 * 10.0 + 0.30 * 6.0)


def test_partial_window_averages_available_periods():
    updated = update_public_proxy(10.0, [20], StubRandomSource(), ProxyConfig())
    assert updated == pytest.approx(0.70 * 10.0 + 0.30 * 20.0)


def test_noise_is_added_and_result_floored():
    updated = update_public_proxy(50.0, [30], StubRandomSource(normal_offsets=[2.5]), ProxyConfig())
    assert updated == pytest.approx(35.0 + 9.0 + 2.5)
    assert update_public_proxy(1.0, [0], StubRandomSource(normal_offsets=[-50.0]), ProxyConfig()) == 0.0


def test_empty_history_rejected():
    with pytest.raises(ValueError):
        update_public_proxy(50.0, [], StubRandomSource(), ProxyConfig())


def test_zero_sales_decay_monotonically_without_noise():
    proxy = 50.0
    history = []
    values = [proxy]
    for _ in range(3):
        history.append(0)
        proxy = update_public_proxy(proxy, history, StubRandomSource(), ProxyConfig())
        values.append(proxy)
    assert values == pytest.approx([50.0, 35.0, 24.5, 17.15])
    assert all(b < a for a, b in zip(values, values[1:]))


def test_zero_sales_decay_within_noise_tolerance():
    rng = RandomSource(seed=2024)
    config = ProxyConfig()
    proxy = 50.0
    history = []
    for _ in range(3):
        history.append(0)
        previous = proxy
        proxy = update_public_proxy(proxy, history, rng, config)
        # four standard deviations of noise
        assert proxy <= config.persistence * previous + 4 * config.noise_std_dev
        assert proxy >= 0.0
    assert proxy < 50.0 * config.persistence**3 + 4 * config.noise_std_dev * 3
