import pytest

from config.config import MarketConfig, WeightBounds
from models.state import AdvisorWeights, MarketState


def test_market_state_from_config():
    state = MarketState.from_config(MarketConfig(base_demand=75.0))
    assert state.base_demand == 75.0
    assert state.price_sensitivity == 1.4
    assert state.min_base_demand == 5.0


def test_advisor_weights_names_and_tuple():
    weights = AdvisorWeights(40.0, 1.0, 8.0, 0.5, 0.1)
    assert AdvisorWeights.names() == ["w0", "w_price", "w_ad", "w_proxy", "w_inventory"]
    assert weights.as_tuple() == (40.0, 1.0, 8.0, 0.5, 0.1)


def test_advisor_weights_dot():
    weights = AdvisorWeights(1.0, 2.0, 3.0, 4.0, 5.0)
    assert weights.dot((1.0, 1.0, 1.0, 1.0, 1.0)) == 15.0
    assert weights.dot((1.0, 0.0, 0.0, 0.0, 2.0)) == 11.0


def test_advisor_weights_clamped():
    weights = AdvisorWeights(1000.0, -50.0, 10.0, 7.0, -0.9)
    clamped = weights.clamped(WeightBounds())
    assert clamped == AdvisorWeights(300.0, -10.0, 10.0, 5.0, -0.5)


def test_advisor_weights_frozen():
    weights = AdvisorWeights(0.0, 0.0, 0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        weights.w0 = 1.0  # type: ignore[misc]
