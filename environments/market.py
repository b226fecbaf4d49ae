"""
Stochastic single-product market with hidden demand parameters.
The advisor only ever sees the integer sales this market realizes.
"""

import math
from dataclasses import replace

from config.config import MarketConfig
from models.decision import Decision
from models.events import MarketEvent
from models.state import MarketState
from utils.logger import get_logger
from utils.numeric import round_half_up
from utils.random_source import RandomSource


class Market:
    """
    The true generative demand process.

    Latent mean demand:
        base + shock - sensitivity * price * (1 + price_mult)
        + ad_effect * ln(1 + ad) * (1 + ad_mult) + availability * inventory
    plus Normal(0, noise) noise, floored at 0 and rounded half up.
    """

    def __init__(self, config: MarketConfig, rng: RandomSource):
        self.config = config
        self.rng = rng
        self.logger = get_logger(self.__class__.__name__)
        self._state = MarketState.from_config(config)
        self.logger.info(
            f"Market initialized: base demand {self._state.base_demand:.1f}, noise std {self._state.noise_std_dev}"
        )

    @property
    def hidden_base_demand(self) -> float:
        return self._state.base_demand

    @property
    def state(self) -> MarketState:
        """Copy of the hidden state, for audit and tests."""
        return replace(self._state)

    def drift(self) -> float:
        """Advance the baseline one period and return the new value."""
        s = self._state
        shock = self.rng.normal(0.0, s.drift_noise_std_dev)
        s.base_demand = max(s.min_base_demand, s.base_demand + s.drift_rate + shock)
        self.logger.debug(f"Baseline drifted to {s.base_demand:.2f} (shock {shock:+.2f})")
        return s.base_demand

    def mean_demand(self, decision: Decision, event: MarketEvent, inventory_available: int) -> float:
        s = self._state
        return (
            s.base_demand
            + event.base_shock
            - s.price_sensitivity * decision.price * (1.0 + event.price_mult)
            + s.ad_effect * math.log1p(decision.ad_spend) * (1.0 + event.ad_mult)
            + s.availability_coefficient * inventory_available
        )

    def realize_demand(self, decision: Decision, event: MarketEvent, inventory_available: int) -> int:
        """Draw the period's potential demand. The caller caps it at inventory."""
        mu = self.mean_demand(decision, event, inventory_available)
        demand = max(0.0, mu + self.rng.normal(0.0, self._state.noise_std_dev))
        units = round_half_up(demand)
        self.logger.debug(f"Realized potential demand {units} under event '{event.name}'")
        return units
