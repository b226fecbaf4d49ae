"""
Predictive advisor for the tycoon game: an online linear demand model paired
with a grid-search planner over price, ad spend and production.
Distinguish from the market in environments/market.py, whose parameters the
advisor never sees.
"""

import math

import pandas as pd

from config.config import AdvisorConfig
from models.company import Company
from models.decision import Decision
from models.state import AdvisorWeights
from utils.logger import get_logger
from utils.numeric import round_half_up


class PredictiveAdvisor:
    """
    Learns expected units sold as a linear function of

        (1, -price * (1 + price_mult), ln(1 + ad) * (1 + ad_mult), proxy, inventory)

    and recommends the decision with the highest predicted single-period profit.

    The configuration (initial weights, learning rate, bounds, grid) is frozen;
    only ``weights`` changes, and only through ``learn``.
    """

    def __init__(self, config: AdvisorConfig | None = None):
        self.config = config or AdvisorConfig()
        self.logger = get_logger(self.__class__.__name__)
        self.learning_rate = self.config.learning_rate
        self.weights = AdvisorWeights(*self.config.initial_weights).clamped(self.config.bounds)
        self._price_points = self.config.grid.price.points()
        self._ad_points = self.config.grid.ad_spend.points()
        self._production_points = [int(p) for p in self.config.grid.production.points()]
        self.logger.info(
            f"PredictiveAdvisor initialized: LR={self.learning_rate}, "
            f"grid={len(self._price_points)}x{len(self._ad_points)}x{len(self._production_points)}"
        )

    @staticmethod
    def features(
        price: float,
        ad_spend: float,
        proxy: float,
        inventory_available: int,
        event_ad_mult: float = 0.0,
        event_price_mult: float = 0.0,
    ) -> tuple[float, float, float, float, float]:
        return (
            1.0,
            -price * (1.0 + event_price_mult),
            math.log1p(ad_spend) * (1.0 + event_ad_mult),
            proxy,
            float(inventory_available),
        )

    def predict(
        self,
        price: float,
        ad_spend: float,
        proxy: float,
        inventory_available: int,
        event_ad_mult: float = 0.0,
        event_price_mult: float = 0.0,
    ) -> float:
        """Expected units sellable under the current model, floored at 0."""
        x = self.features(price, ad_spend, proxy, inventory_available, event_ad_mult, event_price_mult)
        return max(0.0, self.weights.dot(x))

    def predicted_profit(
        self,
        company: Company,
        proxy: float,
        price: float,
        ad_spend: float,
        production: int,
        event_ad_mult: float = 0.0,
        event_price_mult: float = 0.0,
    ) -> float:
        available = company.inventory + production
        demand_hat = self.predict(price, ad_spend, proxy, available, event_ad_mult, event_price_mult)
        can_sell = min(round_half_up(demand_hat), available)
        revenue = can_sell * price
        cost = production * company.unit_cost + ad_spend + company.fixed_cost
        return revenue - cost

    def suggest(
        self,
        company: Company,
        proxy: float,
        event_ad_mult: float = 0.0,
        event_price_mult: float = 0.0,
    ) -> Decision:
        """
        Exhaustive search for the decision with the highest predicted profit.

        Candidates are visited price-major, then ad spend, then production, all
        ascending; a candidate replaces the incumbent only if strictly better,
        so the first one seen wins ties.
        """
        best_profit = -math.inf
        best = None
        for price in self._price_points:
            for ad_spend in self._ad_points:
                for production in self._production_points:
                    profit = self.predicted_profit(
                        company, proxy, price, ad_spend, production, event_ad_mult, event_price_mult
                    )
                    if profit > best_profit:
                        best_profit = profit
                        best = (price, ad_spend, production)
        price, ad_spend, production = best
        decision = Decision(price=price, ad_spend=ad_spend, production=production)
        self.logger.debug(f"Suggestion: {decision} (predicted profit {best_profit:.2f})")
        return decision

    def learn(
        self,
        decision: Decision,
        proxy: float,
        inventory_available: int,
        sold: int,
        event_ad_mult: float = 0.0,
        event_price_mult: float = 0.0,
    ) -> float:
        """
        One SGD step on the squared error of the unfloored prediction,
        followed by clamping every weight to its bound. Returns the error.
        """
        x = self.features(
            decision.price, decision.ad_spend, proxy, inventory_available, event_ad_mult, event_price_mult
        )
        y_hat = self.weights.dot(x)
        error = float(sold) - y_hat
        stepped = AdvisorWeights(
            *(w + self.learning_rate * error * xi for w, xi in zip(self.weights.as_tuple(), x))
        )
        self.weights = stepped.clamped(self.config.bounds)
        self.logger.debug(
            f"Learn: sold={sold}, predicted={y_hat:.2f}, error={error:.2f}, weights={self.format_model()}"
        )
        return error

    def describe_model(self) -> dict[str, float]:
        return dict(zip(AdvisorWeights.names(), self.weights.as_tuple()))

    def format_model(self) -> str:
        return ", ".join(f"{name}={value:.3f}" for name, value in self.describe_model().items())

    def weights_frame(self) -> pd.DataFrame:
        records = []
        for name, value in self.describe_model().items():
            lo, hi = getattr(self.config.bounds, name)
            records.append(
                {
                    "weight": name,
                    "value": value,
                    "lower_bound": lo,
                    "upper_bound": hi,
                    "at_bound": value <= lo or value >= hi,
                }
            )
        return pd.DataFrame(records).set_index("weight")
