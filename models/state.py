"""
Data models for the hidden market state and the advisor's learned weights.
"""

from dataclasses import dataclass, fields

from utils.numeric import clamp


@dataclass
class MarketState:
    """True demand parameters. Only ``base_demand`` changes during a run."""

    base_demand: float
    price_sensitivity: float
    ad_effect: float
    drift_rate: float
    noise_std_dev: float
    drift_noise_std_dev: float = 0.8
    availability_coefficient: float = 0.08
    min_base_demand: float = 5.0

    @classmethod
    def from_config(cls, config) -> "MarketState":
        return cls(
            base_demand=config.base_demand,
            price_sensitivity=config.price_sensitivity,
            ad_effect=config.ad_effect,
            drift_rate=config.drift_rate,
            noise_std_dev=config.noise_std_dev,
            drift_noise_std_dev=config.drift_noise_std_dev,
            availability_coefficient=config.availability_coefficient,
            min_base_demand=config.min_base_demand,
        )


@dataclass(frozen=True)
class AdvisorWeights:
    """Coefficients of the linear demand model, one per feature."""

    w0: float
    w_price: float
    w_ad: float
    w_proxy: float
    w_inventory: float

    @classmethod
    def names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def as_tuple(self) -> tuple[float, ...]:
        return (self.w0, self.w_price, self.w_ad, self.w_proxy, self.w_inventory)

    def dot(self, features: tuple[float, ...]) -> float:
        return sum(w * x for w, x in zip(self.as_tuple(), features))

    def clamped(self, bounds) -> "AdvisorWeights":
        """Saturate every weight into its (lo, hi) range from a WeightBounds."""
        values = {}
        for name, value in zip(self.names(), self.as_tuple()):
            lo, hi = getattr(bounds, name)
            values[name] = clamp(value, lo, hi)
        return AdvisorWeights(**values)
