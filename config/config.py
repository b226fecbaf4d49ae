"""
Configuration classes for the ai-tycoon project.
Defines the tunable constants of the market, the advisor and the game loop
in a type-safe, extensible way.
"""

from dataclasses import dataclass, field

from models.events import DEFAULT_EVENT_TABLE, EventBucket, validate_event_table


@dataclass(frozen=True)
class GridAxis:
    """Inclusive range ``lo..hi`` sampled every ``step``."""

    lo: float
    hi: float
    step: float

    def __post_init__(self):
        if self.step <= 0:
            raise ValueError(f"Grid step must be positive, got {self.step}")
        if self.hi < self.lo:
            raise ValueError(f"Grid upper bound {self.hi} is below lower bound {self.lo}")

    def points(self) -> list[float]:
        # Built from integer indices so the upper bound is never lost to float drift.
        count = int((self.hi - self.lo) / self.step + 1e-9) + 1
        return [self.lo + i * self.step for i in range(count)]


@dataclass(frozen=True)
class SearchGrid:
    price: GridAxis = GridAxis(9.0, 40.0, 1.0)
    ad_spend: GridAxis = GridAxis(0.0, 8000.0, 500.0)
    production: GridAxis = GridAxis(0, 120, 10)

    def size(self) -> int:
        return (
            len(self.price.points())
            * len(self.ad_spend.points())
            * len(self.production.points())
        )


@dataclass(frozen=True)
class WeightBounds:
    w0: tuple[float, float] = (-200.0, 300.0)
    w_price: tuple[float, float] = (-10.0, 10.0)
    w_ad: tuple[float, float] = (-40.0, 40.0)
    w_proxy: tuple[float, float] = (-5.0, 5.0)
    w_inventory: tuple[float, float] = (-0.5, 0.5)


@dataclass(frozen=True)
class AdvisorConfig:
    """Knobs of the online demand model. Learned state lives in the advisor."""

    initial_weights: tuple[float, float, float, float, float] = (40.0, 1.0, 8.0, 0.5, 0.1)
    learning_rate: float = 0.0015
    bounds: WeightBounds = WeightBounds()
    grid: SearchGrid = SearchGrid()


@dataclass
class MarketConfig:
    base_demand: float = 60.0
    price_sensitivity: float = 1.4
    ad_effect: float = 9.0
    drift_rate: float = 0.2
    drift_noise_std_dev: float = 0.8
    noise_std_dev: float = 6.0
    availability_coefficient: float = 0.08
    min_base_demand: float = 5.0


@dataclass
class ProxyConfig:
    initial_value: float = 50.0
    persistence: float = 0.70
    sales_weight: float = 0.30
    window: int = 3
    noise_std_dev: float = 3.0


@dataclass
class OverrideBounds:
    price: tuple[float, float] = (9.0, 40.0)
    ad_spend: tuple[float, float] = (0.0, 10000.0)
    production: tuple[int, int] = (0, 200)


@dataclass
class TycoonGameConfig:
    company_name: str = "YouCo"
    starting_inventory: int = 40
    starting_cash: float = 20000.0
    unit_cost: float = 8.0
    fixed_cost: float = 1200.0
    total_periods: int = 12
    bankruptcy_threshold: float = -5000.0
    seed: int | None = 12345
    market: MarketConfig = field(default_factory=MarketConfig)
    advisor: AdvisorConfig = field(default_factory=AdvisorConfig)
    proxy: ProxyConfig = field(default_factory=ProxyConfig)
    override_bounds: OverrideBounds = field(default_factory=OverrideBounds)
    event_table: tuple[EventBucket, ...] = DEFAULT_EVENT_TABLE

    def __post_init__(self):
        if self.total_periods < 1:
            raise ValueError(f"total_periods must be at least 1, got {self.total_periods}")
        if self.starting_inventory < 0:
            raise ValueError("starting_inventory cannot be negative")
        validate_event_table(self.event_table)


# Example usage:
# config = TycoonGameConfig(seed=7, total_periods=6)
# config = TycoonGameConfig(market=MarketConfig(noise_std_dev=0.0))
