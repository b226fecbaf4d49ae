"""
Company ledger: inventory and cash bookkeeping plus the per-period history.
"""

from dataclasses import asdict, dataclass, field

import pandas as pd

from .decision import Decision
from .events import MarketEvent


@dataclass(frozen=True)
class PeriodRecord:
    """Immutable audit entry for one settled period."""

    period: int
    decision: Decision
    event: MarketEvent
    hidden_base_demand: float  # audit only, never fed to the advisor
    potential_demand: int
    sold: int
    inventory_available: int
    inventory_end: int
    revenue: float
    cost: float
    profit: float
    cash_after: float
    proxy_before: float


@dataclass
class Company:
    """
    Single-product company state mutated once per period by ``settle``.
    """

    name: str = "YouCo"
    inventory: int = 40
    cash: float = 20000.0
    unit_cost: float = 8.0
    fixed_cost: float = 1200.0
    history: list[PeriodRecord] = field(default_factory=list)

    @classmethod
    def from_config(cls, config) -> "Company":
        return cls(
            name=config.company_name,
            inventory=config.starting_inventory,
            cash=config.starting_cash,
            unit_cost=config.unit_cost,
            fixed_cost=config.fixed_cost,
        )

    def settle(
        self,
        period: int,
        decision: Decision,
        event: MarketEvent,
        potential_demand: int,
        hidden_base_demand: float,
        proxy: float,
    ) -> PeriodRecord:
        """Apply production, sales and costs for one period and append its record."""
        if period != len(self.history) + 1:
            raise ValueError(
                f"Period {period} settled out of order; expected {len(self.history) + 1}"
            )
        if potential_demand < 0:
            raise ValueError(f"Potential demand cannot be negative: {potential_demand}")

        self.inventory += decision.production
        inventory_available = self.inventory
        sold = min(int(potential_demand), inventory_available)
        self.inventory -= sold

        revenue = sold * decision.price
        cost = decision.production * self.unit_cost + decision.ad_spend + self.fixed_cost
        profit = revenue - cost
        self.cash += profit

        record = PeriodRecord(
            period=period,
            decision=decision,
            event=event,
            hidden_base_demand=hidden_base_demand,
            potential_demand=int(potential_demand),
            sold=sold,
            inventory_available=inventory_available,
            inventory_end=self.inventory,
            revenue=revenue,
            cost=cost,
            profit=profit,
            cash_after=self.cash,
            proxy_before=proxy,
        )
        self.history.append(record)
        return record

    def is_bankrupt(self, threshold: float) -> bool:
        return self.cash < threshold

    def recent_sales(self, window: int) -> list[int]:
        return [record.sold for record in self.history[-window:]]

    def summary(self) -> dict:
        return {
            "total_profit": sum(record.profit for record in self.history),
            "total_units_sold": sum(record.sold for record in self.history),
            "final_cash": self.cash,
            "final_inventory": self.inventory,
            "periods_played": len(self.history),
        }

    def history_frame(self) -> pd.DataFrame:
        """Flatten the period history into a DataFrame for reporting."""
        rows = []
        for record in self.history:
            row = asdict(record)
            row.pop("decision")
            row.pop("event")
            row["price"] = record.decision.price
            row["ad_spend"] = record.decision.ad_spend
            row["production"] = record.decision.production
            row["event"] = record.event.name
            rows.append(row)
        if not rows:
            return pd.DataFrame()
        return pd.DataFrame(rows).set_index("period")
