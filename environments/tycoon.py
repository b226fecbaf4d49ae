"""
Period-by-period tycoon game loop: market drift and events, advisor
suggestion, settlement, online learning and the public proxy update.
A console or test driver calls into this once per period.
"""

from collections.abc import Callable
from dataclasses import dataclass

from agents.advisor import PredictiveAdvisor
from config.config import TycoonGameConfig
from environments.market import Market
from environments.proxy import update_public_proxy
from models.company import Company, PeriodRecord
from models.decision import Decision
from models.enums import DecisionSource
from models.events import MarketEvent, draw_event
from utils.logger import get_logger
from utils.random_source import RandomSource


class GameOverError(RuntimeError):
    """Raised when a period is requested after the game has ended."""


@dataclass(frozen=True)
class PeriodBriefing:
    """What the player sees before deciding."""

    period: int
    event: MarketEvent
    suggestion: Decision
    proxy: float
    model: dict[str, float]


@dataclass(frozen=True)
class PeriodOutcome:
    decision: Decision
    source: DecisionSource
    record: PeriodRecord
    proxy: float
    bankrupt: bool
    finished: bool


class TycoonSimulation:
    """
    Owns the company ledger, the hidden market, the advisor and the proxy.

    Per-period random draw order is fixed (drift normal, event uniform,
    demand normal, proxy normal) so a seed reproduces a run exactly.
    """

    def __init__(
        self,
        config: TycoonGameConfig | None = None,
        rng: RandomSource | None = None,
        advisor: PredictiveAdvisor | None = None,
    ):
        self.config = config or TycoonGameConfig()
        self.logger = get_logger(self.__class__.__name__)
        self.rng = rng or RandomSource(self.config.seed)
        self.company = Company.from_config(self.config)
        self.market = Market(self.config.market, self.rng)
        self.advisor = advisor or PredictiveAdvisor(self.config.advisor)
        self.proxy = self.config.proxy.initial_value
        self.bankrupt = False
        self._pending: PeriodBriefing | None = None
        self.logger.info(
            f"TycoonSimulation initialized: {self.config.total_periods} periods, "
            f"{self.company.inventory} units, cash {self.company.cash:.2f}, seed {self.rng.seed}"
        )

    @property
    def current_period(self) -> int:
        return len(self.company.history) + 1

    @property
    def is_over(self) -> bool:
        return self.bankrupt or len(self.company.history) >= self.config.total_periods

    def begin_period(self) -> PeriodBriefing:
        """Drift the market, draw the event and ask the advisor for a plan."""
        if self.is_over:
            raise GameOverError(f"Game already over after {len(self.company.history)} periods")
        if self._pending is not None:
            return self._pending
        self.market.drift()
        event = draw_event(self.rng, self.config.event_table)
        suggestion = self.advisor.suggest(self.company, self.proxy, event.ad_mult, event.price_mult)
        self._pending = PeriodBriefing(
            period=self.current_period,
            event=event,
            suggestion=suggestion,
            proxy=self.proxy,
            model=self.advisor.describe_model(),
        )
        self.logger.debug(f"Period {self.current_period}: event '{event.name}', suggestion {suggestion}")
        return self._pending

    def resolve_period(self, briefing: PeriodBriefing, override: Decision | None = None) -> PeriodOutcome:
        """Apply the suggestion (or a clamped override), settle, learn and update the proxy."""
        if briefing is not self._pending:
            raise ValueError(f"Briefing for period {briefing.period} is not the pending period")
        if override is None:
            decision, source = briefing.suggestion, DecisionSource.ADVISOR
        else:
            decision, source = override.clamped(self.config.override_bounds), DecisionSource.OVERRIDE

        event = briefing.event
        inventory_available = self.company.inventory + decision.production
        potential = self.market.realize_demand(decision, event, inventory_available)
        record = self.company.settle(
            period=briefing.period,
            decision=decision,
            event=event,
            potential_demand=potential,
            hidden_base_demand=self.market.hidden_base_demand,
            proxy=briefing.proxy,
        )
        self.advisor.learn(
            decision,
            briefing.proxy,
            record.inventory_available,
            record.sold,
            event.ad_mult,
            event.price_mult,
        )
        self.proxy = update_public_proxy(
            self.proxy,
            [r.sold for r in self.company.history],
            self.rng,
            self.config.proxy,
        )
        self._pending = None

        self.bankrupt = self.company.is_bankrupt(self.config.bankruptcy_threshold)
        if self.bankrupt:
            self.logger.warning(
                f"Cash {self.company.cash:.2f} fell below {self.config.bankruptcy_threshold:.2f} in period {record.period}"
            )
        self.logger.info(
            f"Period {record.period}: sold {record.sold}, profit {record.profit:.2f}, "
            f"cash {self.company.cash:.2f}, proxy {self.proxy:.2f}"
        )
        return PeriodOutcome(
            decision=decision,
            source=source,
            record=record,
            proxy=self.proxy,
            bankrupt=self.bankrupt,
            finished=self.is_over,
        )

    def play_period(self, override: Decision | None = None) -> PeriodOutcome:
        return self.resolve_period(self.begin_period(), override)

    def run(
        self, decide: Callable[[PeriodBriefing], Decision | None] | None = None
    ) -> list[PeriodOutcome]:
        """Play until the period limit or bankruptcy. ``decide`` may return an override."""
        outcomes = []
        while not self.is_over:
            briefing = self.begin_period()
            override = decide(briefing) if decide is not None else None
            outcomes.append(self.resolve_period(briefing, override))
        self.logger.info(f"Game finished: {self.company.summary()}")
        return outcomes
