"""
Market event models and the bucket table used to draw them.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from .enums import MarketEventKind


class MarketEvent(BaseModel):
    """A per-period shock to baseline demand, ad effectiveness and price sensitivity."""

    model_config = ConfigDict(frozen=True)

    kind: MarketEventKind
    name: str
    base_shock: float = 0.0
    ad_mult: float = 0.0  # added to 1.0 as a multiplier on ad effectiveness
    price_mult: float = 0.0  # added to 1.0 as a multiplier on price sensitivity


NO_EVENT = MarketEvent(kind=MarketEventKind.NOTHING_SPECIAL, name="Nothing Special")


@dataclass(frozen=True)
class EventBucket:
    """Half-open slice ``[lo, hi)`` of the unit interval mapped to one event."""

    lo: float
    hi: float
    event: MarketEvent

    def contains(self, u: float) -> bool:
        return self.lo <= u < self.hi


DEFAULT_EVENT_TABLE: tuple[EventBucket, ...] = (
    EventBucket(
        0.00,
        0.10,
        MarketEvent(
            kind=MarketEventKind.VIRAL_TREND,
            name="Viral Trend",
            base_shock=20.0,
            ad_mult=0.50,
            price_mult=-0.10,
        ),
    ),
    EventBucket(
        0.10,
        0.20,
        MarketEvent(
            kind=MarketEventKind.NEW_COMPETITOR,
            name="New Competitor",
            base_shock=-15.0,
            ad_mult=-0.10,
            price_mult=0.25,
        ),
    ),
    EventBucket(
        0.20,
        0.30,
        MarketEvent(
            kind=MarketEventKind.SUPPLY_NEWS_POSITIVE,
            name="Supply News (positive)",
            base_shock=5.0,
            ad_mult=0.05,
            price_mult=-0.05,
        ),
    ),
    EventBucket(
        0.30,
        0.40,
        MarketEvent(
            kind=MarketEventKind.MACRO_SLUMP,
            name="Macro Slump",
            base_shock=-10.0,
            ad_mult=-0.10,
            price_mult=0.15,
        ),
    ),
    EventBucket(0.40, 1.00, NO_EVENT),
)


def validate_event_table(table: tuple[EventBucket, ...]) -> None:
    """Raise ValueError unless the buckets tile [0, 1) contiguously and in order."""
    if not table:
        raise ValueError("Event table must contain at least one bucket")
    expected_lo = 0.0
    for bucket in table:
        if bucket.lo != expected_lo:
            raise ValueError(
                f"Event bucket '{bucket.event.name}' starts at {bucket.lo}, expected {expected_lo}"
            )
        if bucket.hi <= bucket.lo:
            raise ValueError(f"Event bucket '{bucket.event.name}' is empty: [{bucket.lo}, {bucket.hi})")
        expected_lo = bucket.hi
    if expected_lo != 1.0:
        raise ValueError(f"Event table ends at {expected_lo}, must end at 1.0")


def lookup_event(u: float, table: tuple[EventBucket, ...] = DEFAULT_EVENT_TABLE) -> MarketEvent:
    """Return the event whose bucket holds ``u``."""
    for bucket in table:
        if bucket.contains(u):
            return bucket.event
    raise ValueError(f"Draw {u} is outside the unit interval [0, 1)")


def draw_event(rng, table: tuple[EventBucket, ...] = DEFAULT_EVENT_TABLE) -> MarketEvent:
    """Draw one event using a single uniform deviate from ``rng``."""
    return lookup_event(rng.uniform(), table)
