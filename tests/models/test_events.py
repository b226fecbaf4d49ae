from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from models.enums import MarketEventKind
from models.events import (
    DEFAULT_EVENT_TABLE,
    NO_EVENT,
    EventBucket,
    MarketEvent,
    draw_event,
    lookup_event,
    validate_event_table,
)
from mocks import StubRandomSource


@pytest.mark.parametrize(
    "u, kind",
    [
        (0.0, MarketEventKind.VIRAL_TREND),
        (0.0999, MarketEventKind.VIRAL_TREND),
        (0.10, MarketEventKind.NEW_COMPETITOR),
        (0.25, MarketEventKind.SUPPLY_NEWS_POSITIVE),
        (0.30, MarketEventKind.MACRO_SLUMP),
        (0.40, MarketEventKind.NOTHING_SPECIAL),
        (0.999999, MarketEventKind.NOTHING_SPECIAL),
    ],
)
def test_lookup_event_half_open_buckets(u, kind):
    assert lookup_event(u).kind == kind


def test_lookup_event_outside_unit_interval():
    with pytest.raises(ValueError):
        lookup_event(1.0)
    with pytest.raises(ValueError):
        lookup_event(-0.01)


def test_default_table_shocks():
    viral = lookup_event(0.05)
    assert viral.name == "Viral Trend"
    assert (viral.base_shock, viral.ad_mult, viral.price_mult) == (20.0, 0.50, -0.10)
    competitor = lookup_event(0.15)
    assert (competitor.base_shock, competitor.ad_mult, competitor.price_mult) == (-15.0, -0.10, 0.25)
    slump = lookup_event(0.35)
    assert (slump.base_shock, slump.ad_mult, slump.price_mult) == (-10.0, -0.10, 0.15)


def test_no_event_has_zero_shocks():
    assert NO_EVENT.base_shock == 0.0
    assert NO_EVENT.ad_mult == 0.0
    assert NO_EVENT.price_mult == 0.0
    assert lookup_event(0.7) is NO_EVENT


def test_draw_event_consumes_one_uniform():
    rng = StubRandomSource(uniforms=[0.12])
    event = draw_event(rng)
    assert event.kind == MarketEventKind.NEW_COMPETITOR
    assert rng.calls == ["uniform"]


def test_draw_event_custom_table():
    boom = MarketEvent(kind=MarketEventKind.VIRAL_TREND, name="Boom", base_shock=50.0)
    table = (EventBucket(0.0, 0.5, boom), EventBucket(0.5, 1.0, NO_EVENT))
    assert draw_event(SimpleNamespace(uniform=lambda: 0.49), table) is boom
    assert draw_event(SimpleNamespace(uniform=lambda: 0.5), table) is NO_EVENT


def test_validate_default_table():
    validate_event_table(DEFAULT_EVENT_TABLE)


@pytest.mark.parametrize(
    "table",
    [
        (),
        (EventBucket(0.1, 1.0, NO_EVENT),),
        (EventBucket(0.0, 0.9, NO_EVENT),),
        (EventBucket(0.0, 0.5, NO_EVENT), EventBucket(0.5, 0.5, NO_EVENT), EventBucket(0.5, 1.0, NO_EVENT)),
    ],
)
def test_validate_rejects_malformed_tables(table):
    with pytest.raises(ValueError):
        validate_event_table(table)


def test_market_event_is_immutable():
    with pytest.raises(ValidationError):
        NO_EVENT.base_shock = 5.0  # type: ignore[misc]
