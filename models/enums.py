"""
Centralized Enum definitions for the project.
"""

from enum import Enum


class MarketEventKind(str, Enum):
    """Kinds of random market shocks that can hit a period"""

    VIRAL_TREND = "viral_trend"
    NEW_COMPETITOR = "new_competitor"
    SUPPLY_NEWS_POSITIVE = "supply_news_positive"
    MACRO_SLUMP = "macro_slump"
    NOTHING_SPECIAL = "nothing_special"  # Neutral outcome, all shocks zero


class DecisionSource(str, Enum):
    """Who produced the decision applied in a period"""

    ADVISOR = "advisor"
    OVERRIDE = "override"
