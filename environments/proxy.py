"""
Public demand proxy: a lagged, noisy, exponentially smoothed view of recent
sales that both the player and the advisor can observe.
"""

from collections.abc import Sequence

from config.config import ProxyConfig
from utils.logger import get_logger
from utils.random_source import RandomSource

logger = get_logger("environments.proxy")


def update_public_proxy(
    proxy: float,
    recent_sold: Sequence[int],
    rng: RandomSource,
    config: ProxyConfig,
) -> float:
    """
    Blend the previous proxy with the average of the last ``config.window`` sales.

    ``recent_sold`` is the full sales history (oldest first); only its tail is used.
    Returns ``max(0, persistence * proxy + sales_weight * avg + Normal(0, noise))``.
    """
    window = list(recent_sold)[-config.window :]
    if not window:
        raise ValueError("Cannot update the public proxy before any period has been settled")
    avg_sold = sum(window) / len(window)
    noise = rng.normal(0.0, config.noise_std_dev)
    updated = max(0.0, config.persistence * proxy + config.sales_weight * avg_sold + noise)
    logger.debug(f"Proxy {proxy:.2f} -> {updated:.2f} (avg sold {avg_sold:.2f}, noise {noise:+.2f})")
    return updated
