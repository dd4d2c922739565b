"""Command line demo that replays a short trading session on a fresh market."""
from __future__ import annotations

import logging
from typing import Optional

from .config import Settings, settings
from .policies import ConstantIncrement
from .registry import Market
from .reports import allocations_frame, inventory_frame, trades_frame

logger = logging.getLogger(__name__)


def run_session(market: Market) -> Market:
    """Quote Acme on MIB, then let Mario buy, switch policy, buy again and sell."""

    mib = market.exchange("MIB")
    acme = market.company("Acme")
    mario = market.operator("Mario")

    acme.list_on(mib, 100, 10)
    mib.buy(mario, acme, 10)
    mib.price_policy = ConstantIncrement(2)
    mib.buy(mario, acme, 5)
    mib.sell(mario, acme, 3)
    return market


def run_demo(config: Optional[Settings] = None) -> None:
    config = config or settings
    logging.basicConfig(level=config.log_level)
    market = run_session(Market.from_settings(config))
    mib = market.exchange("MIB")
    logger.info("Session finished with %d trades on %s", len(mib.trades), mib.name)
    for title, frame in (
        ("Inventory", inventory_frame(mib)),
        ("Allocations", allocations_frame(mib)),
        ("Trades", trades_frame(mib)),
    ):
        print(f"\n{title}\n{frame.to_string(index=False)}")


if __name__ == "__main__":
    run_demo()
