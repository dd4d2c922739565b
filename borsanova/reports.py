"""Tabular snapshots of an exchange built with pandas."""
from __future__ import annotations

import pandas as pd

from .exchange import Exchange

INVENTORY_COLUMNS = ["company", "price", "available", "allocated", "total"]
ALLOCATION_COLUMNS = ["company", "operator", "shares"]
TRADE_COLUMNS = ["exchange", "company", "operator", "side", "quantity", "price", "total", "new_price"]


def inventory_frame(exchange: Exchange) -> pd.DataFrame:
    """One row per listed company; ``total`` is available plus allocated shares."""

    rows = []
    for company in exchange.listed_companies():
        available = exchange.available_shares(company)
        allocated = sum(exchange.holders(company).values())
        rows.append(
            {
                "company": company.name,
                "price": exchange.current_price(company),
                "available": available,
                "allocated": allocated,
                "total": available + allocated,
            }
        )
    return pd.DataFrame(rows, columns=INVENTORY_COLUMNS)


def allocations_frame(exchange: Exchange) -> pd.DataFrame:
    rows = [
        {"company": company.name, "operator": operator.name, "shares": shares}
        for company in exchange.listed_companies()
        for operator, shares in exchange.holders(company).items()
    ]
    return pd.DataFrame(rows, columns=ALLOCATION_COLUMNS)


def trades_frame(exchange: Exchange) -> pd.DataFrame:
    rows = [trade.to_dict() for trade in exchange.trades]
    return pd.DataFrame(rows, columns=TRADE_COLUMNS)
