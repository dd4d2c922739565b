"""Read-only view of the shares a company has on an exchange."""
from __future__ import annotations

from dataclasses import dataclass

from .company import Company
from .exchange import Exchange


@dataclass(frozen=True)
class Share:
    """A (company, exchange) pair; prices are always read from the exchange."""

    company: Company
    exchange: Exchange

    def __post_init__(self) -> None:
        if self.company is None or self.exchange is None:
            raise TypeError("Share requires both a company and an exchange")

    def current_price(self) -> int:
        return self.exchange.current_price(self.company)

    def available(self) -> int:
        return self.exchange.available_shares(self.company)
