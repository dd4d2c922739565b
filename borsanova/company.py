"""Companies and the listings they hold on exchanges."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List

from .exceptions import InvalidArgumentError, NotListedError
from .identity import NamedEntity

if TYPE_CHECKING:
    from .exchange import Exchange


@dataclass(frozen=True)
class Listing:
    """Shares issued and initial unit price recorded when a company was quoted."""

    shares: int
    unit_price: int


class Company(NamedEntity):
    """A company that can be quoted on one or more exchanges.

    The company only remembers how it was quoted; prices and inventories live in
    the exchange.
    """

    kind = "company"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._listings: Dict["Exchange", Listing] = {}

    def list_on(self, exchange: "Exchange", num_shares: int, unit_price: int) -> None:
        if exchange is None:
            raise TypeError("Exchange cannot be None")
        for value, what in ((num_shares, "Number of shares"), (unit_price, "Unit price")):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidArgumentError(f"{what} must be a positive integer, got {value!r}")
        exchange.quote(self, num_shares, unit_price)
        self._listings[exchange] = Listing(shares=num_shares, unit_price=unit_price)

    def listing(self, exchange: "Exchange") -> Listing:
        if exchange is None:
            raise TypeError("Exchange cannot be None")
        try:
            return self._listings[exchange]
        except KeyError:
            raise NotListedError(f"{self.name} is not listed on {exchange.name}") from None

    def exchanges(self) -> List["Exchange"]:
        return sorted(self._listings)

    def price_at(self, exchange: "Exchange") -> int:
        """Current price of this company on ``exchange``."""

        self.listing(exchange)
        return exchange.current_price(self)
