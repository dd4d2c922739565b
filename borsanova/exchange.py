"""Trading engine of a single exchange: inventory, allocations and prices."""
from __future__ import annotations

import logging
import threading
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Dict, List, Literal, Optional, Tuple

from .exceptions import (
    InsufficientHoldingsError,
    InsufficientInventoryError,
    InvalidArgumentError,
    NotListedError,
)
from .identity import NamedEntity
from .policies import PricePolicy, default_price_policy

if TYPE_CHECKING:
    from .company import Company
    from .operators import Operator

logger = logging.getLogger(__name__)

Side = Literal["BUY", "SELL"]


@dataclass
class StockQuote:
    """Mutable inventory entry of a company listed on an exchange."""

    price: int
    available: int


@dataclass(frozen=True)
class Trade:
    """Record of a completed trade.

    ``price`` is the pre-trade unit price used for ``total``; ``new_price`` is the
    price left on the exchange by the active policy.
    """

    exchange: str
    company: str
    operator: str
    side: Side
    quantity: int
    price: int
    total: int
    new_price: int

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def _require(value: object, what: str) -> None:
    if value is None:
        raise TypeError(f"{what} cannot be None")


def _check_quantity(quantity: int, what: str) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidArgumentError(f"{what} must be an integer, got {quantity!r}")
    if quantity <= 0:
        raise InvalidArgumentError(f"{what} must be positive, got {quantity}")


class Exchange(NamedEntity):
    """Single source of truth for the prices and inventories of the companies quoted on it.

    Every public operation runs under a per-exchange re-entrant lock, so a host
    may share an exchange between threads. Preconditions are checked before any
    mutation: a rejected call leaves inventory, allocations and price untouched.
    """

    kind = "exchange"

    def __init__(self, name: str, price_policy: Optional[PricePolicy] = None) -> None:
        super().__init__(name)
        self._quotes: Dict["Company", StockQuote] = {}
        self._allocations: Dict[Tuple["Company", "Operator"], int] = {}
        self._policy: PricePolicy = price_policy if price_policy is not None else default_price_policy()
        self._trades: List[Trade] = []
        self._lock = threading.RLock()

    # ------------------------------------------------------------------ policy

    @property
    def price_policy(self) -> PricePolicy:
        with self._lock:
            return self._policy

    @price_policy.setter
    def price_policy(self, policy: PricePolicy) -> None:
        _require(policy, "Price policy")
        if not isinstance(policy, PricePolicy):
            raise TypeError(f"Expected a PricePolicy, got {type(policy).__name__}")
        with self._lock:
            self._policy = policy
        logger.debug("Exchange %s now uses %r", self.name, policy)

    def set_price_policy(self, policy: PricePolicy) -> None:
        self.price_policy = policy

    # ----------------------------------------------------------------- listing

    def quote(self, company: "Company", num_shares: int, unit_price: int) -> None:
        """Register ``company`` with ``num_shares`` available at ``unit_price``.

        Quoting an already listed company replaces its inventory entry.
        """

        _require(company, "Company")
        for value, what in ((num_shares, "Number of shares"), (unit_price, "Unit price")):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"{what} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidArgumentError(f"{what} cannot be negative, got {value}")
        with self._lock:
            self._quotes[company] = StockQuote(price=unit_price, available=num_shares)
        logger.info("Quoted %s on %s: %d shares @ %d", company.name, self.name, num_shares, unit_price)

    def is_listed(self, company: "Company") -> bool:
        _require(company, "Company")
        with self._lock:
            return company in self._quotes

    def listed_companies(self) -> List["Company"]:
        with self._lock:
            return sorted(self._quotes)

    # ----------------------------------------------------------------- queries

    def _get_quote(self, company: "Company") -> StockQuote:
        quote = self._quotes.get(company)
        if quote is None:
            raise NotListedError(f"{company.name} is not listed on {self.name}")
        return quote

    def current_price(self, company: "Company") -> int:
        _require(company, "Company")
        with self._lock:
            return self._get_quote(company).price

    def available_shares(self, company: "Company") -> int:
        _require(company, "Company")
        with self._lock:
            quote = self._quotes.get(company)
            return quote.available if quote is not None else 0

    def held(self, operator: "Operator", company: "Company") -> int:
        _require(operator, "Operator")
        _require(company, "Company")
        with self._lock:
            return self._allocations.get((company, operator), 0)

    def holders(self, company: "Company") -> Dict["Operator", int]:
        """Operators holding at least one share of ``company``, ordered by name."""

        _require(company, "Company")
        with self._lock:
            holdings = [
                (operator, shares)
                for (held_company, operator), shares in self._allocations.items()
                if held_company == company and shares > 0
            ]
        return dict(sorted(holdings))

    @property
    def trades(self) -> Tuple[Trade, ...]:
        with self._lock:
            return tuple(self._trades)

    # ----------------------------------------------------------------- trading

    def buy(self, operator: "Operator", company: "Company", quantity: int) -> int:
        """Allocate ``quantity`` shares to ``operator`` and return the total cost."""

        _require(operator, "Operator")
        _require(company, "Company")
        _check_quantity(quantity, "Quantity to buy")
        with self._lock:
            quote = self._get_quote(company)
            if quote.available < quantity:
                logger.warning(
                    "Rejected buy of %d %s by %s on %s: only %d available",
                    quantity, company.name, operator.name, self.name, quote.available,
                )
                raise InsufficientInventoryError(
                    f"Cannot buy {quantity} shares of {company.name}, {quote.available} available"
                )
            price = quote.price
            total_cost = price * quantity
            quote.available -= quantity
            key = (company, operator)
            self._allocations[key] = self._allocations.get(key, 0) + quantity
            quote.price = self._policy.update(price, quantity, True)
            trade = self._record(operator, company, "BUY", quantity, price, total_cost, quote.price)
        logger.info(
            "%s bought %d %s @ %d on %s (total %d, new price %d)",
            operator.name, quantity, company.name, price, self.name, total_cost, trade.new_price,
        )
        return total_cost

    def sell(self, operator: "Operator", company: "Company", quantity: int) -> int:
        """Return ``quantity`` shares of ``operator`` to the inventory and the total revenue."""

        _require(operator, "Operator")
        _require(company, "Company")
        _check_quantity(quantity, "Quantity to sell")
        with self._lock:
            quote = self._get_quote(company)
            key = (company, operator)
            owned = self._allocations.get(key, 0)
            if owned < quantity:
                logger.warning(
                    "Rejected sell of %d %s by %s on %s: only %d held",
                    quantity, company.name, operator.name, self.name, owned,
                )
                raise InsufficientHoldingsError(
                    f"Cannot sell {quantity} shares of {company.name}, {operator.name} holds {owned}"
                )
            price = quote.price
            revenue = price * quantity
            quote.available += quantity
            self._allocations[key] = owned - quantity
            quote.price = self._policy.update(price, quantity, False)
            trade = self._record(operator, company, "SELL", quantity, price, revenue, quote.price)
        logger.info(
            "%s sold %d %s @ %d on %s (total %d, new price %d)",
            operator.name, quantity, company.name, price, self.name, revenue, trade.new_price,
        )
        return revenue

    def _record(
        self,
        operator: "Operator",
        company: "Company",
        side: Side,
        quantity: int,
        price: int,
        total: int,
        new_price: int,
    ) -> Trade:
        trade = Trade(
            exchange=self.name,
            company=company.name,
            operator=operator.name,
            side=side,
            quantity=quantity,
            price=price,
            total=total,
            new_price=new_price,
        )
        self._trades.append(trade)
        return trade
