"""Trading participants and their budgets."""
from __future__ import annotations

import logging

from .exceptions import InsufficientFundsError, InvalidArgumentError
from .identity import NamedEntity

logger = logging.getLogger(__name__)


def _check_amount(amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidArgumentError(f"Amount must be an integer, got {amount!r}")
    if amount <= 0:
        raise InvalidArgumentError(f"Amount must be positive, got {amount}")


class Operator(NamedEntity):
    """An operator with a non-negative budget.

    Share ownership is tracked by each exchange, and trades never debit or
    credit the budget: settling a trade is up to the caller.
    """

    kind = "operator"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._budget = 0

    @property
    def budget(self) -> int:
        return self._budget

    def deposit(self, amount: int) -> None:
        _check_amount(amount)
        self._budget += amount
        logger.debug("%s deposited %d, budget %d", self.name, amount, self._budget)

    def withdraw(self, amount: int) -> None:
        _check_amount(amount)
        if amount > self._budget:
            raise InsufficientFundsError(
                f"Insufficient funds: required {amount}, available {self._budget}"
            )
        self._budget -= amount
        logger.debug("%s withdrew %d, budget %d", self.name, amount, self._budget)
