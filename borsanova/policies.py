"""Price policies applied by an exchange after every completed trade."""
from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidArgumentError

MIN_PRICE_AFTER_SALE = 1


class PricePolicy:
    """Protocol for price update rules.

    Implementations must be pure: the returned price depends only on the
    arguments and on the fixed parameters of the policy.
    """

    def update(self, current_price: int, quantity: int, is_purchase: bool) -> int:
        raise NotImplementedError


def _check_step(step: int) -> None:
    if isinstance(step, bool) or not isinstance(step, int):
        raise InvalidArgumentError(f"Policy step must be an integer, got {step!r}")
    if step < 0:
        raise InvalidArgumentError(f"Policy step must be >= 0, got {step}")


@dataclass(frozen=True)
class ConstantIncrement(PricePolicy):
    """Raise the price by ``step`` on every purchase, leave it unchanged on sales."""

    step: int = 0

    def __post_init__(self) -> None:
        _check_step(self.step)

    def update(self, current_price: int, quantity: int, is_purchase: bool) -> int:  # noqa: ARG002
        if is_purchase:
            return current_price + self.step
        return current_price


@dataclass(frozen=True)
class ConstantDecrement(PricePolicy):
    """Lower the price by ``step`` on every sale, never below 1; purchases leave it unchanged."""

    step: int = 0

    def __post_init__(self) -> None:
        _check_step(self.step)

    def update(self, current_price: int, quantity: int, is_purchase: bool) -> int:  # noqa: ARG002
        if is_purchase:
            return current_price
        return max(current_price - self.step, MIN_PRICE_AFTER_SALE)


POLICY_KINDS = {
    "increment": ConstantIncrement,
    "decrement": ConstantDecrement,
}


def default_price_policy() -> PricePolicy:
    """Policy installed on a freshly created exchange: prices never move."""

    return ConstantIncrement(0)


def create_price_policy(kind: str, step: int = 0) -> PricePolicy:
    """Factory that returns the policy registered under ``kind``."""

    try:
        policy_cls = POLICY_KINDS[kind.lower()]
    except (AttributeError, KeyError):
        known = ", ".join(sorted(POLICY_KINDS))
        raise InvalidArgumentError(f"Unknown price policy {kind!r}, expected one of: {known}") from None
    return policy_cls(step)
