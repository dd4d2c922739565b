"""
Tests for price policies: ConstantIncrement, ConstantDecrement, factory

Coverage:
- Price change on purchase and sale
- Floor of 1 for ConstantDecrement
- Rejection of negative constants
- Building a policy from its name
"""

import dataclasses

import pytest

from borsanova.exceptions import InvalidArgumentError
from borsanova.policies import (
    ConstantDecrement,
    ConstantIncrement,
    PricePolicy,
    create_price_policy,
    default_price_policy,
)


class TestConstantIncrement:
    """Tests for ConstantIncrement."""

    def test_purchase_adds_step(self) -> None:
        assert ConstantIncrement(3).update(10, 5, True) == 13

    def test_sale_leaves_price(self) -> None:
        assert ConstantIncrement(3).update(10, 5, False) == 10

    def test_quantity_is_ignored(self) -> None:
        policy = ConstantIncrement(2)
        assert policy.update(10, 1, True) == policy.update(10, 1000, True)

    def test_zero_step_never_moves(self) -> None:
        policy = ConstantIncrement(0)
        assert policy.update(7, 4, True) == 7
        assert policy.update(7, 4, False) == 7

    def test_negative_step_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ConstantIncrement(-1)

    def test_non_integer_step_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ConstantIncrement(1.5)  # type: ignore[arg-type]

    def test_policy_is_immutable(self) -> None:
        policy = ConstantIncrement(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            policy.step = 5  # type: ignore[misc]


class TestConstantDecrement:
    """Tests for ConstantDecrement."""

    def test_sale_subtracts_step(self) -> None:
        assert ConstantDecrement(3).update(10, 2, False) == 7

    def test_purchase_leaves_price(self) -> None:
        assert ConstantDecrement(3).update(10, 2, True) == 10

    @pytest.mark.parametrize("price", [1, 2, 3, 5])
    def test_price_floored_at_one(self, price: int) -> None:
        assert ConstantDecrement(5).update(price, 1, False) == 1

    def test_repeated_sales_never_below_one(self) -> None:
        policy = ConstantDecrement(4)
        price = 20
        for _ in range(50):
            price = policy.update(price, 1, False)
            assert price >= 1
        assert price == 1

    def test_negative_step_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ConstantDecrement(-3)


class TestFactory:
    """Tests for create_price_policy."""

    def test_default_policy(self) -> None:
        assert default_price_policy() == ConstantIncrement(0)

    def test_create_increment(self) -> None:
        assert create_price_policy("increment", 2) == ConstantIncrement(2)

    def test_create_decrement_case_insensitive(self) -> None:
        assert create_price_policy("Decrement", 4) == ConstantDecrement(4)

    def test_unknown_kind(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Unknown price policy"):
            create_price_policy("random", 1)

    def test_negative_step_through_factory(self) -> None:
        with pytest.raises(InvalidArgumentError):
            create_price_policy("increment", -1)

    def test_base_protocol_not_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            PricePolicy().update(1, 1, True)
