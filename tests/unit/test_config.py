"""
Tests for Settings and configured markets.
"""

import pytest
from pydantic import ValidationError

from borsanova.config import Settings
from borsanova.policies import ConstantDecrement, ConstantIncrement
from borsanova.registry import Market


class TestSettings:
    """Tests for Settings validation and environment loading."""

    def test_defaults(self) -> None:
        config = Settings()
        assert config.price_policy == "increment"
        assert config.price_step == 0
        assert config.log_level == "INFO"

    def test_normalization(self) -> None:
        config = Settings(price_policy=" Decrement ", log_level="debug")
        assert config.price_policy == "decrement"
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "data",
        [
            {"price_policy": "random"},
            {"price_step": -1},
            {"log_level": "chatty"},
        ],
    )
    def test_invalid_values(self, data: dict) -> None:
        with pytest.raises(ValidationError):
            Settings(**data)

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BORSANOVA_PRICE_POLICY", "decrement")
        monkeypatch.setenv("BORSANOVA_PRICE_STEP", "3")
        monkeypatch.setenv("BORSANOVA_LOG_LEVEL", "warning")
        config = Settings.from_env()
        assert config == Settings(price_policy="decrement", price_step=3, log_level="WARNING")

    def test_from_env_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BORSANOVA_PRICE_STEP", "-2")
        with pytest.raises(RuntimeError, match="Invalid borsanova configuration"):
            Settings.from_env()


class TestConfiguredMarket:
    """Market.from_settings installs the configured policy on new exchanges."""

    def test_default_settings(self) -> None:
        market = Market.from_settings(Settings())
        assert market.exchange("MIB").price_policy == ConstantIncrement(0)

    def test_decrement_settings(self) -> None:
        market = Market.from_settings(Settings(price_policy="decrement", price_step=2))
        mib, nyse = market.exchange("MIB"), market.exchange("NYSE")
        assert mib.price_policy == ConstantDecrement(2)
        assert nyse.price_policy == ConstantDecrement(2)

    def test_policy_still_swappable(self) -> None:
        market = Market.from_settings(Settings(price_policy="decrement", price_step=2))
        mib = market.exchange("MIB")
        mib.price_policy = ConstantIncrement(1)
        assert mib.price_policy == ConstantIncrement(1)
