"""Configuration utilities for the exchange simulator."""
from __future__ import annotations

import logging
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

load_dotenv()


class Settings(BaseModel):
    """Settings that configure new markets and the demo entry point."""

    price_policy: Literal["increment", "decrement"] = Field(
        default="increment",
        description="Price policy installed on every exchange created by a configured market.",
    )
    price_step: int = Field(
        default=0,
        ge=0,
        description="Constant applied by the configured price policy after each trade.",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level used by the demo entry point.",
    )

    @field_validator("price_policy", mode="before")
    @classmethod
    def _normalize_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "Settings":
        import os

        data = {}
        policy = os.getenv("BORSANOVA_PRICE_POLICY")
        if policy:
            data["price_policy"] = policy

        step = os.getenv("BORSANOVA_PRICE_STEP")
        if step:
            data["price_step"] = step

        level = os.getenv("BORSANOVA_LOG_LEVEL")
        if level:
            data["log_level"] = level

        try:
            return cls(**data)
        except ValidationError as exc:
            raise RuntimeError(f"Invalid borsanova configuration: {exc}") from exc


settings = Settings.from_env()
"""Singleton-like settings object that modules can import directly."""
