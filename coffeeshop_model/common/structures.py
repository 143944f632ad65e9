"""Configuration structures for running the model against a live shop.

The YAML configuration file is validated by these models before any client
is built, so a typo in a URL or an invalid flavor pattern fails early instead
of in the middle of a property run.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from coffeeshop_model.common import (
    COFFEESHOP_MODEL_MAX_SEQUENCE_SIZE,
    COFFEESHOP_MODEL_MIN_SEQUENCE_SIZE,
    COFFEESHOP_MODEL_TRIES,
    KNOWN_FLAVORS,
    KNOWN_FLAVORS_PATTERN,
)


def _validate_http_url(v: str, field_name: str) -> str:
    if not v.startswith(("http://", "https://")):
        msg = f"{field_name} must start with http:// or https://"
        raise ValueError(msg)
    return v.rstrip("/")


class FaultProxySettings(BaseModel):
    """Toxiproxy proxy sitting between the shop and its database."""

    api_url: str = Field(..., description="Base URL of the Toxiproxy API")
    proxy_name: str = Field(default="postgres", description="Name of the database proxy")

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate that api_url is a valid HTTP/HTTPS URL."""
        return _validate_http_url(v, "api_url")


class ShopConfiguration(BaseModel):
    """Complete configuration of a model run.

    Attributes:
        shop_api_url: Base URL of the coffee shop under test
        fault_proxy: Fault-injection proxy settings; faults are not injected without it
        known_flavors_pattern: Case-insensitive pattern of flavors the shop serves
        known_flavors: Flavors used when ordering existing coffee
        request_timeout: HTTP timeout in seconds
        max_response_time_ms: Upper bound for every response, unchecked when unset
        tries: Number of sequences generated per property
        min_sequence_size: Minimal number of actions per sequence
        max_sequence_size: Maximal number of actions per sequence
        verify_ssl: Whether to verify SSL certificates
        log_level: Level passed to the logger configuration
        json_logs: Whether log records are rendered as JSON lines
    """

    shop_api_url: str = Field(..., description="Base URL of the coffee shop")
    fault_proxy: Optional[FaultProxySettings] = Field(
        default=None, description="Fault-injection proxy settings"
    )
    known_flavors_pattern: str = Field(default=KNOWN_FLAVORS_PATTERN)
    known_flavors: list[str] = Field(default_factory=lambda: list(KNOWN_FLAVORS))
    request_timeout: float = Field(default=30.0, gt=0)
    max_response_time_ms: Optional[int] = Field(default=None, gt=0)
    tries: int = Field(default=COFFEESHOP_MODEL_TRIES, gt=0)
    min_sequence_size: int = Field(default=COFFEESHOP_MODEL_MIN_SEQUENCE_SIZE, ge=0)
    max_sequence_size: int = Field(default=COFFEESHOP_MODEL_MAX_SEQUENCE_SIZE, gt=0)
    verify_ssl: bool = True
    log_level: str = "INFO"
    json_logs: bool = True

    @field_validator("shop_api_url")
    @classmethod
    def validate_shop_api_url(cls, v: str) -> str:
        """Validate that shop_api_url is a valid HTTP/HTTPS URL."""
        return _validate_http_url(v, "shop_api_url")

    @field_validator("known_flavors_pattern")
    @classmethod
    def validate_known_flavors_pattern(cls, v: str) -> str:
        """Make sure the flavor pattern compiles."""
        try:
            re.compile(v)
        except re.error as e:
            msg = f"known_flavors_pattern is not a valid regular expression: {e}"
            raise ValueError(msg) from e
        return v

    @field_validator("known_flavors")
    @classmethod
    def validate_known_flavors(cls, v: list[str]) -> list[str]:
        """At least one flavor is needed to order existing coffee."""
        if not v:
            msg = "known_flavors must not be empty"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_sequence_sizes(self) -> ShopConfiguration:
        """The sequence size range must not be empty."""
        if self.min_sequence_size > self.max_sequence_size:
            msg = "min_sequence_size must not exceed max_sequence_size"
            raise ValueError(msg)
        return self
