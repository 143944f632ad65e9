"""Utilities for loading the configuration and building clients from it."""

from __future__ import annotations

import os
from datetime import timedelta
from functools import partial
from pathlib import Path
from typing import Any, Callable, Optional

import yaml
from pydantic import ValidationError

from coffeeshop_model.backend import logger
from coffeeshop_model.backend.clients import CoffeeShopClient, ToxiproxyClient
from coffeeshop_model.backend.exceptions import ConfigurationError
from coffeeshop_model.common import COFFEESHOP_MODEL_CONFIG_ENV, COFFEESHOP_MODEL_VERSION
from coffeeshop_model.common.structures import ShopConfiguration
from coffeeshop_model.testing.model import CoffeeShopModel


def load_configuration(config_file_path: str | Path) -> ShopConfiguration:
    """Load configuration from YAML file.

    Args:
        config_file_path: Path to the YAML configuration file

    Returns:
        Validated configuration

    Raises:
        FileNotFoundError: If the configuration file cannot be found
        ConfigurationError: If the file is malformed or fails validation
    """
    with Path(config_file_path).open(encoding="UTF-8") as stream:
        try:
            config = yaml.safe_load(stream)
        except yaml.YAMLError as e:
            msg = f"Unable to parse {config_file_path}: {e}"
            raise ConfigurationError(msg) from e

    if not isinstance(config, dict):
        msg = f"{config_file_path} must contain a mapping"
        raise ConfigurationError(msg)

    try:
        return ShopConfiguration(**config)
    except ValidationError as e:
        msg = f"Invalid configuration in {config_file_path}: {e}"
        raise ConfigurationError(msg) from e


def init_configuration() -> Optional[ShopConfiguration]:
    """Load the configuration named by the ``COFFEESHOP_MODEL_CONFIG`` variable.

    Returns:
        The configuration, or None when the variable is unset
    """
    config_file_path = os.environ.get(COFFEESHOP_MODEL_CONFIG_ENV)
    if not config_file_path:
        return None
    logger.info("Using %s as a config source", config_file_path)
    return load_configuration(config_file_path)


def get_shop_client(configuration: ShopConfiguration) -> CoffeeShopClient:
    """Create a client for the shop under test."""
    return CoffeeShopClient(
        configuration.shop_api_url,
        timeout=configuration.request_timeout,
        verify_ssl=configuration.verify_ssl,
        headers={"User-Agent": f"coffeeshop-model/{COFFEESHOP_MODEL_VERSION}"},
    )


def get_fault_proxy(configuration: ShopConfiguration) -> Optional[ToxiproxyClient]:
    """Create a client for the database proxy, if one is configured."""
    if configuration.fault_proxy is None:
        return None
    return ToxiproxyClient(
        configuration.fault_proxy.api_url,
        configuration.fault_proxy.proxy_name,
        timeout=configuration.request_timeout,
    )


def build_model(configuration: ShopConfiguration) -> CoffeeShopModel:
    """Create an empty model for the configured shop."""
    return get_model_factory(configuration)()


def get_model_factory(configuration: ShopConfiguration) -> Callable[[], CoffeeShopModel]:
    """Create a factory of fresh models, one per action sequence."""
    max_response_time = None
    if configuration.max_response_time_ms is not None:
        max_response_time = timedelta(milliseconds=configuration.max_response_time_ms)
    return partial(
        CoffeeShopModel,
        configuration.known_flavors_pattern,
        max_response_time=max_response_time,
    )


def get_scenario_options(configuration: ShopConfiguration) -> dict[str, Any]:
    """Keyword arguments passing the configuration on to the property scenarios."""
    return {
        "flavors": list(configuration.known_flavors),
        "model_factory": get_model_factory(configuration),
        "min_size": configuration.min_sequence_size,
        "max_size": configuration.max_sequence_size,
    }
