"""Shared constants and configuration defaults.

Defaults can be overridden via environment variables, which is handy when the
same test suite runs against local containers and a staging deployment.
"""

import os
from decimal import Decimal
from importlib.metadata import PackageNotFoundError, version

try:
    COFFEESHOP_MODEL_VERSION = version("coffeeshop-model")
except PackageNotFoundError:
    COFFEESHOP_MODEL_VERSION = "0.0.0"

KNOWN_FLAVORS = ["Black", "Melange", "Espresso", "Ristretto", "Cappuccino"]
KNOWN_FLAVORS_PATTERN = os.environ.get(
    "COFFEESHOP_MODEL_KNOWN_FLAVORS_PATTERN", "melange|black|espresso|ristretto|cappuccino"
)
# Balance of a payment must stay strictly above this floor
CREDIT_LIMIT = Decimal(-10)
DEBT_TEST_PAYMENT_ID = "98236587"
MAX_CHECKED_ORDER_ID = 5000

COFFEESHOP_MODEL_TRIES = int(os.environ.get("COFFEESHOP_MODEL_TRIES", "100"))
COFFEESHOP_MODEL_MIN_SEQUENCE_SIZE = int(os.environ.get("COFFEESHOP_MODEL_MIN_SEQUENCE_SIZE", "1"))
COFFEESHOP_MODEL_MAX_SEQUENCE_SIZE = int(
    os.environ.get("COFFEESHOP_MODEL_MAX_SEQUENCE_SIZE", "32")
)
COFFEESHOP_MODEL_CONFIG_ENV = "COFFEESHOP_MODEL_CONFIG"
