"""Shared fixtures: an in-memory coffee shop and Toxiproxy served through respx."""

import json
from collections import Counter
from decimal import Decimal

import httpx
import pytest
import respx

from coffeeshop_model.backend.clients import CoffeeShopClient, FaultProxy, ToxiproxyClient
from coffeeshop_model.common import CREDIT_LIMIT

SHOP_URL = "http://coffeeshop.test"
TOXIPROXY_URL = "http://toxiproxy.test:8474"


class FakeCoffeeShop:
    """A coffee shop behaving the way the model expects.

    Attributes flip it into misbehaving on purpose, so tests can check that
    the model catches it.
    """

    FLAVORS = {"black", "melange", "espresso", "ristretto", "cappuccino"}

    def __init__(self) -> None:
        self.price = Decimal("2.50")
        self.orders: dict[int, dict] = {}
        self.balances: dict[str, Decimal] = {}
        self.next_order_number = 1
        self.database_enabled = True
        self.proxy_toggles = 0
        # Requests handled, by outcome; kept across resets
        self.requests: Counter[str] = Counter()
        self.ordered_flavors: list[str] = []
        # Misbehaviors
        self.ignore_credit_limit = False
        self.succeed_without_database = False
        self.forget_orders = False
        self.reuse_order_numbers = False

    def reset(self) -> None:
        """Forget orders and balances, like a freshly started shop."""
        self.orders.clear()
        self.balances.clear()
        self.next_order_number = 1

    def install(self, router: respx.MockRouter) -> None:
        router.post(f"{SHOP_URL}/order").mock(side_effect=self.place_order)
        router.get(host="coffeeshop.test", path__regex=r"^/order/(?P<order_id>\d+)$").mock(
            side_effect=self.order_status
        )
        router.post(f"{TOXIPROXY_URL}/proxies/postgres").mock(side_effect=self.toggle_proxy)

    def place_order(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        flavor = payload["flavor"]
        self.ordered_flavors.append(flavor)
        if flavor.lower() not in self.FLAVORS:
            self.requests["rejected"] += 1
            details = [f"We don't offer {flavor}. Please choose one of our flavors."]
            return httpx.Response(400, json={"error": {"details": details}})
        if not self.database_enabled and not self.succeed_without_database:
            return httpx.Response(500, json={"error": {"details": ["Database is unavailable"]}})

        balance = self.balances.get(payload["paymentId"], Decimal(0)) - self.price
        if balance <= CREDIT_LIMIT and not self.ignore_credit_limit:
            # The debt is collected before the next coffee is charged
            balance = -self.price
        self.balances[payload["paymentId"]] = balance
        self.requests["paid"] += 1

        order_number = self.next_order_number
        if not self.reuse_order_numbers:
            self.next_order_number += 1
        body = {
            "order": {"orderNumber": order_number, "flavor": flavor},
            "receipt": {"balance": float(balance)},
        }
        if not self.forget_orders:
            self.orders[order_number] = body
        return httpx.Response(200, json=body)

    def order_status(self, request: httpx.Request, order_id: str) -> httpx.Response:
        self.requests["status"] += 1
        if not self.database_enabled:
            return httpx.Response(500, json={"error": {"details": ["Database is unavailable"]}})
        order = self.orders.get(int(order_id))
        if order is None:
            return httpx.Response(404, json={"error": {"details": [f"Order {order_id} not found"]}})
        return httpx.Response(200, json=order)

    def toggle_proxy(self, request: httpx.Request) -> httpx.Response:
        enabled = json.loads(request.content)["enabled"]
        self.database_enabled = enabled
        self.proxy_toggles += 1
        return httpx.Response(200, json={"name": "postgres", "enabled": enabled})


class InMemoryFaultProxy(FaultProxy):
    """Fault proxy recording its state instead of calling Toxiproxy."""

    def __init__(self) -> None:
        super().__init__()
        self.enabled = True

    def _set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled


@pytest.fixture()
def coffee_shop():
    """The fake shop, reachable through httpx while the test runs."""
    shop = FakeCoffeeShop()
    with respx.mock(assert_all_called=False) as router:
        shop.install(router)
        yield shop


@pytest.fixture()
def shop_client(coffee_shop):
    """Client of the fake shop."""
    with CoffeeShopClient(SHOP_URL) as client:
        yield client


@pytest.fixture()
def toxiproxy(coffee_shop):
    """Toxiproxy client switching the database of the fake shop."""
    client = ToxiproxyClient(TOXIPROXY_URL, "postgres")
    yield client
    client.close()


@pytest.fixture()
def fault_proxy():
    """Fault proxy without any HTTP behind it."""
    return InMemoryFaultProxy()


def make_response(
    status_code: int, json_body=None, method: str = "POST", url: str = f"{SHOP_URL}/order"
) -> httpx.Response:
    """Build a response to a request against the fake shop."""
    request = httpx.Request(method, url)
    return httpx.Response(status_code, json=json_body, request=request)


@pytest.fixture()
def response_factory():
    """Factory of hand-made responses for checking post-conditions."""
    return make_response
