"""HTTP clients for the coffee shop and for the fault-injection proxy."""

import abc
from typing import Any, Optional

import httpx

from coffeeshop_model.backend import logger
from coffeeshop_model.backend.exceptions import FaultProxyError, ServiceError
from coffeeshop_model.backend.structures import OrderRequest


class CoffeeShopClient:
    """Client for the counter API of the coffee shop.

    Responses are returned as they are, whatever their status code: judging
    them is the job of the model's post-conditions.
    """

    def __init__(
        self,
        api_url: str,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the coffee shop client.

        Args:
            api_url: Base URL of the shop (e.g., http://localhost:8080)
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            headers: Extra headers sent with every request
            transport: Optional httpx transport, mostly useful in tests
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.Client(
            base_url=self.api_url,
            timeout=timeout,
            verify=verify_ssl,
            headers={"Accept": "application/json", **(headers or {})},
            transport=transport,
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:  # noqa: ANN401
        logger.debug("%s %s%s", method, self.api_url, path)
        try:
            response = self.client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.error("Coffee shop is unreachable: %s", e)
            raise ServiceError(f"{method} {path} failed: {e}") from e
        logger.debug("%s %s answered %s", method, path, response.status_code)
        return response

    def order(self, request: OrderRequest) -> httpx.Response:
        """Place an order at the counter."""
        return self._request("POST", "/order", json=request.to_payload())

    def order_status(self, order_number: int) -> httpx.Response:
        """Get the status of an order."""
        return self._request("GET", f"/order/{order_number}")

    def close(self) -> None:
        """Close the underlying connection pool."""
        self.client.close()

    def __enter__(self) -> "CoffeeShopClient":
        """Use the client as a context manager."""
        return self

    def __exit__(self, *args: object) -> None:
        """Close the client when leaving the context."""
        self.close()

    def __repr__(self) -> str:
        """Represent the client by its URL."""
        return f"CoffeeShopClient({self.api_url!r})"


class FaultProxy:
    """A proxy in front of a dependency which can cut the connection to it."""

    def __init__(self) -> None:
        """Initialize the toggle counter."""
        self.toggle_count = 0

    def enable(self) -> None:
        """Let traffic through to the dependency."""
        self._set_enabled(True)
        self.toggle_count += 1

    def disable(self) -> None:
        """Cut the dependency off."""
        self._set_enabled(False)
        self.toggle_count += 1

    @abc.abstractmethod
    def _set_enabled(self, enabled: bool) -> None:
        """Switch the proxy on or off."""


class ToxiproxyClient(FaultProxy):
    """Client for a single proxy of a Toxiproxy server."""

    def __init__(
        self,
        api_url: str,
        proxy_name: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize Toxiproxy client.

        Args:
            api_url: Base URL of the Toxiproxy API (e.g., http://localhost:8474)
            proxy_name: Name of the proxy in front of the database
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mostly useful in tests
        """
        super().__init__()
        self.api_url = api_url.rstrip("/")
        self.proxy_name = proxy_name
        self.client = httpx.Client(base_url=self.api_url, timeout=timeout, transport=transport)

    def _set_enabled(self, enabled: bool) -> None:
        path = f"/proxies/{self.proxy_name}"
        logger.info("Setting proxy %s enabled=%s", self.proxy_name, enabled)
        try:
            response = self.client.post(path, json={"enabled": enabled})
        except httpx.TransportError as e:
            raise FaultProxyError(f"Toxiproxy at {self.api_url} is unreachable: {e}") from e

        if response.status_code >= 400:
            error_msg = f"Toxiproxy error {response.status_code}: {response.text[:500]}"
            raise FaultProxyError(error_msg)

    def close(self) -> None:
        """Close the underlying connection pool."""
        self.client.close()

    def __repr__(self) -> str:
        """Represent the client by proxy name."""
        return f"ToxiproxyClient({self.api_url!r}, {self.proxy_name!r})"
