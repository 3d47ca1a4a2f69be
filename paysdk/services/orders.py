"""
Order API client.
Handles authentication, form encoding, retries, and response decoding.
"""
import asyncio
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from paysdk.core.config import settings
from paysdk.core.errors import (
    APIConnectionError,
    MalformedPayloadError,
    PaymentAPIError,
    PaySDKError,
    RateLimitError,
)
from paysdk.core.logging import get_logger
from paysdk.schemas.order import Order, OrderList, OrderReturn
from paysdk.schemas.params import (
    OrderListParams,
    OrderParams,
    OrderPayParams,
    OrderReturnParams,
    OrderUpdateParams,
    RequestParams,
)

logger = get_logger(__name__)


class OrderClient:
    """
    Async client for the order endpoints.

    Features:
    - Bearer-token authentication
    - Form-encoded request bodies, query strings for reads
    - Retry with exponential backoff on rate limiting
    - Responses decoded into order schemas
    """

    ORDERS_PATH = "/v1/orders"

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key or settings.api_key
        if not self.api_key:
            raise PaySDKError("No API key provided; pass api_key or set PAYSDK_API_KEY")

        self.api_base = (api_base or settings.api_base).rstrip("/")
        self.timeout = timeout or settings.timeout
        self.max_retries = max_retries or settings.max_retries
        self._http_client = http_client

    async def create(self, params: OrderParams) -> Order:
        """Create a new order."""
        data = await self._request("POST", self.ORDERS_PATH, params)
        return Order.from_data(data)

    async def retrieve(
        self,
        order_id: str,
        params: Optional[RequestParams] = None,
    ) -> Order:
        """Fetch a single order by ID."""
        data = await self._request("GET", self._order_path(order_id), params)
        return Order.from_data(data)

    async def update(self, order_id: str, params: OrderUpdateParams) -> Order:
        """Update an existing order."""
        data = await self._request("POST", self._order_path(order_id), params)
        return Order.from_data(data)

    async def pay(self, order_id: str, params: OrderPayParams) -> Order:
        """Pay an order with the given source or customer."""
        data = await self._request("POST", f"{self._order_path(order_id)}/pay", params)
        return Order.from_data(data)

    async def return_order(
        self,
        order_id: str,
        params: Optional[OrderReturnParams] = None,
    ) -> OrderReturn:
        """Return all, or the listed, items of an order."""
        data = await self._request("POST", f"{self._order_path(order_id)}/returns", params)
        return OrderReturn.from_data(data)

    async def list_orders(self, params: Optional[OrderListParams] = None) -> OrderList:
        """Fetch one page of orders."""
        data = await self._request("GET", self.ORDERS_PATH, params)
        return OrderList.from_data(data)

    def _order_path(self, order_id: str) -> str:
        if not order_id:
            raise PaySDKError("order_id must not be empty")
        return f"{self.ORDERS_PATH}/{order_id}"

    def _headers(self, params: Optional[RequestParams]) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }
        if settings.api_version:
            headers["Stripe-Version"] = settings.api_version
        if params is not None and params.idempotency_key:
            headers["Idempotency-Key"] = params.idempotency_key
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[RequestParams] = None,
    ) -> Any:
        """
        Execute a request against the payment API.

        Args:
            method: HTTP method
            path: Path below the API base
            params: Optional request parameters

        Returns:
            Parsed JSON response body

        Raises:
            PaymentAPIError: On non-2xx responses
            RateLimitError: When still rate limited after all retries
            APIConnectionError: When the transport keeps failing
        """
        headers = self._headers(params)
        form = params.to_form() if params is not None else []

        request_kwargs: dict[str, Any] = {"headers": headers}
        if method == "GET":
            request_kwargs["params"] = form
        else:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            request_kwargs["content"] = urlencode(form)

        if self._http_client is not None:
            return await self._send_with_retries(self._http_client, method, path, request_kwargs)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._send_with_retries(client, method, path, request_kwargs)

    async def _send_with_retries(
        self,
        client: httpx.AsyncClient,
        method: str,
        path: str,
        request_kwargs: dict[str, Any],
    ) -> Any:
        url = f"{self.api_base}{path}"

        for attempt in range(self.max_retries):
            try:
                response = await client.request(method, url, **request_kwargs)
            except httpx.RequestError as e:
                if attempt < self.max_retries - 1:
                    logger.warning(
                        "Payment API request failed, retrying",
                        method=method,
                        path=path,
                        attempt=attempt + 1,
                        error=str(e),
                    )
                    continue
                raise APIConnectionError(f"Request failed: {str(e)}") from e

            logger.info(
                "Payment API request",
                method=method,
                path=path,
                status=response.status_code,
            )

            if response.status_code == 429:
                if attempt < self.max_retries - 1:
                    # Rate limited - wait and retry
                    await asyncio.sleep(2 ** attempt)
                    continue
                raise RateLimitError.from_response_body(429, _json_or_none(response))

            if response.status_code >= 400:
                error = PaymentAPIError.from_response_body(
                    response.status_code,
                    _json_or_none(response),
                )
                logger.error(
                    "Payment API error",
                    method=method,
                    path=path,
                    status=response.status_code,
                    error_type=error.error_type,
                    code=error.code,
                )
                raise error

            try:
                return response.json()
            except ValueError as e:
                raise MalformedPayloadError("response", str(e)) from e

        raise APIConnectionError("Max retries exceeded")


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
