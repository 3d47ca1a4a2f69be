"""
Outbound parameter schemas for order operations.

Every model renders to form pairs with ``to_form()``; unset (``None``) fields
are left out of the request entirely.
"""
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field

from paysdk.core.errors import InvalidParamsError
from paysdk.core.form import encode_form
from paysdk.schemas.order import OrderItemType, OrderStatus


class RequestParams(BaseModel):
    """Parameters shared by every request."""

    expand: Optional[list[str]] = None
    metadata: Optional[dict[str, str]] = None
    # Sent as the Idempotency-Key header, never in the body
    idempotency_key: Optional[str] = Field(None, exclude=True)

    def add_expand(self, field: str) -> None:
        """Ask the API to expand ``field`` in the response."""
        if self.expand is None:
            self.expand = []
        self.expand.append(field)

    def add_metadata(self, key: str, value: str) -> None:
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value

    def to_form(self) -> list[tuple[str, str]]:
        """Flatten into ordered form pairs using bracket notation."""
        return encode_form(self.model_dump(exclude_none=True))


class AddressParams(BaseModel):
    """Postal address sent with shipping details."""

    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class ShippingParams(BaseModel):
    """Shipping hash on order creation."""

    address: Optional[AddressParams] = None
    name: Optional[str] = None
    phone: Optional[str] = None


class OrderItemParams(BaseModel):
    """An order line on creation or return."""

    amount: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    parent: Optional[str] = None
    quantity: Optional[int] = None
    type: Optional[OrderItemType] = None


class OrderParams(RequestParams):
    """Parameters for creating an order."""

    coupon: Optional[str] = None
    currency: Optional[str] = None
    customer: Optional[str] = None
    email: Optional[str] = None
    items: Optional[list[OrderItemParams]] = None
    shipping: Optional[ShippingParams] = None


class OrderUpdateShippingParams(BaseModel):
    """Shipping hash on order update."""

    carrier: Optional[str] = None
    tracking_number: Optional[str] = None


class OrderUpdateParams(RequestParams):
    """Parameters for updating an order."""

    coupon: Optional[str] = None
    selected_shipping_method: Optional[str] = None
    shipping: Optional[OrderUpdateShippingParams] = None
    status: Optional[OrderStatus] = None


class OrderPayParams(RequestParams):
    """
    Parameters for paying an order.

    ``source`` is either a token or source ID, or a mapping of card details
    that is sent as ``source[...]``.
    """

    application_fee: Optional[int] = None
    customer: Optional[str] = None
    email: Optional[str] = None
    source: Optional[Union[str, dict[str, Any]]] = None

    def set_source(self, source: Any) -> None:
        """
        Attach a payment source.

        Raises:
            InvalidParamsError: If the source is neither a string nor a mapping.
        """
        if isinstance(source, str):
            self.source = source
        elif isinstance(source, Mapping):
            self.source = dict(source)
        else:
            raise InvalidParamsError(f"Unsupported source type: {type(source).__name__}")


class OrderReturnParams(RequestParams):
    """Parameters for returning items of an order."""

    items: Optional[list[OrderItemParams]] = None


class RangeQueryParams(BaseModel):
    """Bounds for filtering on a timestamp."""

    gt: Optional[int] = None
    gte: Optional[int] = None
    lt: Optional[int] = None
    lte: Optional[int] = None


class OrderListParams(RequestParams):
    """Filters and pagination for listing orders."""

    created: Optional[Union[int, RangeQueryParams]] = None
    customer: Optional[str] = None
    ids: Optional[list[str]] = None
    status: Optional[OrderStatus] = None
    limit: Optional[int] = Field(None, ge=1, le=100)
    starting_after: Optional[str] = None
    ending_before: Optional[str] = None
