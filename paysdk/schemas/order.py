"""
Order Pydantic schemas mirroring the payment API's order resource.
"""
from enum import Enum
from typing import Any, Optional, Union

from pydantic import (
    Field,
    SerializationInfo,
    ValidationError,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from paysdk.core.logging import get_logger
from paysdk.schemas.common import Address, APIObject, ListObject
from paysdk.schemas.expandable import ExpandableResource
from paysdk.schemas.resources import SKU, Charge, Customer

logger = get_logger(__name__)


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""

    CREATED = "created"
    PAID = "paid"
    CANCELED = "canceled"
    FULFILLED = "fulfilled"
    RETURNED = "returned"


class OrderItemType(str, Enum):
    """Kind of order line; decides the shape of its parent."""

    SKU = "sku"
    DISCOUNT = "discount"
    SHIPPING = "shipping"
    TAX = "tax"
    COUPON = "coupon"


class OrderItemParentType(str, Enum):
    """Kind of resource an order line points at."""

    COUPON = "coupon"
    SHIPPING = "shipping"
    SKU = "sku"


class OrderDeliveryEstimateType(str, Enum):
    """Whether a delivery estimate is a single date or a range."""

    EXACT = "exact"
    RANGE = "range"


class OrderItemParent(APIObject):
    """
    Resource an order line refers to.

    Coupon and shipping lines carry a bare ID; SKU lines carry the SKU, which
    may itself be expanded. ``type`` is only set when the parent matched the
    shape its line type implies.
    """

    id: str = ""
    sku: Optional[SKU] = None
    type: Optional[OrderItemParentType] = None


class OrderItem(APIObject):
    """One line of an order."""

    # Declared before ``parent``: the parent validator reads it
    type: Optional[OrderItemType] = None
    amount: int = 0
    currency: str = ""
    description: str = ""
    quantity: int = 0
    parent: OrderItemParent = Field(default_factory=OrderItemParent)

    @field_validator("parent", mode="before")
    @classmethod
    def resolve_parent(cls, value: Any, info: ValidationInfo) -> OrderItemParent:
        if isinstance(value, OrderItemParent):
            return value
        return _decode_parent(info.data.get("type"), value)

    @field_serializer("parent")
    def dump_parent(self, parent: OrderItemParent, info: SerializationInfo) -> Any:
        """Write the parent back in its wire shape so dumps re-validate."""
        if parent.type == OrderItemParentType.SKU and parent.sku is not None:
            return parent.sku.model_dump(mode=info.mode)
        if parent.type is not None:
            return parent.id
        return None


def _decode_parent(item_type: Optional[OrderItemType], raw: Any) -> OrderItemParent:
    """Decode a raw ``parent`` fragment according to its line's type."""
    if item_type in (OrderItemType.COUPON, OrderItemType.SHIPPING):
        if isinstance(raw, str):
            return OrderItemParent(id=raw, type=OrderItemParentType(item_type.value))

    elif item_type == OrderItemType.SKU:
        try:
            sku = SKU.model_validate(raw)
        except ValidationError:
            pass
        else:
            return OrderItemParent(id=sku.id, sku=sku, type=OrderItemParentType.SKU)

    else:
        return OrderItemParent()

    logger.debug(
        "order_item.parent_shape_mismatch",
        item_type=item_type.value,
        parent_shape=type(raw).__name__,
    )
    return OrderItemParent()


class StatusTransitions(APIObject):
    """Epoch timestamps at which the order entered each status; 0 if never."""

    canceled: int = 0
    # Wire name is misspelled by the service
    fulfilled: int = Field(0, alias="fulfiled")
    paid: int = 0
    returned: int = 0


class Shipping(APIObject):
    """Shipping details of an order."""

    address: Optional[Address] = None
    carrier: str = ""
    name: str = ""
    phone: str = ""
    tracking_number: str = ""


class DeliveryEstimate(APIObject):
    """Estimated delivery: an exact ``date`` or an ``earliest``/``latest`` range."""

    type: Optional[OrderDeliveryEstimateType] = None
    date: str = ""
    earliest: str = ""
    latest: str = ""

    @property
    def is_exact(self) -> bool:
        return self.type == OrderDeliveryEstimateType.EXACT

    @property
    def is_range(self) -> bool:
        return self.type == OrderDeliveryEstimateType.RANGE


class ShippingMethod(APIObject):
    """Shipping option available for an order."""

    id: str = ""
    amount: int = 0
    currency: str = ""
    delivery_estimate: Optional[DeliveryEstimate] = None
    description: str = ""


class OrderReturn(ExpandableResource):
    """Items returned from an order."""

    amount: int = 0
    created: int = 0
    currency: str = ""
    items: list[OrderItem] = Field(default_factory=list)
    livemode: bool = False
    order: str = ""
    refund: str = ""


class OrderReturnList(ListObject[OrderReturn]):
    """Returns made against an order."""


class Order(ExpandableResource):
    """Purchase transaction record."""

    amount: int = 0
    amount_returned: int = 0
    application: str = ""
    application_fee: int = 0
    charge: Optional[Charge] = None
    created: int = 0
    currency: str = ""
    customer: Optional[Customer] = None
    email: str = ""
    items: list[OrderItem] = Field(default_factory=list)
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    returns: Optional[OrderReturnList] = None
    selected_shipping_method: Optional[str] = None
    shipping: Optional[Shipping] = None
    shipping_methods: list[ShippingMethod] = Field(default_factory=list)
    status: Optional[OrderStatus] = None
    status_transitions: StatusTransitions = Field(default_factory=StatusTransitions)
    updated: int = 0


class OrderList(ListObject[Order]):
    """A page of orders as retrieved from the list endpoint."""


def decode_order(raw: Union[str, bytes]) -> Order:
    """Decode an order payload: a bare order ID or a full order object."""
    return Order.from_json(raw)


def decode_order_item(raw: Union[str, bytes]) -> OrderItem:
    """Decode one order line, resolving its parent reference."""
    return OrderItem.from_json(raw)
