"""
Pydantic schemas package.
"""
from paysdk.schemas.common import Address, APIObject, ListObject
from paysdk.schemas.expandable import ExpandableResource
from paysdk.schemas.order import (
    DeliveryEstimate,
    Order,
    OrderDeliveryEstimateType,
    OrderItem,
    OrderItemParent,
    OrderItemParentType,
    OrderItemType,
    OrderList,
    OrderReturn,
    OrderReturnList,
    OrderStatus,
    Shipping,
    ShippingMethod,
    StatusTransitions,
    decode_order,
    decode_order_item,
)
from paysdk.schemas.params import (
    AddressParams,
    OrderItemParams,
    OrderListParams,
    OrderParams,
    OrderPayParams,
    OrderReturnParams,
    OrderUpdateParams,
    OrderUpdateShippingParams,
    RangeQueryParams,
    RequestParams,
    ShippingParams,
)
from paysdk.schemas.resources import SKU, Charge, Customer

__all__ = [
    # Shared
    "APIObject",
    "Address",
    "ListObject",
    "ExpandableResource",
    # Siblings
    "Charge",
    "Customer",
    "SKU",
    # Order
    "Order",
    "OrderList",
    "OrderStatus",
    "OrderItem",
    "OrderItemType",
    "OrderItemParent",
    "OrderItemParentType",
    "OrderReturn",
    "OrderReturnList",
    "Shipping",
    "ShippingMethod",
    "DeliveryEstimate",
    "OrderDeliveryEstimateType",
    "StatusTransitions",
    "decode_order",
    "decode_order_item",
    # Params
    "RequestParams",
    "AddressParams",
    "ShippingParams",
    "OrderParams",
    "OrderItemParams",
    "OrderUpdateParams",
    "OrderUpdateShippingParams",
    "OrderPayParams",
    "OrderReturnParams",
    "OrderListParams",
    "RangeQueryParams",
]
