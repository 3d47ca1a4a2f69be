"""
Sibling resources referenced from an order.

Only the fields an order payload carries when these are expanded are modelled.
"""
from typing import Optional

from pydantic import Field

from paysdk.schemas.expandable import ExpandableResource


class Customer(ExpandableResource):
    """Customer the order belongs to."""

    created: int = 0
    currency: str = ""
    description: str = ""
    email: str = ""
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    name: str = ""


class Charge(ExpandableResource):
    """Charge created when an order is paid."""

    amount: int = 0
    amount_refunded: int = 0
    captured: bool = False
    created: int = 0
    currency: str = ""
    customer: Optional[Customer] = None
    description: str = ""
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    paid: bool = False
    refunded: bool = False
    status: str = ""


class SKU(ExpandableResource):
    """Stock keeping unit sold as an order line."""

    active: bool = False
    attributes: dict[str, str] = Field(default_factory=dict)
    created: int = 0
    currency: str = ""
    image: str = ""
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    price: int = 0
    product: str = ""
    updated: int = 0
