"""
Client package for the payment platform's order resource.
"""
from paysdk.core.errors import (
    APIConnectionError,
    InvalidParamsError,
    MalformedPayloadError,
    PaymentAPIError,
    PaySDKError,
    RateLimitError,
)
from paysdk.services.orders import OrderClient

__version__ = "0.1.0"

__all__ = [
    "OrderClient",
    "PaySDKError",
    "MalformedPayloadError",
    "InvalidParamsError",
    "PaymentAPIError",
    "RateLimitError",
    "APIConnectionError",
]
