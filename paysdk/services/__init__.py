"""
Services package for API operations.
"""
from paysdk.services.orders import OrderClient

__all__ = [
    "OrderClient",
]
