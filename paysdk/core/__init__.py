"""
Core package containing configuration, logging, errors, and form encoding.
"""
from paysdk.core.config import Settings, get_settings, settings
from paysdk.core.errors import (
    APIConnectionError,
    InvalidParamsError,
    MalformedPayloadError,
    PaymentAPIError,
    PaySDKError,
    RateLimitError,
)
from paysdk.core.form import encode_form
from paysdk.core.logging import configure_logging, get_logger

__all__ = [
    "settings",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "encode_form",
    "PaySDKError",
    "MalformedPayloadError",
    "InvalidParamsError",
    "PaymentAPIError",
    "RateLimitError",
    "APIConnectionError",
]
