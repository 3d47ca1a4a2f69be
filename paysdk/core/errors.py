"""
Exception hierarchy raised by paysdk.
"""
from typing import Any, Optional


class PaySDKError(Exception):
    """Base class for every error raised by this package."""


class MalformedPayloadError(PaySDKError):
    """Raw payload matches none of the shapes accepted at this decode stage."""

    def __init__(self, resource: str, detail: str) -> None:
        self.resource = resource
        self.detail = detail
        super().__init__(f"Malformed {resource} payload: {detail}")


class InvalidParamsError(PaySDKError):
    """Outbound parameters that cannot be form-encoded."""


class APIConnectionError(PaySDKError):
    """Transport failure talking to the payment API."""


class PaymentAPIError(PaySDKError):
    """Non-2xx response from the payment API."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.code = code
        self.param = param
        super().__init__(message)

    @classmethod
    def from_response_body(cls, status_code: int, body: Any) -> "PaymentAPIError":
        """Build an error from the service's ``{"error": {...}}`` envelope."""
        error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(error, dict):
            return cls(f"HTTP error: {status_code}", status_code)

        return cls(
            error.get("message") or f"HTTP error: {status_code}",
            status_code,
            error_type=error.get("type"),
            code=error.get("code"),
            param=error.get("param"),
        )


class RateLimitError(PaymentAPIError):
    """Too many requests, after all retries were used."""
