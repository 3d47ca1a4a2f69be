"""
Shared building blocks for payment API wire objects.
"""
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from paysdk.core.errors import MalformedPayloadError

APIObjectT = TypeVar("APIObjectT", bound="APIObject")
ItemT = TypeVar("ItemT")


class APIObject(BaseModel):
    """
    Base schema for objects returned by the payment API.

    JSON ``null`` decodes to the field's zero value and unknown fields are
    ignored, so a partially populated payload still yields a complete object.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def from_json(cls: type[APIObjectT], raw: Union[str, bytes]) -> APIObjectT:
        """
        Decode a raw JSON payload.

        Raises:
            MalformedPayloadError: If the payload is not valid JSON or does not
                match the schema.
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise MalformedPayloadError(cls.__name__, str(e)) from e

    @classmethod
    def from_data(cls: type[APIObjectT], data: Any) -> APIObjectT:
        """Decode an already-parsed JSON value."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise MalformedPayloadError(cls.__name__, str(e)) from e


class Address(APIObject):
    """Postal address."""

    city: str = ""
    country: str = ""
    line1: str = ""
    line2: str = ""
    postal_code: str = ""
    state: str = ""


class ListObject(APIObject, Generic[ItemT]):
    """A page of objects as returned by a list endpoint."""

    object: str = "list"
    url: str = ""
    has_more: bool = False
    total_count: Optional[int] = None
    data: list[ItemT] = []
