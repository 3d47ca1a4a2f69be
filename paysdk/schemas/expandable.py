"""
Expandable references.

The payment API returns a related resource either as its bare identifier
(``"cus_123"``) or, when the caller asked for expansion, as the full nested
object. Both shapes decode into the same resource class; ``is_expanded``
tells them apart, and dumping writes each back in the shape it arrived in.
"""
from typing import Any

from pydantic import (
    ModelWrapValidatorHandler,
    PrivateAttr,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from paysdk.schemas.common import APIObject


class ExpandableResource(APIObject):
    """
    A resource that may arrive unexpanded (ID only) or expanded (full object).

    Decoding tries the bare-ID shape first and falls back to the full object
    schema. An unexpanded resource carries its ``id`` and leaves every other
    field at its zero value.
    """

    id: str = ""

    _expanded: bool = PrivateAttr(default=True)

    @model_validator(mode="wrap")
    @classmethod
    def accept_bare_id(
        cls,
        data: Any,
        handler: ModelWrapValidatorHandler["ExpandableResource"],
    ) -> "ExpandableResource":
        if isinstance(data, str):
            if not data:
                raise ValueError(f"{cls.__name__} reference must be a non-empty ID")
            resource = handler({"id": data})
            resource._expanded = False
            return resource
        return handler(data)

    @model_serializer(mode="wrap")
    def dump_bare_id(self, handler: SerializerFunctionWrapHandler) -> Any:
        if not self._expanded:
            return self.id
        return handler(self)

    @property
    def is_expanded(self) -> bool:
        """Whether the full object was present in the payload."""
        return self._expanded
