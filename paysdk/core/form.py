"""
Form encoding for outbound request parameters.

Nested mappings are flattened with bracket notation (``shipping[address][city]``)
and sequences are indexed (``items[0][type]``).
"""
from enum import Enum
from typing import Any, Mapping

from paysdk.core.errors import InvalidParamsError


def encode_form(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten a parameter mapping into ordered ``(key, value)`` pairs."""
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        _encode_value(pairs, key, value)
    return pairs


def _encode_value(pairs: list[tuple[str, str]], key: str, value: Any) -> None:
    if value is None:
        return

    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _encode_value(pairs, f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _encode_value(pairs, f"{key}[{index}]", item)
    else:
        pairs.append((key, _scalar(key, value)))


def _scalar(key: str, value: Any) -> str:
    # bool first: it is also an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (str, int, float)):
        return str(value)
    raise InvalidParamsError(f"Cannot form-encode {key}: unsupported type {type(value).__name__}")
