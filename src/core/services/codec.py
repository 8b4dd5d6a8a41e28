"""Decode DynamoDB attribute-value items into plain, JSON-ready Python values."""

import base64
from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import Binary, TypeDeserializer

_deserializer = TypeDeserializer()


def unmarshall(item: dict[str, Any]) -> dict[str, Any]:
    """Convert one item from the low-level client into a plain mapping.

    Numbers become int when integral and float otherwise, sets become sorted
    lists and binary values become base64 strings.
    """
    return {name: to_plain(_deserializer.deserialize(value)) for name, value in item.items()}


def to_plain(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, Binary):
        return base64.b64encode(value.value).decode("ascii")
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_plain(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted(to_plain(v) for v in value)
    return value
