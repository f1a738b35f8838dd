"""
Classification of values in the JSON data model.

The encoder works on the native Python values produced by the ``json``
module. Every value belongs to exactly one ``ValueKind``; anything else is
rejected with ``UnsupportedValueError``.
"""
from decimal import Decimal
from enum import Enum
from typing import Any

from toon.errors import UnsupportedValueError


class ValueKind(Enum):
    """The six variants of a JSON value."""

    NULL = "null"
    BOOL = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


SCALAR_KINDS = frozenset(
    {ValueKind.NULL, ValueKind.BOOL, ValueKind.NUMBER, ValueKind.STRING}
)


def classify(value: Any) -> ValueKind:
    """
    Report the variant of a value.

    Args:
        value: Value to inspect

    Returns:
        The matching ValueKind

    Raises:
        UnsupportedValueError: If the value is outside the JSON data model
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, so it must be tested first
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise UnsupportedValueError(value)


def is_scalar(value: Any) -> bool:
    """Check if a value is a primitive (null, boolean, number or string)."""
    return classify(value) in SCALAR_KINDS
