"""
Text rendering of primitive values.

Strings are written bare unless they could be confused with the comma
column delimiter or the colon key separator, in which case they are
written as JSON string literals.
"""
import json
import math
import re
from decimal import Decimal
from typing import Any, Union

from toon.errors import MaxDepthExceededError
from toon.values import ValueKind, classify

NEEDS_QUOTING = re.compile(r"[,:\n\r\t]")
# Whitespace as matched by \s in JavaScript
OUTER_WHITESPACE = re.compile(
    r"^[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
    r"|[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]\Z"
)
# Lone surrogates cannot be encoded as UTF-8; they are written as \uXXXX escapes
SURROGATE = re.compile(r"[\ud800-\udfff]")

# Decimal exponents outside [-6, 21) switch to exponent notation
MIN_PLAIN_EXPONENT = -6
MAX_PLAIN_EXPONENT = 21


def format_primitive(value: Any) -> str:
    """
    Render a scalar value as TOON text.

    Args:
        value: None, bool, number or string

    Returns:
        Formatted text

    Raises:
        TypeError: If the value is an array or object
    """
    kind = classify(value)
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return format_number(value)
    if kind is ValueKind.STRING:
        return format_string(value)
    raise TypeError(f"Expected a primitive value, got {kind.value}")


def format_string(text: str) -> str:
    """Return text as is, or quoted and escaped when it needs quoting."""
    if NEEDS_QUOTING.search(text) or OUTER_WHITESPACE.search(text) or SURROGATE.search(text):
        return quote_string(text)
    return text


def quote_string(text: str) -> str:
    """JSON string literal keeping non-ASCII text, with lone surrogates escaped."""
    return SURROGATE.sub(
        lambda match: f"\\u{ord(match.group()):04x}",
        json.dumps(text, ensure_ascii=False)
    )


def format_number(value: Union[int, float, Decimal]) -> str:
    """
    Render a number in its shortest round-trippable decimal form.

    Integers never carry a fractional part. Floats use the digits of
    ``repr`` laid out the way JavaScript prints numbers, so ``1.0``
    becomes ``1`` and ``1e21`` becomes ``1e+21``.
    """
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        value = Decimal(repr(value))
    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return "-Infinity" if value.is_signed() else "Infinity"
    if value.is_zero():
        return "0"
    return _layout_decimal(value)


def _layout_decimal(value: Decimal) -> str:
    sign, digit_tuple, exponent = value.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    count = len(digits)
    # position of the decimal point relative to the first digit
    point = count + exponent
    if count <= point <= MAX_PLAIN_EXPONENT:
        text = digits + "0" * (point - count)
    elif 0 < point <= MAX_PLAIN_EXPONENT:
        text = f"{digits[:point]}.{digits[point:]}"
    elif MIN_PLAIN_EXPONENT < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        shown = point - 1
        mantissa = digits if count == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if shown >= 0 else '-'}{abs(shown)}"
    return f"-{text}" if sign else text


def format_cell(value: Any, max_depth: int, depth: int = 0) -> str:
    """
    Render one table cell or inline array item.

    Scalars are formatted with ``format_primitive``. A nested array or
    object is written as compact JSON and then quoted like any other
    string, so it never leaks a bare delimiter into the row.
    """
    kind = classify(value)
    if kind is ValueKind.ARRAY or kind is ValueKind.OBJECT:
        return format_string(to_compact_json(value, max_depth, depth))
    return format_primitive(value)


def to_compact_json(value: Any, max_depth: int, depth: int = 0) -> str:
    """Serialize a value as JSON without whitespace, numbers as in TOON."""
    if depth > max_depth:
        raise MaxDepthExceededError(max_depth)
    kind = classify(value)
    if kind is ValueKind.ARRAY:
        items = [to_compact_json(item, max_depth, depth + 1) for item in value]
        return "[" + ",".join(items) + "]"
    if kind is ValueKind.OBJECT:
        members = [
            f"{quote_string(str(key))}:"
            f"{to_compact_json(item, max_depth, depth + 1)}"
            for key, item in value.items()
        ]
        return "{" + ",".join(members) + "}"
    if kind is ValueKind.STRING:
        return quote_string(value)
    return format_primitive(value)
