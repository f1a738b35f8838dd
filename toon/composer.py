"""
Composition of TOON text from a value tree.

Objects become ``key: value`` lines indented two spaces per level, uniform
object arrays become ``key[N]{columns}:`` tables with one row per element,
and arrays of primitives are written inline as ``key[N]: a,b,c``.
"""
from typing import Any, Dict, List, Optional, Sequence

from toon.errors import MaxDepthExceededError
from toon.primitives import format_cell, format_primitive
from toon.tabular import detect_table
from toon.values import SCALAR_KINDS, ValueKind, classify

INDENT = "  "  # two spaces per level
LIST_ITEM_PREFIX = "- "
DEFAULT_MAX_DEPTH = 100


class LineWriter:
    """Collects indented output lines and joins them once at the end."""

    def __init__(self, indent: str = INDENT):
        self.indent = indent
        self.lines: List[str] = []

    def push(self, depth: int, content: str):
        self.lines.append(f"{self.indent * depth}{content}")

    def mark_list_item(self, index: int, depth: int):
        """Turn the line at ``index``, written at ``depth + 1``, into a list item at ``depth``."""
        content = self.lines[index][len(self.indent) * (depth + 1):]
        self.lines[index] = f"{self.indent * depth}{LIST_ITEM_PREFIX}{content}"

    def to_string(self) -> str:
        return "\n".join(self.lines)


def convert(value: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """
    Convert a parsed JSON value into TOON text.

    Args:
        value: Value tree as produced by ``json.loads``
        max_depth: Deepest nesting level accepted before giving up

    Returns:
        TOON text without leading or trailing whitespace

    Raises:
        UnsupportedValueError: If the tree holds a non-JSON value
        MaxDepthExceededError: If the tree nests deeper than max_depth
    """
    return encode(value, 0, max_depth).strip()


def encode(value: Any, indent_level: int = 0, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Encode a value at the given indentation level."""
    kind = classify(value)
    if kind in SCALAR_KINDS:
        return format_primitive(value)

    if kind is ValueKind.ARRAY:
        inline = _inline_array(value, indent_level, max_depth)
        if inline is not None:
            return inline

    writer = LineWriter()
    if kind is ValueKind.ARRAY:
        # A bare table or mixed array has no key to attach its header to
        _encode_array("", value, indent_level, writer, max_depth)
    else:
        _encode_object(value, indent_level, writer, max_depth)
    return writer.to_string()


def _check_depth(level: int, max_depth: int):
    if level > max_depth:
        raise MaxDepthExceededError(max_depth)


def _inline_array(array: Sequence[Any], level: int, max_depth: int) -> Optional[str]:
    """Comma-joined items of an empty or all-primitive array, else None."""
    if not array:
        return "[]"
    if all(classify(item) in SCALAR_KINDS for item in array):
        return ",".join(format_cell(item, max_depth, level) for item in array)
    return None


def _encode_object(obj: Dict[str, Any], level: int, writer: LineWriter, max_depth: int):
    _check_depth(level, max_depth)
    for key, value in obj.items():
        _encode_key_value(str(key), value, level, writer, max_depth)


def _encode_key_value(key: str, value: Any, level: int, writer: LineWriter, max_depth: int):
    kind = classify(value)
    if kind is ValueKind.ARRAY:
        _encode_array(key, value, level, writer, max_depth)
    elif kind is ValueKind.OBJECT:
        writer.push(level, f"{key}:")
        _encode_object(value, level + 1, writer, max_depth)
    else:
        writer.push(level, f"{key}: {format_primitive(value)}")


def _encode_array(key: str, array: Sequence[Any], level: int, writer: LineWriter, max_depth: int):
    shape = detect_table(array)
    if shape is not None:
        writer.push(level, shape.header(key))
        for row in array:
            cells = [format_cell(row[column], max_depth, level + 1) for column in shape.columns]
            writer.push(level + 1, ",".join(cells))
        return

    inline = _inline_array(array, level, max_depth)
    if inline is not None:
        writer.push(level, f"{key}[{len(array)}]: {inline}")
        return

    # Non-uniform array holding nested arrays or objects
    writer.push(level, f"{key}[{len(array)}]:")
    _check_depth(level + 1, max_depth)
    for item in array:
        _encode_list_item(item, level + 1, writer, max_depth)


def _encode_list_item(item: Any, level: int, writer: LineWriter, max_depth: int):
    kind = classify(item)
    if kind is ValueKind.ARRAY:
        _encode_array(LIST_ITEM_PREFIX, item, level, writer, max_depth)
    elif kind is ValueKind.OBJECT:
        if not item:
            writer.push(level, LIST_ITEM_PREFIX.rstrip())
            return
        # First field shares the hyphen line, the rest sit one level deeper
        start = len(writer.lines)
        _encode_object(item, level + 1, writer, max_depth)
        writer.mark_list_item(start, level)
    else:
        writer.push(level, f"{LIST_ITEM_PREFIX}{format_primitive(item)}")
