"""
Detection of arrays that can be rendered as tables.

An array is a table when it is non-empty and every element is an object
with exactly the key set of the first element. Columns keep the key order
of the first element.
"""
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from toon.values import ValueKind, classify


@dataclass(frozen=True)
class TableShape:
    """Columns and row count of a uniform object array."""

    columns: Tuple[str, ...]
    row_count: int

    def header(self, key: str = "") -> str:
        """Build the ``key[N]{col1,col2}:`` header line."""
        return f"{key}[{self.row_count}]{{{','.join(map(str, self.columns))}}}:"


def detect_table(array: Sequence[Any]) -> Optional[TableShape]:
    """
    Work out whether an array is a uniform object table.

    Args:
        array: Elements of the array

    Returns:
        The table shape, or None if the array must be rendered as a plain array
    """
    if not array:
        return None

    first = array[0]
    if classify(first) is not ValueKind.OBJECT:
        return None
    columns = tuple(first)
    if not columns:
        return None

    for item in array[1:]:
        if classify(item) is not ValueKind.OBJECT:
            return None
        if len(item) != len(first) or any(key not in item for key in first):
            return None

    return TableShape(columns=columns, row_count=len(array))


def is_uniform_table(array: Sequence[Any]) -> bool:
    """Check if an array qualifies for table rendering."""
    return detect_table(array) is not None
