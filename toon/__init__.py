"""
TOON encoder: turns parsed JSON values into TOON text.
"""
from toon.composer import DEFAULT_MAX_DEPTH, LineWriter, convert, encode
from toon.errors import MaxDepthExceededError, ToonError, UnsupportedValueError
from toon.primitives import format_cell, format_number, format_primitive, format_string
from toon.tabular import TableShape, detect_table, is_uniform_table
from toon.values import SCALAR_KINDS, ValueKind, classify, is_scalar

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "LineWriter",
    "MaxDepthExceededError",
    "SCALAR_KINDS",
    "TableShape",
    "ToonError",
    "UnsupportedValueError",
    "ValueKind",
    "classify",
    "convert",
    "detect_table",
    "encode",
    "format_cell",
    "format_number",
    "format_primitive",
    "format_string",
    "is_scalar",
    "is_uniform_table",
]
