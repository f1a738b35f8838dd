"""
Exceptions raised by the TOON encoder.
"""


class ToonError(Exception):
    """Base class for encoder errors."""


class UnsupportedValueError(ToonError, TypeError):
    """Raised when a value is not part of the JSON data model."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Cannot encode value of type {type(value).__name__} as TOON"
        )


class MaxDepthExceededError(ToonError):
    """Raised when the input nests deeper than the configured limit."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Value nesting exceeds maximum depth of {max_depth}")
