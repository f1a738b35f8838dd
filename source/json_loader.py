"""
Loading JSON documents from text, files, standard input and URLs.
"""
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, TextIO, Union

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"
URL_PREFIXES = ("http://", "https://")


class JsonParseError(ValueError):
    """Raised when input text is not valid JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None,
                 colno: Optional[int] = None, source: Optional[str] = None):
        self.message = message
        self.lineno = lineno
        self.colno = colno
        self.source = source
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"Invalid JSON: {self.message}"
        if self.lineno is not None:
            text += f" (line {self.lineno}, column {self.colno})"
        if self.source:
            text = f"{self.source}: {text}"
        return text


def _reject_constant(name: str):
    raise JsonParseError(f"Unsupported constant {name}")


def parse_json(text: str, source: Optional[str] = None) -> Any:
    """
    Parse JSON text into a value tree.

    Object key order is kept as it appears in the text.

    Args:
        text: JSON document
        source: Optional name of the document, used in error messages

    Returns:
        Parsed value tree

    Raises:
        JsonParseError: If the text is not valid JSON
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise JsonParseError(e.msg, e.lineno, e.colno, source) from e
    except JsonParseError as e:
        e.source = source
        raise
    except RecursionError as e:
        raise JsonParseError("Document nests too deeply", source=source) from e


def load_json_file(path: Union[str, Path]) -> Any:
    """Read and parse a JSON file."""
    path = Path(path)
    logger.debug(f"Reading {path}")
    try:
        # utf-8-sig tolerates a leading byte order mark
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise JsonParseError(f"Not valid UTF-8: {e.reason}", source=str(path)) from e
    return parse_json(text, source=str(path))


def load_json_stream(stream: TextIO, source: str = "<stdin>") -> Any:
    """Read and parse a JSON document from an open text stream."""
    try:
        text = stream.read()
    except UnicodeDecodeError as e:
        raise JsonParseError(f"Not valid UTF-8: {e.reason}", source=source) from e
    return parse_json(text, source=source)


def is_url(source: str) -> bool:
    return source.lower().startswith(URL_PREFIXES)


def load_json(source: str, client=None) -> Any:
    """
    Load a JSON document from a path, ``-`` for standard input, or a URL.

    Args:
        source: Where to read the document from
        client: Optional JsonClient used for URLs

    Returns:
        Parsed value tree
    """
    if source == STDIN_SOURCE:
        return load_json_stream(sys.stdin)
    if is_url(source):
        if client is None:
            from source.json_client import JsonClient
            client = JsonClient()
        return client.fetch_json(source)
    return load_json_file(source)
