"""
Orchestrates loading JSON documents, encoding them as TOON and saving the result.
"""
import logging
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union
from urllib.parse import urlparse

from tqdm import tqdm

import config
from source.json_client import FetchError
from source.json_loader import STDIN_SOURCE, JsonParseError, is_url, load_json, parse_json
from toon import ToonError, convert

logger = logging.getLogger(__name__)

DEFAULT_STEM = "data"


class ToonConverter:
    """Converts JSON documents into TOON text and files."""

    def __init__(
        self,
        output_dir: Union[str, Path] = config.DATA_DIR,
        max_depth: int = config.MAX_DEPTH,
        client=None
    ):
        """
        Initialize converter.

        Args:
            output_dir: Directory that receives converted files
            max_depth: Deepest nesting the encoder accepts
            client: Optional JsonClient used for URL sources
        """
        self.output_dir = Path(output_dir)
        self.max_depth = max_depth
        self.client = client

    def convert_value(self, value: Any) -> str:
        """Encode an already parsed value tree."""
        return convert(value, max_depth=self.max_depth)

    def convert_text(self, text: str, source: Optional[str] = None) -> str:
        """
        Convert JSON text to TOON text.

        Args:
            text: JSON document
            source: Optional name of the document, used in error messages

        Returns:
            TOON text

        Raises:
            JsonParseError: If the text is not valid JSON
            ToonError: If the document cannot be encoded
        """
        return self.convert_value(parse_json(text, source=source))

    def convert_source(self, source: str) -> str:
        """Convert a file path, ``-`` for stdin, or a URL to TOON text."""
        value = load_json(source, client=self.client)
        return self.convert_value(value)

    def output_path_for(self, source: str) -> Path:
        """Pick the ``.toon`` file name a source is saved under."""
        if source == STDIN_SOURCE:
            stem = DEFAULT_STEM
        elif is_url(source):
            stem = PurePosixPath(urlparse(source).path).stem or DEFAULT_STEM
        else:
            stem = Path(source).stem or DEFAULT_STEM
        return self.output_dir / f"{stem}{config.OUTPUT_EXTENSION}"

    def save_to_toon(self, toon_text: str, output_file: Union[str, Path]) -> Path:
        """
        Save TOON text to a file.

        Args:
            toon_text: Encoded document
            output_file: Path to output file

        Returns:
            The path written
        """
        output_file = Path(output_file)
        try:
            # Encode first so an unencodable document never truncates the target
            data = toon_text.encode("utf-8")
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_bytes(data)
        except (OSError, UnicodeEncodeError) as e:
            logger.error(f"Failed to save to {output_file}: {e}")
            raise
        logger.info(f"Saved TOON output to {output_file}")
        return output_file

    def expand_sources(self, sources: Iterable[str]) -> Iterator[str]:
        """Yield sources, replacing each directory by the JSON files inside it."""
        for source in sources:
            if source != STDIN_SOURCE and not is_url(source) and Path(source).is_dir():
                found = sorted(Path(source).glob("*.json"))
                if not found:
                    logger.warning(f"No JSON files found in {source}")
                for path in found:
                    yield str(path)
            else:
                yield source

    def convert_many(self, sources: Iterable[str], show_progress: bool = True) -> Dict:
        """
        Convert several sources, saving each one into the output directory.

        A failing source is logged and skipped; the others still get converted.

        Args:
            sources: File paths, directories, URLs or ``-``
            show_progress: Show a progress bar

        Returns:
            Summary with the written paths and the failed sources
        """
        expanded: List[str] = list(self.expand_sources(sources))
        converted: List[Path] = []
        failed: Dict[str, str] = {}

        with tqdm(total=len(expanded), desc="Converting", unit="file",
                  disable=not show_progress) as pbar:
            for source in expanded:
                pbar.set_postfix_str(Path(source).name)
                try:
                    toon_text = self.convert_source(source)
                    converted.append(self.save_to_toon(toon_text, self.output_path_for(source)))
                except (JsonParseError, ToonError, FetchError, OSError, UnicodeError) as e:
                    logger.error(f"Failed to convert {source}: {e}")
                    failed[source] = str(e)
                pbar.update(1)

        logger.info(f"Converted {len(converted)} of {len(expanded)} documents")
        return {"converted": converted, "failed": failed}
