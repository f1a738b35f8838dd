"""
Main entry point for the JSON to TOON converter.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import config
from converter.toon_converter import ToonConverter
from source.json_client import FetchError
from source.json_loader import STDIN_SOURCE, JsonParseError
from toon import ToonError

logger = logging.getLogger(__name__)

STDOUT_TARGET = "-"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """Configure logging; stdout is reserved for TOON output."""
    level = level or config.LOG_LEVEL
    log_file = config.LOG_FILE if log_file is None else log_file
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=config.LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json2toon",
        description="Convert JSON documents into TOON, a compact table-aware notation."
    )
    parser.add_argument(
        "sources", nargs="*", metavar="SOURCE",
        help="JSON file, directory of .json files, http(s) URL, or - for stdin (default: -)"
    )
    parser.add_argument(
        "-o", "--output", metavar="FILE",
        help="write a single result to FILE instead of stdout (- for stdout)"
    )
    parser.add_argument(
        "--output-dir", metavar="DIR", type=Path,
        help=f"write one {config.OUTPUT_EXTENSION} file per source into DIR"
    )
    parser.add_argument(
        "--sample", action="store_true",
        help="convert the built-in sample document"
    )
    parser.add_argument(
        "--max-depth", type=int, default=config.MAX_DEPTH,
        help=f"maximum nesting depth (default: {config.MAX_DEPTH})"
    )
    parser.add_argument(
        "--log-level", default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper,
        help="logging verbosity"
    )
    parser.add_argument(
        "--no-progress", action="store_true",
        help="hide the progress bar for batch conversions"
    )
    return parser


def _emit(converter: ToonConverter, toon_text: str, output: Optional[str]):
    if output is None or output == STDOUT_TARGET:
        sys.stdout.write(toon_text + "\n")
    else:
        converter.save_to_toon(toon_text, output)


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    sources = args.sources
    if args.sample and sources:
        parser.error("--sample cannot be combined with sources")
    if not args.sample and not sources:
        sources = [STDIN_SOURCE]
    batch = args.output_dir is not None or len(sources) > 1
    if batch and args.output:
        parser.error("--output only applies to a single source; use --output-dir")

    setup_logging(args.log_level)
    converter = ToonConverter(
        output_dir=args.output_dir or config.DATA_DIR,
        max_depth=args.max_depth
    )

    try:
        if args.sample:
            logger.info("Converting built-in sample document")
            _emit(converter, converter.convert_text(config.SAMPLE_JSON, source="sample"), args.output)
        elif not batch:
            _emit(converter, converter.convert_source(sources[0]), args.output)
        else:
            summary = converter.convert_many(sources, show_progress=not args.no_progress)
            if summary["failed"]:
                logger.error(f"{len(summary['failed'])} source(s) failed to convert")
                return 1
    except KeyboardInterrupt:
        logger.warning("Conversion interrupted by user.")
        return 130
    except (JsonParseError, ToonError, FetchError, OSError, UnicodeError) as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
