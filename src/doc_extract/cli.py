from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ConfigurationError, ExtractionError
from .options import options_to_payload
from .pipeline import DocumentPipeline

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_config_file(config_path: Path) -> Dict[str, Any]:
    with config_path.open("r", encoding="utf-8") as f:
        if config_path.suffix in ['.yaml', '.yml']:
            return yaml.safe_load(f) or {}
        return json.load(f)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="doc-extract", description="Extract text and metadata from a document.")
    parser.add_argument("source", help="File path, or URL with --url.")
    parser.add_argument("--url", action="store_true", help="Treat SOURCE as a URL.")
    parser.add_argument("--xml", action="store_true", default=None, help="Return XML instead of plain text.")
    parser.add_argument("--max-length", type=int, default=None, help="Maximum length of extracted text.")
    parser.add_argument("--encoding", type=str, default=None, help="UTF-8, UTF-16BE or US-ASCII.")
    parser.add_argument("--config", type=str, default=None, help="JSON configuration payload.")
    parser.add_argument("--config-file", type=str, default=None, help="JSON or YAML configuration file.")
    parser.add_argument("--metadata", action="store_true", help="Also print the metadata.")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        default=os.getenv("DOC_EXTRACT_LOG_LEVEL", "WARNING").upper())
    return parser


def _payload_from_args(args: argparse.Namespace) -> Optional[str]:
    sources = [args.config is not None, args.config_file is not None]
    flags = {"xml": args.xml, "max_length": args.max_length, "encoding": args.encoding}
    if sum(sources) > 1 or (any(sources) and any(v is not None for v in flags.values())):
        raise ValueError("Use only one of --config, --config-file or individual option flags")

    if args.config is not None:
        return args.config
    if args.config_file is not None:
        return json.dumps(load_config_file(Path(args.config_file)))
    return options_to_payload(**flags)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check a defaulted value against choices.
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid DOC_EXTRACT_LOG_LEVEL: {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")

    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        payload = _payload_from_args(args)
    except (ValueError, TypeError, OSError, yaml.YAMLError) as e:
        parser.error(str(e))

    try:
        pipeline = DocumentPipeline.from_payload(payload)
        if args.url:
            result = pipeline.extract_from_url(args.source)
        else:
            result = pipeline.extract_from_file(args.source)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except ExtractionError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(result.content)
    if args.metadata:
        print("\n--- Metadata ---")
        print(result.metadata)
    return 0


if __name__ == "__main__":
    sys.exit(main())
