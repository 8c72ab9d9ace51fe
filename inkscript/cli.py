"""
Command-line front end.

Usage:
    inkscript NOTEBOOK_DIR [-o DIR|-] [-f txt|md] [-l en|de] [--config PATH] [--no-cache] [-v]

Writes <title>.<format> into the output directory, or to stdout with "-o -".
Progress goes to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from inkscript.compose import get_composer, supported_formats
from inkscript.config import LANGUAGES, load_settings
from inkscript.convert import convert
from inkscript.exceptions import InkScriptError
from inkscript.readers.local import read_document
from inkscript.recognition.recognizer import Recognizer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inkscript",
        description="Convert handwritten notebooks to plain text or Markdown",
    )
    parser.add_argument("notebook", type=Path, help="Exported notebook directory")
    parser.add_argument(
        "-o",
        "--output",
        default=".",
        help="Output directory, or '-' for stdout (default: current directory)",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="fmt",
        choices=supported_formats(),
        default="txt",
        help="Output format (default: txt)",
    )
    parser.add_argument(
        "-l",
        "--language",
        choices=sorted(LANGUAGES),
        default=None,
        help="Recognition language (default: from settings)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Settings file")
    parser.add_argument(
        "--no-cache", action="store_true", help="Do not read or write cached results"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def output_filename(title: str, extension: str) -> str:
    """File name for a notebook title; path separators are replaced."""
    name = title.strip().replace("/", "_").replace("\\", "_") or "untitled"
    return f"{name}.{extension}"


def run(args: argparse.Namespace) -> None:
    settings = load_settings(args.config)
    document = read_document(args.notebook)
    extension = get_composer(args.fmt).extension

    progress(f"Converting {document.title!r} ({len(document.pages())} pages)")

    with Recognizer.from_settings(settings, use_cache=not args.no_cache) as recognizer:
        if args.output == "-":
            convert(document, recognizer, sys.stdout, fmt=args.fmt, language=args.language)
            sys.stdout.flush()
            return

        out_dir = Path(args.output).expanduser()
        out_dir.mkdir(parents=True, exist_ok=True)
        out_path = out_dir / output_filename(document.title, extension)
        with open(out_path, "w", encoding="utf-8") as f:
            convert(document, recognizer, f, fmt=args.fmt, language=args.language)

        stats = recognizer.last_stats
        progress(
            f"Wrote {out_path} ({stats.cache_hits} cached, {stats.remote_calls} recognized)"
        )


def progress(message: str) -> None:
    print(message, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        run(args)
    except (InkScriptError, OSError) as e:
        print(f"inkscript: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
