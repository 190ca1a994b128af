"""Command-line interface: convert a .brev note to HTML.

Usage:
    brev2html notes/today.brev
    brev2html notes/today.brev -o out/today.html --format document
    brev2html notes/today.brev --format json --config config/default.yaml
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

import yaml

from brevity.errors import BrevError
from brevity.html_engine.note_builder import NoteBuilder
from brevity.html_engine.renderer import render_document
from brevity.schemas.note_schema import Note
from brevity.schemas.settings import ConverterSettings
from brevity.utils.file_utils import write_text_file

logger = logging.getLogger(__name__)


def _as_html(note: Note, settings: ConverterSettings) -> str:
    return note.html


def _as_json(note: Note, settings: ConverterSettings) -> str:
    return note.model_dump_json(indent=2)


def _as_document(note: Note, settings: ConverterSettings) -> str:
    return render_document(note, lang=settings.document_lang)


_FORMAT_MAP: dict[str, Callable[[Note, ConverterSettings], str]] = {
    "html": _as_html,
    "json": _as_json,
    "document": _as_document,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="brev2html", description="Convert a .brev note to HTML")
    parser.add_argument("input_file", type=Path, help="Input note path (usually .brev)")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output file path (default: stdout)")
    parser.add_argument("--format", choices=list(_FORMAT_MAP.keys()), default="html",
                        help="Output format (default: html)")
    parser.add_argument("--config", type=Path, default=None, help="Settings YAML file")
    parser.add_argument("--escape-content", action="store_true",
                        help="HTML-escape element content before insertion")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    try:
        settings = ConverterSettings.from_yaml(args.config) if args.config else ConverterSettings()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    if args.escape_content:
        settings = settings.model_copy(update={"escape_content": True})

    logging.basicConfig(
        level=getattr(logging, args.log_level or settings.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.input_file.exists():
        logger.error(f"Input file not found: {args.input_file}")
        return 1

    try:
        note = NoteBuilder(settings).convert_file(args.input_file)
    except BrevError as e:
        logger.error(f"Conversion failed: {e}")
        return 2
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {args.input_file}: {e}")
        return 1

    text = _FORMAT_MAP[args.format](note, settings)

    if args.output is None:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")
    else:
        write_text_file(text, args.output)
        logger.info(f"Wrote {args.format} output to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
