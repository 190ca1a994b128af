"""Note Builder: .brev source -> Note.

Two failure policies apply, and they are kept separate:

- A line that does not look like an element line is logged and skipped;
  the rest of the note still renders.
- Malformed metadata or an element that fails validation aborts the whole
  conversion. No partial HTML is returned.
"""

import logging
from pathlib import Path

from brevity.errors import InvalidElementError
from brevity.parsers.brev_parser import parse_brev
from brevity.parsers.line_parser import parse_note_text
from brevity.schemas.note_schema import Note, ParsedLine, ParsedNote, ResolvedElement
from brevity.schemas.settings import ConverterSettings

from .metadata import get_full_metadata, validate_element
from .renderer import render_element

logger = logging.getLogger(__name__)


class NoteBuilder:
    """Convert .brev notes to HTML using a fixed element schema."""

    def __init__(self, settings: ConverterSettings | None = None):
        self.settings = settings or ConverterSettings()

    def convert_text(self, text: str) -> Note:
        """Convert the full text of a note."""
        return self.build(parse_note_text(text))

    def convert_file(self, path: str | Path) -> Note:
        """Read and convert a note file.

        I/O errors propagate before any parsing happens.
        """
        return self.build(parse_brev(path))

    def build(self, parsed: ParsedNote) -> Note:
        """Validate, resolve and render every parsed line in source order."""
        fragments: list[str] = []
        for line in parsed.lines:
            element = self.resolve(line)
            fragments.append(render_element(element, escape_content=self.settings.escape_content))

        note = Note(title=parsed.title, html="".join(fragments))
        logger.info(
            f"Converted note '{note.title}': {len(parsed.lines)} elements, "
            f"{len(parsed.skipped)} skipped"
        )
        return note

    @staticmethod
    def resolve(line: ParsedLine) -> ResolvedElement:
        """Validate a parsed line and complete its metadata.

        Raises:
            InvalidElementError: if the element fails schema validation.
        """
        if not validate_element(line.identifier, line.raw_metadata):
            raise InvalidElementError(line.line_number, line.identifier)

        return ResolvedElement(
            identifier=line.identifier,
            metadata=get_full_metadata(line.identifier, line.raw_metadata),
            content=line.content,
        )


def brev_to_html(path: str | Path, settings: ConverterSettings | None = None) -> Note:
    """Convert a .brev file into a Note (title + HTML fragment)."""
    return NoteBuilder(settings).convert_file(path)
